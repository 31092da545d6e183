"""Rendering of API results on stdout."""

import json
from typing import Any

import typer
from pydantic import BaseModel


def to_jsonable(result: Any) -> Any:
    """Convert models (or lists of models) to their wire representation."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(result, (list, tuple)):
        return [to_jsonable(item) for item in result]
    return result


def print_json(result: Any) -> None:
    """Print a result as pretty JSON with 2-space indentation."""
    typer.echo(json.dumps(to_jsonable(result), indent=2))
