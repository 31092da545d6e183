"""
Main CLI application entry point.

This module contains the Typer application for em-cli. Every subcommand
maps its arguments onto one Enclave Manager client call and prints the
result as JSON.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, NoReturn, Optional
from uuid import UUID
import logging
import sys

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from em_client import VERSION
from em_client.cli.output import print_json
from em_client.config.env_loader import load_env_with_hierarchy
from em_client.config.login_store import (
    LoginData,
    LoginDataError,
    clear_login_data,
    load_login_data,
    store_login_data,
)
from em_client.config.settings import EmCliSettings, get_settings
from em_client.core.client import Client, EmClientError, describe_error
from em_client.core.sigstruct import SigstructError, build_request_from_sigstruct
from em_client.models import (
    AccountRequest,
    AppBodyUpdateRequest,
    AppRequest,
    ApprovalStatus,
    SignupRequest,
    TaskUpdateRequest,
)

logger = logging.getLogger(__name__)

# Create the main Typer application
app = typer.Typer(
    name="em-cli",
    help="em-cli - command-line client for Enclave Manager",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)
user_app = typer.Typer(help="Log in, sign up and inspect the current user", no_args_is_help=True)
account_app = typer.Typer(help="Manage accounts", no_args_is_help=True)
app_app = typer.Typer(help="Manage applications", no_args_is_help=True)
build_app = typer.Typer(help="Manage enclave builds", no_args_is_help=True)
task_app = typer.Typer(help="Review and approve tasks", no_args_is_help=True)
zone_app = typer.Typer(help="Inspect zones", no_args_is_help=True)
node_app = typer.Typer(help="Inspect compute nodes", no_args_is_help=True)
system_app = typer.Typer(help="Enclave Manager system information", no_args_is_help=True)
config_app = typer.Typer(help="Inspect em-cli configuration", no_args_is_help=True)

app.add_typer(user_app, name="user")
app.add_typer(account_app, name="account")
app.add_typer(app_app, name="app")
app.add_typer(build_app, name="build")
app.add_typer(task_app, name="task")
app.add_typer(zone_app, name="zone")
app.add_typer(node_app, name="node")
app.add_typer(system_app, name="system")
app.add_typer(config_app, name="config")

# Rich consoles: messages on stdout, errors on stderr
console = Console()
err_console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold blue]em-cli[/bold blue] version [green]{VERSION}[/green]")
        raise typer.Exit()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """
    em-cli - command-line client for Enclave Manager.

    Log in once with [bold]em-cli user login[/bold]; later commands reuse
    the stored session and print their results as JSON.
    """
    ctx.obj = {"env_loader": load_env_with_hierarchy()}
    settings = _load_settings()

    level = (log_level or settings.effective_log_level).upper()
    if debug:
        level = "DEBUG"
    if level not in VALID_LOG_LEVELS:
        raise typer.BadParameter(
            f"Invalid log level '{log_level}'. Valid levels: {', '.join(VALID_LOG_LEVELS)}",
            param_hint="--log-level",
        )
    _configure_logging(level)


# Helpers

def _fail(message: str) -> NoReturn:
    err_console.print("[red]Error:[/red]", escape(message), soft_wrap=True)
    raise typer.Exit(1)


def _load_settings() -> EmCliSettings:
    try:
        return get_settings()
    except ValidationError as e:
        _fail(f"Invalid configuration: {e}")


@contextmanager
def command_errors(action: str) -> Iterator[None]:
    """Turn client failures into an error message and exit status 1."""
    try:
        yield
    except (LoginDataError, SigstructError) as e:
        _fail(e.message)
    except EmClientError as e:
        logger.debug(f"{action} failed", exc_info=e)
        _fail(f"{action} failed: {describe_error(e)}")
    except ValueError as e:
        _fail(str(e))


def parse_uuid(value: str, action: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as e:
        raise ValueError(f'{action} UUID parsing failed for "{value}": {e}') from e


def split_domains(value: str) -> List[str]:
    return [domain.strip() for domain in value.split(",") if domain.strip()]


def create_client(
    url: str,
    token: Optional[str] = None,
    root_ca_pem: Optional[str] = None,
    settings: Optional[EmCliSettings] = None,
) -> Client:
    """Construct an API client for the given Enclave Manager URL."""
    settings = settings or _load_settings()
    return Client(
        url,
        scheme=settings.url_scheme,
        token=token,
        root_ca_pem=root_ca_pem,
        timeout=settings.timeout,
    )


def get_cached_client() -> Client:
    """Client authenticated with the session stored by `user login`."""
    settings = _load_settings()
    data = load_login_data(settings.login_file)
    return create_client(
        data.url, token=data.token, root_ca_pem=data.root_ca_str, settings=settings
    )


def _read_root_ca(path: Optional[Path]) -> Optional[str]:
    if path is None:
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Failed reading root-ca certificate {path}: {e}") from e


def _root_ca_option():
    return typer.Option(
        None,
        "--add-root-ca",
        help="PEM file with an additional trusted root CA",
        dir_okay=False,
    )


# User commands

@user_app.command("login")
def user_login(
    url: str = typer.Argument(..., help="Enclave Manager URL, e.g. https://em.example.com"),
    username: str = typer.Argument(..., help="User email"),
    password: str = typer.Argument(..., help="Password"),
    add_root_ca: Optional[Path] = _root_ca_option(),
) -> None:
    """Log in and store the session for later commands."""
    settings = _load_settings()
    with command_errors("authenticate-user"):
        root_ca = _read_root_ca(add_root_ca)
        with create_client(url, root_ca_pem=root_ca, settings=settings) as client:
            token = client.login(username, password)
        store_login_data(
            settings.login_file,
            LoginData(url=url, token=token, root_ca_str=root_ca),
        )
    console.print("Logged in.")


@user_app.command("create")
def user_create(
    url: str = typer.Argument(..., help="Enclave Manager URL"),
    username: str = typer.Argument(..., help="User email"),
    password: str = typer.Argument(..., help="Password"),
    add_root_ca: Optional[Path] = _root_ca_option(),
) -> None:
    """Sign up a new user."""
    with command_errors("create-user"):
        with create_client(url, root_ca_pem=_read_root_ca(add_root_ca)) as client:
            result = client.create_user(
                SignupRequest(user_email=username, user_password=password)
            )
    print_json(result)


@user_app.command("whoami")
def user_whoami() -> None:
    """Show the logged-in user."""
    with command_errors("get-logged-in-user"):
        with get_cached_client() as client:
            result = client.get_logged_in_user()
    print_json(result)


@user_app.command("logout")
def user_logout() -> None:
    """Forget the stored session."""
    settings = _load_settings()
    with command_errors("logout"):
        removed = clear_login_data(settings.login_file)
    console.print("Logged out." if removed else "Not logged in.")


# Account commands

@account_app.command("list")
def account_list() -> None:
    """List accounts of the logged-in user."""
    with command_errors("get-accounts"):
        with get_cached_client() as client:
            result = client.get_accounts()
    print_json(result)


@account_app.command("get")
def account_get(account_id: str = typer.Argument(..., help="Account UUID")) -> None:
    """Show one account."""
    with command_errors("get-account"):
        account_uuid = parse_uuid(account_id, "get-account")
        with get_cached_client() as client:
            result = client.get_account(account_uuid)
    print_json(result)


@account_app.command("create")
def account_create(name: str = typer.Argument(..., help="Account name")) -> None:
    """Create an account."""
    with command_errors("create-account"):
        with get_cached_client() as client:
            result = client.create_account(AccountRequest(name=name))
    print_json(result)


@account_app.command("select")
def account_select(account_id: str = typer.Argument(..., help="Account UUID")) -> None:
    """Select the account later commands operate on."""
    with command_errors("select-account"):
        account_uuid = parse_uuid(account_id, "select-account")
        with get_cached_client() as client:
            client.select_account(account_uuid)
    console.print("Account selected.")


# Application commands

@app_app.command("list")
def app_list() -> None:
    """List applications in the selected account."""
    with command_errors("get-all-apps"):
        with get_cached_client() as client:
            result = client.get_all_apps()
    print_json(result)


@app_app.command("get")
def app_get(app_id: str = typer.Argument(..., help="Application UUID")) -> None:
    """Show one application."""
    with command_errors("get-app"):
        app_uuid = parse_uuid(app_id, "get-app")
        with get_cached_client() as client:
            result = client.get_app(app_uuid)
    print_json(result)


@app_app.command("create")
def app_create(
    name: str = typer.Argument(..., help="Application name"),
    isvprodid: int = typer.Argument(..., help="ISVPRODID", min=0, max=65535),
    isvsvn: int = typer.Argument(..., help="ISVSVN", min=0, max=65535),
    allowed_domains: Optional[str] = typer.Argument(
        None, help="Comma-separated domains the application may request certificates for"
    ),
) -> None:
    """Create an application with default image, memory and thread settings."""
    settings = _load_settings()
    request = AppRequest(
        name=name,
        input_image_name=settings.edp_image_name,
        output_image_name=settings.edp_image_name,
        isvprodid=isvprodid,
        isvsvn=isvsvn,
        mem_size=settings.app_mem_size,
        threads=settings.app_threads,
        allowed_domains=split_domains(allowed_domains) if allowed_domains else None,
    )
    with command_errors("add-application"):
        with get_cached_client() as client:
            result = client.add_application(request)
    print_json(result)


@app_app.command("update")
def app_update(
    app_id: str = typer.Argument(..., help="Application UUID"),
    allowed_domains: str = typer.Option(
        ..., "--allowed-domains", help="Comma-separated list replacing the allowed domains"
    ),
) -> None:
    """Replace the allowed domains of an application."""
    with command_errors("update-app"):
        app_uuid = parse_uuid(app_id, "update-app")
        request = AppBodyUpdateRequest(allowed_domains=split_domains(allowed_domains))
        with get_cached_client() as client:
            result = client.update_app(app_uuid, request)
    print_json(result)


# Build commands

@build_app.command("list")
def build_list() -> None:
    """List builds."""
    with command_errors("get-all-builds"):
        with get_cached_client() as client:
            result = client.get_all_builds()
    print_json(result)


@build_app.command("get")
def build_get(build_id: str = typer.Argument(..., help="Build UUID")) -> None:
    """Show one build."""
    with command_errors("get-build"):
        build_uuid = parse_uuid(build_id, "get-build")
        with get_cached_client() as client:
            result = client.get_build(build_uuid)
    print_json(result)


@build_app.command("create")
def build_create(
    app_id: str = typer.Argument(..., help="Application UUID the build belongs to"),
    sigstruct: Path = typer.Argument(..., help="Path to the enclave SIGSTRUCT", dir_okay=False),
) -> None:
    """Register a build from its SIGSTRUCT."""
    with command_errors("create-build"):
        app_uuid = parse_uuid(app_id, "create-build")
        request = build_request_from_sigstruct(sigstruct, app_id=app_uuid)
        with get_cached_client() as client:
            result = client.create_build(request)
    print_json(result)


@build_app.command("delete")
def build_delete(build_id: str = typer.Argument(..., help="Build UUID")) -> None:
    """Delete a build."""
    with command_errors("delete-build"):
        build_uuid = parse_uuid(build_id, "delete-build")
        with get_cached_client() as client:
            client.delete_build(build_uuid)
    console.print("Delete successful")


@build_app.command("parse-sigstruct")
def build_parse_sigstruct(
    sigstruct: Path = typer.Argument(..., help="Path to the enclave SIGSTRUCT", dir_okay=False),
) -> None:
    """Print the build request a SIGSTRUCT would produce, without contacting the server."""
    with command_errors("parse-sigstruct"):
        request = build_request_from_sigstruct(sigstruct)
    print_json(request)


# Task commands

@task_app.command("list")
def task_list() -> None:
    """List tasks."""
    with command_errors("get-all-tasks"):
        with get_cached_client() as client:
            result = client.get_all_tasks()
    print_json(result)


@task_app.command("get")
def task_get(task_id: str = typer.Argument(..., help="Task UUID")) -> None:
    """Show one task."""
    with command_errors("get-task"):
        task_uuid = parse_uuid(task_id, "get-task")
        with get_cached_client() as client:
            result = client.get_task(task_uuid)
    print_json(result)


@task_app.command("update")
def task_update(
    task_id: str = typer.Argument(..., help="Task UUID"),
    status: str = typer.Argument(..., help="approved or denied"),
) -> None:
    """Approve or deny a task."""
    with command_errors("update-task"):
        task_uuid = parse_uuid(task_id, "update-task")
        try:
            approval = ApprovalStatus(status.upper())
        except ValueError:
            raise ValueError(f"expected approved or denied as parameter, got: {status}") from None
        with get_cached_client() as client:
            result = client.update_task(task_uuid, TaskUpdateRequest(status=approval))
    print_json(result)


# Zone commands

@zone_app.command("list")
def zone_list() -> None:
    """List zones."""
    with command_errors("get-zones"):
        with get_cached_client() as client:
            result = client.get_zones()
    print_json(result)


@zone_app.command("get")
def zone_get(zone_id: str = typer.Argument(..., help="Zone UUID")) -> None:
    """Show one zone."""
    with command_errors("get-zone"):
        zone_uuid = parse_uuid(zone_id, "get-zone")
        with get_cached_client() as client:
            result = client.get_zone(zone_uuid)
    print_json(result)


@zone_app.command("get-join-token")
def zone_get_join_token(zone_id: str = typer.Argument(..., help="Zone UUID")) -> None:
    """Get the token new nodes use to join a zone."""
    with command_errors("get-zone-join-token"):
        zone_uuid = parse_uuid(zone_id, "get-zone-join-token")
        with get_cached_client() as client:
            result = client.get_zone_join_token(zone_uuid)
    print_json(result)


# Node commands

@node_app.command("list")
def node_list() -> None:
    """List compute nodes."""
    with command_errors("get-all-nodes"):
        with get_cached_client() as client:
            result = client.get_all_nodes()
    print_json(result)


@node_app.command("get")
def node_get(node_id: str = typer.Argument(..., help="Node UUID")) -> None:
    """Show one compute node."""
    with command_errors("get-node"):
        node_uuid = parse_uuid(node_id, "get-node")
        with get_cached_client() as client:
            result = client.get_node(node_uuid)
    print_json(result)


# System and configuration

@system_app.command("version")
def system_version() -> None:
    """Show the Enclave Manager version."""
    with command_errors("get-manager-version"):
        with get_cached_client() as client:
            result = client.get_manager_version()
    print_json(result)


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the effective em-cli settings."""
    settings = _load_settings()
    env_loader = (ctx.obj or {}).get("env_loader")

    table = Table(title="Current Configuration", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for key, value in settings.to_dict().items():
        table.add_row(key, str(value))

    if env_loader is None:
        table.add_row("env_file", "(disabled)")
    else:
        env_file = env_loader.get_loaded_file()
        table.add_row("env_file", str(env_file) if env_file else "(none)")
        env_vars = sorted(env_loader.get_loaded_vars())
        if env_vars:
            table.add_row("env_file_vars", ", ".join(env_vars))

    console.print(table)


def main() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
