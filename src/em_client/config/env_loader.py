"""
Hierarchical .env file loading for em-cli.

The first .env file found is loaded into the process environment before
settings are read, so ``EM_CLI_*`` variables can live next to a project.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional
import logging

from dotenv import dotenv_values, load_dotenv

logger = logging.getLogger(__name__)


class EnvFileLoader:
    """
    .env file loader with hierarchical search.

    Search order (stops at first file found):
    1. Current directory: .em-cli/.env → .env
    2. Parent directories (up to git root or home): .em-cli/.env → .env
    3. Home directory: ~/.em-cli/.env → ~/.env
    """

    CONFIG_DIR_NAME = ".em-cli"
    ENV_FILE_NAME = ".env"

    def __init__(self, working_directory: Optional[Path] = None):
        """Initialize env file loader.

        Args:
            working_directory: Starting directory for search
        """
        self.working_directory = Path(working_directory or Path.cwd()).resolve()
        self._loaded_file: Optional[Path] = None
        self._loaded_vars: Dict[str, str] = {}

    def load_env_file(self) -> Optional[Path]:
        """Load environment variables from the first .env file found.

        Variables already present in the environment are not overridden.

        Returns:
            Path to loaded .env file or None if none found
        """
        env_file_path = self._find_env_file()
        if env_file_path is None:
            logger.debug("No .env file found in search path")
            return None

        try:
            values = dotenv_values(env_file_path)
            load_dotenv(env_file_path, override=False)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not load .env file {env_file_path}: {e}")
            return None

        self._loaded_file = env_file_path
        self._loaded_vars = {k: v for k, v in values.items() if v is not None}
        logger.info(f"Loaded environment variables from: {env_file_path}")
        return env_file_path

    def get_loaded_file(self) -> Optional[Path]:
        return self._loaded_file

    def get_loaded_vars(self) -> Dict[str, str]:
        """Variables defined by the loaded file, whether or not they took effect."""
        return self._loaded_vars.copy()

    def get_search_paths(self) -> List[Path]:
        """Get list of all paths that would be searched for .env files.

        Returns:
            List of search paths in order
        """
        search_paths = []
        current_dir = self.working_directory

        while True:
            search_paths.append(current_dir / self.CONFIG_DIR_NAME / self.ENV_FILE_NAME)
            search_paths.append(current_dir / self.ENV_FILE_NAME)

            if self._should_stop_search(current_dir) or current_dir == current_dir.parent:
                break
            current_dir = current_dir.parent

        home_dir = Path.home()
        for candidate in (
            home_dir / self.CONFIG_DIR_NAME / self.ENV_FILE_NAME,
            home_dir / self.ENV_FILE_NAME,
        ):
            if candidate not in search_paths:
                search_paths.append(candidate)

        return search_paths

    def _find_env_file(self) -> Optional[Path]:
        for candidate in self.get_search_paths():
            if candidate.is_file():
                return candidate
        return None

    def _should_stop_search(self, directory: Path) -> bool:
        # git repository root or home directory
        if (directory / ".git").exists():
            return True
        return directory == Path.home()


def load_env_with_hierarchy(working_directory: Optional[Path] = None) -> Optional[EnvFileLoader]:
    """Convenience function to load .env file with hierarchical search.

    Setting ``EM_CLI_NO_DOTENV`` disables the search entirely.

    Returns:
        The loader, for inspecting what was loaded, or None when disabled
    """
    if os.environ.get("EM_CLI_NO_DOTENV"):
        return None
    loader = EnvFileLoader(working_directory)
    loader.load_env_file()
    return loader
