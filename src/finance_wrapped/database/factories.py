"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from finance_wrapped.database.json_db import JSONDatabase

DATA_DIR_ENV = "FINWRAP_HOME"
DEFAULT_DIR_NAME = ".finance-wrapped"


def resolve_data_dir(data_dir: Optional[str] = None) -> Path:
    """Resolve the application data directory.

    Args:
        data_dir: Explicit directory. If None, checks the FINWRAP_HOME
            environment variable, then defaults to ~/.finance-wrapped

    Returns:
        Path to the data directory (not yet created)
    """
    if data_dir is None:
        data_dir = os.environ.get(DATA_DIR_ENV)

    if data_dir is None:
        return Path.home() / DEFAULT_DIR_NAME

    return Path(data_dir).expanduser()


def create_json_database(data_dir: Optional[str] = None) -> JSONDatabase:
    """Create a JSON file database instance.

    Args:
        data_dir: Directory for the store files; see ``resolve_data_dir``

    Returns:
        JSONDatabase rooted at the resolved directory
    """
    return JSONDatabase(resolve_data_dir(data_dir))
