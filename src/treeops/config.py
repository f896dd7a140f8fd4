"""Configuration utilities."""

from __future__ import annotations

import importlib.metadata
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from treeops.tree.protocol import SearchOrder, parse_order

# Load .env file from the project root if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)
    logging.info(f"Loaded environment variables from {env_path} using python-dotenv")
else:
    logging.debug(
        f"No .env file found at {env_path}, using only system environment variables"
    )


def is_ci_environment() -> bool:
    """Check if running in a CI environment."""
    return bool(os.getenv("CI", "false").lower() in ("yes", "true", "t", "1"))


def get_version() -> str:
    """Get the version information of the treeops package.

    Returns:
        str: The package version, or "unknown" when not installed
    """
    try:
        return importlib.metadata.version("treeops")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_default_order() -> SearchOrder:
    """Get the default enumeration order from environment.

    Reads TREEOPS_DEFAULT_ORDER. Unset or invalid values fall back to
    depth-first.

    Returns:
        SearchOrder: The configured order
    """
    value = os.getenv("TREEOPS_DEFAULT_ORDER")
    if not value:
        return SearchOrder.DEPTH_FIRST
    try:
        return parse_order(value.strip().lower())
    except ValueError as e:
        logging.warning(f"Ignoring TREEOPS_DEFAULT_ORDER: {e}")
        return SearchOrder.DEPTH_FIRST


def get_log_level(default: str = "INFO") -> str:
    """Get the CLI log level name from environment, or return default if not set."""
    return os.getenv("TREEOPS_LOG_LEVEL", default).upper()
