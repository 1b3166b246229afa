"""
Path utilities for Kickstart.

Provides consistent path resolution for configuration and log files.
"""

import os
from pathlib import Path

PROJECT_CONFIG_NAME = ".kickstart.yaml"


def get_kickstart_home() -> Path:
    """
    Get the Kickstart home directory.

    Resolution order:
    1. KICKSTART_HOME environment variable
    2. Default: ~/.kickstart

    Returns:
        Path to the Kickstart home directory.
    """
    env_home = os.environ.get("KICKSTART_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".kickstart"


def get_global_config_path() -> Path:
    """
    Get the path to the global configuration file.

    Returns:
        Path to ~/.kickstart/config.yaml
    """
    return get_kickstart_home() / "config.yaml"


def get_log_path() -> Path:
    """
    Get the default log file path.

    Returns:
        Path to ~/.kickstart/kickstart.log
    """
    return get_kickstart_home() / "kickstart.log"


def find_project_config(start_path: Path | None = None) -> Path | None:
    """
    Find the project configuration file by traversing up the directory tree.

    Looks for .kickstart.yaml starting from the given path (or current
    directory) and moving up to the root.

    Args:
        start_path: Starting directory to search from. Defaults to cwd.

    Returns:
        Path to the project config file, or None if not found.
    """
    current = (start_path or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        candidate = directory / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate

    return None
