"""Storage path helpers for Kickstart."""

from kickstart.storage.paths import (
    find_project_config,
    get_global_config_path,
    get_kickstart_home,
    get_log_path,
)

__all__ = [
    "find_project_config",
    "get_global_config_path",
    "get_kickstart_home",
    "get_log_path",
]
