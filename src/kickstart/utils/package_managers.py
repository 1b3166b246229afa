"""
Package manager detection.

Finds which JavaScript package managers are installed so the wizard can
offer only those. Installing dependencies is not handled here.
"""

import logging
import shutil
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SUPPORTED_PACKAGE_MANAGERS = ("npm", "yarn")

DETECTION_TIMEOUT = 10  # seconds


@dataclass
class PackageManagerInfo:
    """Detection result for one package manager."""

    available: bool = False
    version: str | None = None
    recommended: bool = False
    error: str | None = None


def _detect_one(name: str) -> PackageManagerInfo:
    info = PackageManagerInfo()

    executable = shutil.which(name)
    if executable is None:
        info.error = "Not installed"
        return info

    try:
        completed = subprocess.run(
            [executable, "--version"],
            capture_output=True,
            text=True,
            timeout=DETECTION_TIMEOUT,
            check=True,
        )
    except subprocess.TimeoutExpired:
        info.error = f"Timed out after {DETECTION_TIMEOUT}s"
    except (subprocess.CalledProcessError, OSError) as e:
        info.error = str(e)
    else:
        info.available = True
        info.version = completed.stdout.strip()

    return info


def detect_package_managers() -> dict[str, PackageManagerInfo]:
    """Detect installed package managers.

    Yarn is recommended when available, npm otherwise.

    Returns:
        Mapping of manager name to detection result.
    """
    managers = {name: _detect_one(name) for name in SUPPORTED_PACKAGE_MANAGERS}

    if managers["yarn"].available:
        managers["yarn"].recommended = True
    elif managers["npm"].available:
        managers["npm"].recommended = True

    for name, info in managers.items():
        if info.available:
            logger.debug(
                "Detected %s v%s%s", name, info.version, " (recommended)" if info.recommended else ""
            )
        else:
            logger.debug("%s not available: %s", name, info.error or "Not installed")

    return managers


def default_package_manager(managers: Mapping[str, PackageManagerInfo]) -> str:
    """Pick the preselected package manager: npm, then yarn, then npm anyway."""
    for name in ("npm", "yarn"):
        info = managers.get(name)
        if info is not None and info.available:
            return name
    return "npm"

