"""
Kickstart - interactive React project setup wizard.

Collects package manager, framework, language, styling and related choices
through a step-by-step terminal wizard with back navigation, and hands the
resulting answer set to project generators.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("kickstart")
except PackageNotFoundError:
    __version__ = "0.4.0"

__all__ = [
    "__version__",
]
