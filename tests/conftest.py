"""
Pytest configuration and fixtures for kickstart tests.
"""

import asyncio
import os
import tempfile
from collections.abc import Generator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from kickstart.wizard.answers import Answers
from kickstart.wizard.history import StepHistory
from kickstart.wizard.keyboard import KeyboardNavigator
from kickstart.wizard.ui.protocol import ChoiceRow, Renderer


@dataclass
class PromptCall:
    message: str
    choices: list[ChoiceRow]
    default_index: int


class ScriptedRenderer(Renderer):
    """Renderer double that answers prompts from a script.

    Each scripted response is returned as the selected value, or raised if
    it is an exception instance.
    """

    def __init__(self, responses: list[Any] | None = None):
        self.responses = list(responses or [])
        self.prompts: list[PromptCall] = []
        self.headers: list[tuple[int, int, str]] = []
        self.warnings: list[str] = []
        self.notices: list[str] = []
        self.refreshes = 0
        self.completed = False

    def refresh_display(self, answers: Answers) -> None:
        self.refreshes += 1

    def show_step_header(self, position: int, total: int, title: str, icon: str = "•") -> None:
        self.headers.append((position, total, title))

    async def prompt_choice(
        self, message: str, choices: list[ChoiceRow], default_index: int = 0
    ) -> Any:
        self.prompts.append(PromptCall(message, list(choices), default_index))
        if not self.responses:
            raise AssertionError(f"Unexpected prompt: {message}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def show_completion(self) -> None:
        self.completed = True

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_notice(self, message: str) -> None:
        self.notices.append(message)


class HangingRenderer(ScriptedRenderer):
    """Renderer double whose prompt never answers until cancelled."""

    def __init__(self) -> None:
        super().__init__()
        self.started = asyncio.Event()
        self.cancelled = False

    async def prompt_choice(
        self, message: str, choices: list[ChoiceRow], default_index: int = 0
    ) -> Any:
        self.prompts.append(PromptCall(message, list(choices), default_index))
        self.started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Keep tests away from the real ~/.kickstart, cwd and KICKSTART_* variables."""
    for key in list(os.environ):
        if key.startswith("KICKSTART_"):
            monkeypatch.delenv(key)

    home = tmp_path_factory.mktemp("kickstart-home")
    monkeypatch.setenv("KICKSTART_HOME", str(home))
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    return home


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def kickstart_home(isolated_environment: Path) -> Path:
    """The isolated KICKSTART_HOME directory."""
    return isolated_environment


@pytest.fixture
def renderer() -> ScriptedRenderer:
    return ScriptedRenderer()


@pytest.fixture
def history() -> StepHistory:
    return StepHistory()


@pytest.fixture
def keyboard() -> KeyboardNavigator:
    """A private keyboard coordinator, so tests never touch the shared one."""
    return KeyboardNavigator()


@pytest.fixture
def sample_config() -> dict:
    """Provide a sample configuration dictionary."""
    return {
        "wizard": {
            "back_keys": ["left"],
            "keyboard_shortcuts": True,
            "show_logo": False,
            "default_package_manager": "yarn",
        },
        "ui": {"color": False},
        "logging": {"level": "info"},
    }
