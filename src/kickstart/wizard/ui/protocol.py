"""
Renderer Protocol - Abstract interface for wizard renderers.

This module defines the contract between the wizard engine and whatever
draws prompts on screen. The engine never renders directly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from kickstart.wizard.answers import Answers, Signal


@dataclass
class Choice:
    """A selectable row in a choice prompt."""

    label: str
    value: Any
    description: str | None = None
    disabled: bool = False


@dataclass
class Separator:
    """A non-selectable divider row."""

    line: str = "──────────────"


ChoiceRow = Choice | Separator


class Renderer(ABC):
    """Abstract base class for wizard renderers.

    Implementations draw the answer summary, step headers and prompts, and
    report which value the user picked.
    """

    @abstractmethod
    def refresh_display(self, answers: Answers) -> None:
        """Redraw the screen with the selections made so far."""
        ...

    @abstractmethod
    def show_step_header(self, position: int, total: int, title: str, icon: str = "•") -> None:
        """Show the header for a step. ``position`` is informational only."""
        ...

    @abstractmethod
    async def prompt_choice(
        self, message: str, choices: list[ChoiceRow], default_index: int = 0
    ) -> Any:
        """Ask the user to pick one of ``choices`` and return its value.

        Raises:
            PromptAbortedError: If the user aborted the prompt.
        """
        ...

    def create_separator(self) -> Separator:
        """Create a divider for choice lists."""
        return Separator()

    def create_back_option(self) -> Choice:
        """Create the distinguished "go back" entry."""
        return Choice(label="← Back to previous step", value=Signal.BACK_OPTION)

    @abstractmethod
    def show_completion(self) -> None:
        """Show the final completion notice."""
        ...

    @abstractmethod
    def show_warning(self, message: str) -> None:
        """Show an inline warning below the current step."""
        ...

    @abstractmethod
    def show_notice(self, message: str) -> None:
        """Show an inline informational note below the current step."""
        ...
