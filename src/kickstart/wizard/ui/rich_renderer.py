"""
Rich + questionary renderer for the setup wizard.

Uses Rich for the screen (logo, selection summary, step headers) and
questionary select prompts for input. Back-navigation keystrokes are
bound on the prompt's prompt_toolkit application and forwarded to the
keyboard coordinator.
"""

from __future__ import annotations

import logging
from typing import Any

import questionary
from prompt_toolkit.key_binding import KeyBindings, merge_key_bindings
from rich.console import Console
from rich.text import Text

from kickstart.config.theme import (
    BACK_OPTION_STYLE,
    LOGO,
    LOGO_GRADIENT,
    STYLE,
    SUMMARY_COLORS,
    TAGLINE,
)
from kickstart.exceptions import PromptAbortedError
from kickstart.wizard.answers import AnswerField, Answers, Signal
from kickstart.wizard.keyboard import KeyboardNavigator, keyboard_navigator
from kickstart.wizard.ui.protocol import Choice, ChoiceRow, Renderer, Separator

logger = logging.getLogger(__name__)

# (field, label) pairs in summary order; booleans are shown as Yes/No
SUMMARY_ROWS = [
    (AnswerField.PACKAGE_MANAGER, "Package Manager"),
    (AnswerField.FRAMEWORK, "Framework"),
    (AnswerField.NEXT_ROUTING, "Next.js Routing"),
    (AnswerField.TYPESCRIPT, "TypeScript"),
    (AnswerField.LINTING, "Linting"),
    (AnswerField.STYLING, "Styling"),
    (AnswerField.ROUTING, "Routing"),
    (AnswerField.STATE_MANAGEMENT, "State Management"),
    (AnswerField.API, "API Setup"),
    (AnswerField.TESTING, "Testing"),
    (AnswerField.DEPLOYMENT, "Deployment"),
    (AnswerField.INIT_GIT, "Git Init"),
    (AnswerField.OPEN_EDITOR, "Open in Editor"),
    (AnswerField.EDITOR, "Editor"),
]


def summary_lines(answers: Answers) -> list[tuple[str, str, str]]:
    """Build (label, value, color) rows for the selections made so far."""
    rows = []
    for field, label in SUMMARY_ROWS:
        if field not in answers or answers[field] is None:
            continue
        if field is AnswerField.NEXT_ROUTING and answers.get(AnswerField.FRAMEWORK) != "nextjs":
            continue
        if field is AnswerField.EDITOR and not answers.get(AnswerField.OPEN_EDITOR):
            continue

        value = answers[field]
        if isinstance(value, bool):
            rows.append((label, "Yes" if value else "No", "green" if value else "red"))
        else:
            rows.append((label, str(value), SUMMARY_COLORS.get(field.value, "white")))
    return rows


class RichRenderer(Renderer):
    """Terminal renderer built on Rich and questionary."""

    def __init__(
        self,
        console: Console | None = None,
        keyboard: KeyboardNavigator | None = None,
        show_logo: bool = True,
    ):
        self.console = console or Console()
        self.keyboard = keyboard or keyboard_navigator
        self.show_logo = show_logo

    # --- Display ---

    def show_header(self) -> None:
        """Clear the terminal and show the logo."""
        self.console.clear()
        self.console.print()
        if self.show_logo:
            for index, line in enumerate(LOGO.strip("\n").split("\n")):
                color = LOGO_GRADIENT[index % len(LOGO_GRADIENT)]
                self.console.print(Text(line, style=f"bold {color}"))
            self.console.print()
        self.console.print(f"  [cyan]{TAGLINE}[/cyan]")
        self.console.print(f"  [cyan]{'-' * len(TAGLINE)}[/cyan]")
        self.console.print()

    def show_selection_summary(self, answers: Answers) -> None:
        rows = summary_lines(answers)
        if not rows:
            return

        self.console.print("[on blue]  Your selections so far:[/on blue]")
        for label, value, color in rows:
            self.console.print(f"  [dim]•[/dim] {label}: [{color}]{value}[/{color}]")
        self.console.print()

    def refresh_display(self, answers: Answers) -> None:
        self.show_header()
        self.show_selection_summary(answers)

    def show_step_header(self, position: int, total: int, title: str, icon: str = "•") -> None:
        self.console.print()
        self.console.print(f"[bold cyan] {icon} STEP {position} OF {total}[/bold cyan]")
        self.console.print(f"[bold white] {title}[/bold white]")
        self.console.print(f"[cyan]{'━' * 40}[/cyan]")
        self.console.print()

    def show_completion(self) -> None:
        self.console.print("\n[green]✓ Configuration complete! Here's your full setup:[/green]\n")
        self.console.print(
            "[cyan]Note:[/cyan] The project will automatically start in your "
            "default browser after creation.\n"
        )

    def show_warning(self, message: str) -> None:
        self.console.print()
        self.console.print(f"[yellow]![/yellow] {message}")

    def show_notice(self, message: str) -> None:
        self.console.print()
        self.console.print(f"[blue]i[/blue] {message}")

    # --- Input ---

    def _to_questionary(self, row: ChoiceRow) -> questionary.Choice | questionary.Separator:
        if isinstance(row, Separator):
            return questionary.Separator(row.line)

        title: Any = row.label
        if row.value is Signal.BACK_OPTION:
            title = [(BACK_OPTION_STYLE, row.label)]
        return questionary.Choice(
            title=title,
            value=row.value,
            description=row.description,
            disabled="unavailable" if row.disabled else None,
        )

    def _back_key_bindings(self) -> KeyBindings:
        bindings = KeyBindings()

        def make_handler(key: str):
            def handler(event) -> None:
                if self.keyboard.dispatch(key):
                    event.app.exit(result=Signal.BACK_OPTION)

            return handler

        for key in self.keyboard.back_keys:
            bindings.add(key, eager=True)(make_handler(key))
        return bindings

    def build_question(
        self, message: str, choices: list[ChoiceRow], default_index: int = 0
    ) -> questionary.Question:
        """Build the select prompt with back-key bindings attached."""
        rows = [self._to_questionary(row) for row in choices]

        default = None
        if 0 <= default_index < len(choices):
            candidate = choices[default_index]
            if isinstance(candidate, Choice) and not candidate.disabled:
                default = candidate.value

        question = questionary.select(
            message,
            choices=rows,
            default=default,
            style=STYLE,
            instruction="(Use arrow keys)",
        )
        question.application.key_bindings = merge_key_bindings(
            [question.application.key_bindings, self._back_key_bindings()]
        )
        return question

    async def prompt_choice(
        self, message: str, choices: list[ChoiceRow], default_index: int = 0
    ) -> Any:
        question = self.build_question(message, choices, default_index)
        try:
            return await question.unsafe_ask_async()
        except (KeyboardInterrupt, EOFError) as e:
            logger.debug("Prompt aborted: %s", type(e).__name__)
            raise PromptAbortedError("Prompt aborted by user") from e
