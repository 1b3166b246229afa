"""
Project foundation steps: package manager, framework, routing and language.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from kickstart.utils.package_managers import PackageManagerInfo
from kickstart.wizard.answers import AnswerField, Answers
from kickstart.wizard.keyboard import KeyboardNavigator
from kickstart.wizard.steps.base import Step
from kickstart.wizard.ui.protocol import Choice

if TYPE_CHECKING:
    from kickstart.wizard.history import StepHistory
    from kickstart.wizard.ui.protocol import Renderer


def yes_no_choices() -> list[Choice]:
    return [Choice("Yes", True), Choice("No", False)]


def format_package_manager_choices(managers: Mapping[str, PackageManagerInfo]) -> list[Choice]:
    """Build the package manager choice list from detection results.

    When nothing is detected, disabled hint rows are followed by a
    "Try with npm anyway" fallback.
    """
    choices = []
    for name in ("npm", "yarn"):
        info = managers.get(name)
        if info is None or not info.available:
            continue
        label = f"{name} (recommended)" if info.recommended else name
        choices.append(Choice(label, name, f"v{info.version}" if info.version else None))

    if not choices:
        choices = [
            Choice("No package managers detected", None, disabled=True),
            Choice("Install Node.js to get npm: https://nodejs.org", None, disabled=True),
            Choice(
                "Or install Yarn: https://yarnpkg.com/getting-started/install",
                None,
                disabled=True,
            ),
            Choice("Try with npm anyway", "npm"),
        ]
    return choices


class PackageManagerStep(Step):
    name = "package_manager"
    ordinal = 1
    title = "Package Manager"
    icon = "📦"
    answer_field = AnswerField.PACKAGE_MANAGER

    def __init__(
        self,
        renderer: Renderer,
        history: StepHistory,
        keyboard: KeyboardNavigator | None = None,
        package_managers: Mapping[str, PackageManagerInfo] | None = None,
        default_package_manager: str | None = None,
    ):
        super().__init__(renderer, history, keyboard)
        self.package_managers = package_managers or {}
        self.default_package_manager = default_package_manager or "npm"

    def choices(self, answers: Answers) -> list[Choice]:
        return format_package_manager_choices(self.package_managers)

    def message(self) -> str:
        return "Which package manager would you like to use?"

    def default_index(self, answers: Answers) -> int:
        wanted = answers.get(AnswerField.PACKAGE_MANAGER) or self.default_package_manager
        for index, choice in enumerate(self.choices(answers)):
            if choice.value == wanted and not choice.disabled:
                return index
        return 0

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return "framework"


class FrameworkStep(Step):
    name = "framework"
    ordinal = 2
    title = "Framework Selection"
    icon = "⚛"
    answer_field = AnswerField.FRAMEWORK

    def choices(self, answers: Answers) -> list[Choice]:
        return [
            Choice("Vite", "vite", "Fast dev server, optimized builds"),
            Choice("Next.js", "nextjs", "SSR, full-stack framework"),
        ]

    def message(self) -> str:
        return "Which framework would you like to use?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        if selection == "nextjs":
            return "nextjs_options"
        return "routing"


class NextjsOptionsStep(Step):
    """Router choice for Next.js projects; skipped for every other framework."""

    name = "nextjs_options"
    ordinal = 3
    title = "Next.js Options"
    icon = "▲"
    answer_field = AnswerField.NEXT_ROUTING

    def choices(self, answers: Answers) -> list[Choice]:
        return [
            Choice("App Router", "app", "Newer, supports Server Components"),
            Choice("Pages Router", "pages", "Traditional routing system"),
        ]

    def message(self) -> str:
        return "Which Next.js routing system would you like to use?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return "language"

    def is_visible(self, answers: Answers) -> bool:
        return answers.get(AnswerField.FRAMEWORK) == "nextjs"


class RoutingStep(Step):
    """Client-side routing library; Next.js brings its own router."""

    name = "routing"
    ordinal = 3
    title = "Routing Options"
    icon = "🛣"
    answer_field = AnswerField.ROUTING

    def choices(self, answers: Answers) -> list[Choice]:
        return [
            Choice("React Router", "react-router", "Popular, comprehensive routing"),
            Choice("None", "none", "No routing library"),
        ]

    def message(self) -> str:
        return "Which routing library would you like to use?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return "language"

    def is_visible(self, answers: Answers) -> bool:
        return answers.get(AnswerField.FRAMEWORK) != "nextjs"


class LanguageStep(Step):
    name = "language"
    ordinal = 4
    title = "Language Options"
    icon = "🔤"
    answer_field = AnswerField.TYPESCRIPT
    fallback_index = 1  # No

    def choices(self, answers: Answers) -> list[Choice]:
        return yes_no_choices()

    def message(self) -> str:
        return "Would you like to use TypeScript?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return "code_quality"


class CodeQualityStep(Step):
    name = "code_quality"
    ordinal = 5
    title = "Code Quality"
    icon = "✔"
    answer_field = AnswerField.LINTING

    def choices(self, answers: Answers) -> list[Choice]:
        return yes_no_choices()

    def message(self) -> str:
        return "Would you like to include ESLint and Prettier for code quality?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return "styling"
