"""
Feature steps: styling, state management, API layer and testing.
"""

from typing import Any

from kickstart.wizard.answers import AnswerField, Answers, StepResult
from kickstart.wizard.steps.base import Step
from kickstart.wizard.ui.protocol import Choice


class StylingStep(Step):
    name = "styling"
    ordinal = 6
    title = "Styling Solution"
    icon = "🎨"
    answer_field = AnswerField.STYLING

    def choices(self, answers: Answers) -> list[Choice]:
        return [
            Choice("Tailwind CSS", "tailwind", "Utility-first CSS framework"),
            Choice("styled-components", "styled-components", "CSS-in-JS library"),
            Choice("Plain CSS", "css", "No additional dependencies"),
        ]

    def message(self) -> str:
        return "Which styling solution would you like to use?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return "state_management"


class StateManagementStep(Step):
    name = "state_management"
    ordinal = 7
    title = "State Management"
    icon = "🗃"
    answer_field = AnswerField.STATE_MANAGEMENT
    fallback_index = 2  # None

    def choices(self, answers: Answers) -> list[Choice]:
        return [
            Choice("Redux Toolkit", "redux", "Powerful state management library"),
            Choice("Zustand", "zustand", "Lightweight state management solution"),
            Choice("None", "none", "No global state management"),
        ]

    def message(self) -> str:
        return "Would you like to add global state management?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return "api"


class ApiStep(Step):
    name = "api"
    ordinal = 8
    title = "API & Data Fetching"
    icon = "🌐"
    answer_field = AnswerField.API

    def choices(self, answers: Answers) -> list[Choice]:
        return [
            Choice(
                "Axios + React Query",
                "axios-react-query",
                "Complete API setup with smart caching",
            ),
            Choice("Axios", "axios-only", "HTTP client with interceptors and error handling"),
            Choice("Fetch + React Query", "fetch-react-query", "Native fetch with caching layer"),
            Choice("Fetch", "fetch-only", "Native fetch API with custom hooks"),
            Choice("Skip", "none", "I'll handle API setup myself"),
        ]

    def message(self) -> str:
        return "Setup API boilerplate?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return "testing"


class TestingStep(Step):
    """Testing framework, with the framework's recommended runner listed first."""

    __test__ = False  # not a pytest test class

    name = "testing"
    ordinal = 9
    title = "Testing Framework"
    icon = "🧪"
    answer_field = AnswerField.TESTING

    def choices(self, answers: Answers) -> list[Choice]:
        framework = answers.get(AnswerField.FRAMEWORK)
        choices = []
        if framework == "vite":
            choices.append(Choice("Vitest", "vitest", "+ React Testing Library (Recommended)"))
            choices.append(Choice("Jest", "jest", "+ React Testing Library"))
        elif framework == "nextjs":
            choices.append(Choice("Jest", "jest", "+ React Testing Library (Recommended)"))
            choices.append(Choice("Vitest", "vitest", "+ React Testing Library"))
        choices.append(Choice("Skip testing setup", "none"))
        return choices

    def message(self) -> str:
        return "Which testing framework would you like to set up?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return "git"

    async def execute(self, answers: Answers) -> StepResult:
        result = await super().execute(answers)
        if not result.is_back:
            warning = testing_warning(result.selection, answers.get(AnswerField.FRAMEWORK))
            if warning:
                self.renderer.show_warning(warning)
        return result


def testing_warning(testing: Any, framework: Any) -> str | None:
    """Warning for testing/build framework pairs that work against each other."""
    if testing == "jest" and framework == "vite":
        return (
            "Using Jest with Vite. Consider Vitest for better Vite integration "
            "and faster execution."
        )
    if testing == "vitest" and framework == "nextjs":
        return (
            "Using Vitest with Next.js. Jest has better Next.js integration "
            "and built-in optimizations."
        )
    return None
