"""
Finishing steps: git, deployment platform and editor.
"""

from typing import Any

from kickstart.wizard.answers import COMPLETE, AnswerField, Answers, StepResult
from kickstart.wizard.steps.base import Step
from kickstart.wizard.ui.protocol import Choice

# Inline notes keyed by (deployment, framework)
DEPLOYMENT_NOTES = {
    ("netlify", "nextjs"): (
        "Netlify with Next.js: Consider using Vercel for optimal Next.js features "
        "and performance."
    ),
    ("vercel", "vite"): (
        "Vercel with Vite: Great choice! Vercel has excellent Vite support with zero "
        "configuration."
    ),
    ("netlify", "vite"): (
        "Netlify with Vite: Excellent choice! Netlify has great build optimization "
        "for Vite projects."
    ),
    ("vercel", "nextjs"): (
        "Vercel with Next.js: Perfect match! Zero-config deployments with optimal "
        "performance."
    ),
}

EDITORS = [
    Choice("Visual Studio Code", "vscode"),
    Choice("Cursor", "cursor"),
]


class GitStep(Step):
    name = "git"
    ordinal = 10
    title = "Git Options"
    icon = "🔄"
    answer_field = AnswerField.INIT_GIT

    def choices(self, answers: Answers) -> list[Choice]:
        return [Choice("Yes", True), Choice("No", False)]

    def message(self) -> str:
        return "Initialize a git repository?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return "deployment"


class DeploymentStep(Step):
    """Deployment platform, with the framework's best fit listed first."""

    name = "deployment"
    ordinal = 11
    title = "Deployment Platform"
    icon = "🚀"
    answer_field = AnswerField.DEPLOYMENT

    def choices(self, answers: Answers) -> list[Choice]:
        framework = answers.get(AnswerField.FRAMEWORK)
        netlify = Choice("Netlify", "netlify", "Powerful platform with great build optimization")
        vercel = Choice(
            "Vercel", "vercel", "Zero-config deployments with excellent Next.js integration"
        )

        if framework == "vite":
            netlify.label += " (Recommended)"
            choices = [netlify, vercel]
        else:
            if framework == "nextjs":
                vercel.label += " (Recommended)"
            choices = [vercel, netlify]

        choices.append(Choice("Skip deployment setup", "none", "Configure deployment manually later"))
        return choices

    def message(self) -> str:
        return "Which deployment platform would you like to configure?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return "editor"

    async def execute(self, answers: Answers) -> StepResult:
        result = await super().execute(answers)
        if not result.is_back:
            note = DEPLOYMENT_NOTES.get((result.selection, answers.get(AnswerField.FRAMEWORK)))
            if note:
                self.renderer.show_notice(note)
        return result


class EditorStep(Step):
    """Whether to open the project in an editor, and which one.

    Owns ``open_editor``, ``editor`` and ``auto_start``.
    """

    name = "editor"
    ordinal = 12
    title = "Editor Options"
    icon = "📝"
    answer_field = AnswerField.OPEN_EDITOR
    fields = (AnswerField.OPEN_EDITOR, AnswerField.EDITOR, AnswerField.AUTO_START)
    fallback_index = 1  # No

    def choices(self, answers: Answers) -> list[Choice]:
        return [Choice("Yes", True), Choice("No", False)]

    def message(self) -> str:
        return "Would you like to open the project in an editor after creation?"

    def next_step(self, selection: Any, answers: Answers) -> str | None:
        return COMPLETE

    async def execute(self, answers: Answers) -> StepResult:
        result = await super().execute(answers)
        if result.is_back:
            return result

        if result.selection is True:
            previous = answers.get(AnswerField.EDITOR, "vscode")
            default_index = next(
                (i for i, choice in enumerate(EDITORS) if choice.value == previous), 0
            )
            answers[AnswerField.EDITOR] = await self.renderer.prompt_choice(
                "Which editor would you like to use?", list(EDITORS), default_index
            )

        answers[AnswerField.AUTO_START] = True
        return result
