"""
Non-interactive answers for ``kickstart create --yes``.

Builds a complete answer map from command line options, filling the gaps
with per-framework defaults.
"""

from typing import Any

from kickstart.wizard.answers import AnswerField, Answers

FRAMEWORKS = ("vite", "nextjs")


def framework_defaults(framework: str) -> Answers:
    """Baseline answers for a framework before any option is applied."""
    answers: Answers = {
        AnswerField.FRAMEWORK: framework,
        AnswerField.TYPESCRIPT: False,
        AnswerField.LINTING: True,
        AnswerField.STYLING: "tailwind",
        AnswerField.STATE_MANAGEMENT: "none",
        AnswerField.API: "none",
        AnswerField.TESTING: "none",
        AnswerField.DEPLOYMENT: "none",
    }
    if framework == "nextjs":
        answers[AnswerField.NEXT_ROUTING] = "app"
    else:
        answers[AnswerField.ROUTING] = "none"
    return answers


def build_answers_from_options(
    framework: str | None = None,
    *,
    typescript: bool = False,
    styling: str | None = None,
    state: str | None = None,
    api: str | None = None,
    testing: str | None = None,
    routing: str | None = None,
    next_routing: str | None = None,
    package_manager: str | None = None,
    linting: bool = True,
    git: bool = True,
    autostart: bool = True,
) -> Answers:
    """Build the answer map used when the wizard is skipped.

    Explicit options win over the framework defaults. The editor is never
    opened in this mode.

    Raises:
        ValueError: If ``framework`` is not a supported framework.
    """
    framework = framework or "vite"
    if framework not in FRAMEWORKS:
        raise ValueError(f"Unsupported framework: {framework}")

    answers = framework_defaults(framework)

    overrides: dict[AnswerField, Any] = {
        AnswerField.TYPESCRIPT: typescript,
        AnswerField.STYLING: styling,
        AnswerField.STATE_MANAGEMENT: state,
        AnswerField.API: api,
        AnswerField.TESTING: testing,
    }
    if framework == "nextjs":
        overrides[AnswerField.NEXT_ROUTING] = next_routing
    else:
        overrides[AnswerField.ROUTING] = routing

    for field, value in overrides.items():
        if value is not None:
            answers[field] = value

    answers[AnswerField.PACKAGE_MANAGER] = package_manager or "npm"
    answers[AnswerField.LINTING] = linting
    answers[AnswerField.INIT_GIT] = git
    answers[AnswerField.OPEN_EDITOR] = False
    answers[AnswerField.EDITOR] = "vscode"
    answers[AnswerField.AUTO_START] = autostart
    return answers
