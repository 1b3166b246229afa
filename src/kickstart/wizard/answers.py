"""
Answer model for the setup wizard.

The answer map is keyed by a closed set of fields so the invalidation
cascade can be checked against the canonical step order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class AnswerField(str, Enum):
    """Every field the wizard can write into the answer map."""

    PACKAGE_MANAGER = "package_manager"
    FRAMEWORK = "framework"
    NEXT_ROUTING = "next_routing"
    ROUTING = "routing"
    TYPESCRIPT = "typescript"
    LINTING = "linting"
    STYLING = "styling"
    STATE_MANAGEMENT = "state_management"
    API = "api"
    TESTING = "testing"
    INIT_GIT = "init_git"
    DEPLOYMENT = "deployment"
    OPEN_EDITOR = "open_editor"
    EDITOR = "editor"
    AUTO_START = "auto_start"


class Signal(Enum):
    """Navigation sentinels that never collide with real choice values."""

    BACK = "back"
    BACK_OPTION = "back_option"
    SKIP = "skip"


# Terminal step name
COMPLETE = "complete"

Answers = dict[AnswerField, Any]


@dataclass(frozen=True)
class StepResult:
    """Outcome of executing a single step."""

    selection: Any
    next_step: str | None

    @property
    def is_back(self) -> bool:
        return self.selection is Signal.BACK


def answers_to_dict(answers: Answers) -> dict[str, Any]:
    """Render an answer map with plain string keys, in field order."""
    return {field.value: answers[field] for field in AnswerField if field in answers}
