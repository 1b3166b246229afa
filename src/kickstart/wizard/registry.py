"""
Step registry for the setup wizard.

Holds the canonical step order and which answer fields each step owns,
and assembles the name -> step mapping the orchestrator walks.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from kickstart.wizard.answers import AnswerField
from kickstart.wizard.steps.base import Step
from kickstart.wizard.steps.features import ApiStep, StateManagementStep, StylingStep, TestingStep
from kickstart.wizard.steps.finish import DeploymentStep, EditorStep, GitStep
from kickstart.wizard.steps.project import (
    CodeQualityStep,
    FrameworkStep,
    LanguageStep,
    NextjsOptionsStep,
    PackageManagerStep,
    RoutingStep,
)

if TYPE_CHECKING:
    from kickstart.utils.package_managers import PackageManagerInfo
    from kickstart.wizard.history import StepHistory
    from kickstart.wizard.keyboard import KeyboardNavigator
    from kickstart.wizard.ui.protocol import Renderer

# Every step in logical order, including the ones that are skipped on a
# given path (nextjs_options and routing share a slot).
STEP_CLASSES: tuple[type[Step], ...] = (
    PackageManagerStep,
    FrameworkStep,
    NextjsOptionsStep,
    RoutingStep,
    LanguageStep,
    CodeQualityStep,
    StylingStep,
    StateManagementStep,
    ApiStep,
    TestingStep,
    GitStep,
    DeploymentStep,
    EditorStep,
)

CANONICAL_STEP_ORDER: tuple[str, ...] = tuple(cls.name for cls in STEP_CLASSES)

STEP_FIELDS: dict[str, tuple[AnswerField, ...]] = {cls.name: cls.fields for cls in STEP_CLASSES}

ENTRY_STEP = CANONICAL_STEP_ORDER[0]


def build_step_registry(
    renderer: Renderer,
    history: StepHistory,
    keyboard: KeyboardNavigator | None = None,
    package_managers: Mapping[str, PackageManagerInfo] | None = None,
    default_package_manager: str | None = None,
) -> dict[str, Step]:
    """Create one instance of every step, keyed by step name."""
    steps: dict[str, Step] = {}
    for cls in STEP_CLASSES:
        if cls is PackageManagerStep:
            steps[cls.name] = PackageManagerStep(
                renderer,
                history,
                keyboard,
                package_managers=package_managers,
                default_package_manager=default_package_manager,
            )
        else:
            steps[cls.name] = cls(renderer, history, keyboard)
    return steps
