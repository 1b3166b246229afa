"""
Kickstart setup wizard.

The navigation engine (steps, history, back-key coordinator and the
orchestrator) and the Rich/questionary renderer.
"""

from kickstart.wizard.answers import COMPLETE, AnswerField, Answers, Signal, StepResult
from kickstart.wizard.flow import WizardFlow
from kickstart.wizard.history import StepHistory
from kickstart.wizard.keyboard import KeyboardNavigator, NullKeyboardNavigator, keyboard_navigator
from kickstart.wizard.registry import CANONICAL_STEP_ORDER, STEP_FIELDS, build_step_registry

__all__ = [
    "AnswerField",
    "Answers",
    "CANONICAL_STEP_ORDER",
    "COMPLETE",
    "KeyboardNavigator",
    "NullKeyboardNavigator",
    "STEP_FIELDS",
    "Signal",
    "StepHistory",
    "StepResult",
    "WizardFlow",
    "build_step_registry",
    "keyboard_navigator",
]
