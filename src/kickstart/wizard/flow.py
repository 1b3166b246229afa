"""
Wizard orchestrator.

Walks the step graph from the entry step to ``COMPLETE``: skips invisible
steps, records forward moves in the history, rewinds on back moves and
clears every answer that belongs to a step after the resume point.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from kickstart.exceptions import (
    PromptAbortedError,
    StepGraphError,
    UnknownStepError,
    UserCancelledError,
)
from kickstart.wizard.answers import COMPLETE, AnswerField, Answers, Signal
from kickstart.wizard.history import StepHistory
from kickstart.wizard.keyboard import KeyboardNavigator, keyboard_navigator
from kickstart.wizard.registry import (
    CANONICAL_STEP_ORDER,
    ENTRY_STEP,
    STEP_FIELDS,
    build_step_registry,
)

if TYPE_CHECKING:
    from kickstart.utils.package_managers import PackageManagerInfo
    from kickstart.wizard.steps.base import Step
    from kickstart.wizard.ui.protocol import Renderer

# Ways the prompt layer reports an interactive abort
CANCELLATION_ERRORS = (PromptAbortedError, KeyboardInterrupt, EOFError)


class WizardFlow:
    """Drives the wizard from the entry step to completion.

    Args:
        renderer: Draws prompts and summaries.
        history: Navigation history; a fresh one by default.
        keyboard: Back-key coordinator shared by all steps.
        steps: Step registry; built from the default step set if omitted.
        step_order: Canonical order used by the invalidation cascade.
        step_fields: Answer fields owned by each step in ``step_order``.
        package_managers: Detection results for the package manager step.
        default_package_manager: Preselected package manager.
    """

    def __init__(
        self,
        renderer: Renderer,
        *,
        history: StepHistory | None = None,
        keyboard: KeyboardNavigator | None = None,
        steps: Mapping[str, Step] | None = None,
        step_order: Sequence[str] = CANONICAL_STEP_ORDER,
        step_fields: Mapping[str, Sequence[AnswerField]] = STEP_FIELDS,
        package_managers: Mapping[str, PackageManagerInfo] | None = None,
        default_package_manager: str | None = None,
        entry_step: str = ENTRY_STEP,
    ):
        self.renderer = renderer
        self.history = history if history is not None else StepHistory()
        self.keyboard = keyboard or keyboard_navigator
        self.step_order = tuple(step_order)
        self.step_fields = dict(step_fields)
        self.entry_step = entry_step

        if steps is None:
            steps = build_step_registry(
                renderer,
                self.history,
                self.keyboard,
                package_managers=package_managers,
                default_package_manager=default_package_manager,
            )
        self.steps: dict[str, Step] = dict(steps)

        self.answers: Answers = {}
        self.current_step_name: str = entry_step

    def _get_step(self, step_name: str) -> Step:
        step = self.steps.get(step_name)
        if step is None:
            raise UnknownStepError(step_name)
        return step

    @staticmethod
    def _require_target(step_name: str, target: str | None) -> str:
        if not target:
            raise StepGraphError(step_name)
        return target

    async def run(self) -> Answers:
        """Run the wizard and return the completed answer map.

        Raises:
            UserCancelledError: If the user aborted a prompt.
            UnknownStepError: If the step graph names an unregistered step.
            StepGraphError: If a step yields no next step.
        """
        while self.current_step_name != COMPLETE:
            step_name = self.current_step_name
            step = self._get_step(step_name)

            if not step.is_visible(self.answers):
                # Pass-through: never prompted, never recorded
                target = step.next_step(Signal.SKIP, self.answers)
                self.current_step_name = self._require_target(step_name, target)
                continue

            try:
                result = await step.execute(self.answers)
            except CANCELLATION_ERRORS as e:
                raise UserCancelledError() from e

            if result.is_back:
                resume_at = self.previous_step_name()
                self.history.go_back()
                self.clear_answers_after_step(resume_at)
                self.current_step_name = resume_at
                continue

            self.history.record_step(step_name)
            self.current_step_name = self._require_target(step_name, result.next_step)

        self.renderer.refresh_display(self.answers)
        self.renderer.show_completion()

        return self.answers

    def previous_step_name(self) -> str:
        """Step to resume at on a back move (entry step if there is no history)."""
        previous = self.history.get_previous_step_name()
        if previous is None:
            return self.entry_step
        return previous

    def clear_answers_after_step(self, step_name: str) -> None:
        """Drop every answer not owned by ``step_name`` or a step before it.

        Args:
            step_name: Step the wizard resumes at.

        Raises:
            UnknownStepError: If ``step_name`` is not in the canonical order.
        """
        try:
            index = self.step_order.index(step_name)
        except ValueError:
            raise UnknownStepError(step_name) from None

        keep: set[AnswerField] = set()
        for name in self.step_order[: index + 1]:
            keep.update(self.step_fields.get(name, ()))

        for key in list(self.answers):
            if key not in keep:
                del self.answers[key]

    def reset(self) -> None:
        """Restart the wizard from the entry step with no answers."""
        self.answers = {}
        self.history.reset()
        self.current_step_name = self.entry_step
