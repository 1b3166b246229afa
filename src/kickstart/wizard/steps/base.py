"""
Base class for wizard steps.

A step knows what to ask and how its answer feeds navigation. It knows
nothing about other steps; history and orchestration live in WizardFlow.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from kickstart.wizard.answers import AnswerField, Answers, Signal, StepResult
from kickstart.wizard.keyboard import KeyboardNavigator, keyboard_navigator
from kickstart.wizard.ui.protocol import Choice, ChoiceRow

if TYPE_CHECKING:
    from kickstart.wizard.history import StepHistory
    from kickstart.wizard.ui.protocol import Renderer

TOTAL_STEPS = 12

BACK_HINT = "\n  (Press ← or Backspace to go back quickly)"


class Step(ABC):
    """A single wizard page.

    Subclasses set the class attributes and implement ``choices``,
    ``message`` and ``next_step``. ``fields`` lists every answer field the
    step owns; it defaults to ``(answer_field,)``.
    """

    name: str = ""
    ordinal: int = 0
    title: str = ""
    icon: str = "•"
    answer_field: AnswerField
    fields: tuple[AnswerField, ...] = ()
    fallback_index: int = 0
    total_steps: int = TOTAL_STEPS

    def __init__(
        self,
        renderer: Renderer,
        history: StepHistory,
        keyboard: KeyboardNavigator | None = None,
    ):
        self.renderer = renderer
        self.history = history
        self.keyboard = keyboard or keyboard_navigator

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "fields" not in cls.__dict__ and "answer_field" in cls.__dict__:
            cls.fields = (cls.answer_field,)

    # --- Step definition ---

    @abstractmethod
    def choices(self, answers: Answers) -> list[Choice]:
        """Choices for this visit. Must not modify ``answers``."""
        ...

    @abstractmethod
    def message(self) -> str:
        ...

    def default_index(self, answers: Answers) -> int:
        """Index of the preselected row in the un-padded choice list.

        A previous answer wins; otherwise ``fallback_index`` is used.
        """
        if self.answer_field in answers:
            previous = answers[self.answer_field]
            for index, choice in enumerate(self.choices(answers)):
                if choice.value == previous and type(choice.value) is type(previous):
                    return index
        return self.fallback_index

    @abstractmethod
    def next_step(self, selection: Any, answers: Answers) -> str | None:
        """Name of the step that follows ``selection``."""
        ...

    def is_visible(self, answers: Answers) -> bool:
        return True

    # --- Execution ---

    def process_selection(self, selection: Any, answers: Answers) -> Any:
        """Commit ``selection`` to the answer map, or signal a back move."""
        if selection is Signal.BACK_OPTION:
            return Signal.BACK

        answers[self.answer_field] = selection
        return selection

    async def execute(self, answers: Answers) -> StepResult:
        self.renderer.refresh_display(answers)
        self.renderer.show_step_header(self.ordinal, self.total_steps, self.title, self.icon)

        # The default index refers to the list before the back entry is added
        choices: list[ChoiceRow] = list(self.choices(answers))
        default_index = self.default_index(answers)
        can_go_back = self.history.can_go_back()

        message = self.message()
        if can_go_back:
            choices.append(self.renderer.create_separator())
            choices.append(self.renderer.create_back_option())
            message += BACK_HINT

        selection = await self.prompt(message, choices, default_index, can_go_back)
        result = self.process_selection(selection, answers)

        if result is Signal.BACK:
            return StepResult(selection=Signal.BACK, next_step=None)
        return StepResult(selection=result, next_step=self.next_step(result, answers))

    async def prompt(
        self,
        message: str,
        choices: list[ChoiceRow],
        default_index: int,
        can_go_back: bool,
    ) -> Any:
        """Prompt the user, racing the back-key shortcut when going back is possible.

        Whichever of the keystroke and the prompt completes first decides the
        result; the other completion is discarded.
        """
        if not can_go_back:
            return await self.renderer.prompt_choice(message, choices, default_index)

        loop = asyncio.get_running_loop()
        outcome: asyncio.Future[Any] = loop.create_future()

        def on_back_key() -> None:
            if not outcome.done():
                outcome.set_result(Signal.BACK_OPTION)

        def on_prompt_done(task: asyncio.Future[Any]) -> None:
            if task.cancelled():
                if not outcome.done():
                    self.keyboard.deactivate()
                    outcome.cancel()
                return
            error = task.exception()
            if outcome.done():
                return
            self.keyboard.deactivate()
            if error is not None:
                outcome.set_exception(error)
            else:
                outcome.set_result(task.result())

        self.keyboard.activate(on_back_key)
        prompt_task = asyncio.ensure_future(
            self.renderer.prompt_choice(message, choices, default_index)
        )
        prompt_task.add_done_callback(on_prompt_done)

        try:
            return await outcome
        finally:
            if not prompt_task.done():
                prompt_task.cancel()
                await asyncio.wait([prompt_task])
            if self.keyboard.is_active:
                self.keyboard.deactivate()
