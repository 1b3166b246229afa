"""
Navigation history for the setup wizard.

Records the steps actually completed going forward so the wizard can
walk back along the path the user took.
"""


class StepHistory:
    """Ordered stack of completed step names."""

    def __init__(self) -> None:
        self.history: list[str] = []
        self.current_step: str | None = None

    def record_step(self, step_name: str) -> None:
        """Record a step that completed with a forward result."""
        self.history.append(step_name)
        self.current_step = step_name

    def go_back(self) -> None:
        """Move to the most recent step and drop it from the stack.

        Calling this with an empty history is a no-op.
        """
        if self.history:
            self.current_step = self.history[-1]
            self.history.pop()

    def get_previous_step_name(self) -> str | None:
        """Peek at the step that a back move would resume at."""
        if self.history:
            return self.history[-1]
        return None

    def can_go_back(self) -> bool:
        return len(self.history) > 0

    def reset(self) -> None:
        """Clear the history (whole-wizard restart)."""
        self.history = []
        self.current_step = None

    @property
    def position(self) -> int:
        """Number of steps completed on the current path."""
        return len(self.history)

    def __len__(self) -> int:
        return len(self.history)
