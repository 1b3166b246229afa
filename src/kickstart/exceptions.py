"""
Wizard exceptions for Kickstart.

Defines the errors raised by the wizard engine and the prompt layer.
"""


class KickstartError(Exception):
    """Base exception for Kickstart errors."""

    pass


class WizardError(KickstartError):
    """Base exception for wizard navigation errors."""

    def __init__(self, message: str, step_name: str | None = None):
        super().__init__(message)
        self.step_name = step_name


class UnknownStepError(WizardError):
    """A step name has no registered step definition."""

    def __init__(self, step_name: str):
        super().__init__(f"Unknown step: {step_name}", step_name)


class StepGraphError(WizardError):
    """A step produced no usable next-step target."""

    def __init__(self, step_name: str, detail: str = "no next step"):
        super().__init__(f"Malformed step graph at '{step_name}': {detail}", step_name)


class PromptAbortedError(KickstartError):
    """The prompt layer was exited abnormally (Ctrl+C, Ctrl+D, closed input)."""

    pass


class UserCancelledError(KickstartError):
    """The user cancelled the wizard.

    Every way the prompt layer can report an interactive abort is normalized
    to this single error; callers match on ``code``.
    """

    code = "USER_CANCELLED"

    def __init__(self, message: str = "Cancelled by user"):
        super().__init__(message)
