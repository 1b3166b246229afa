"""
Keyboard shortcut coordinator for back navigation.

While a step's prompt is waiting for input, a single raw keystroke
(``left`` or ``backspace`` by default) can abandon the prompt exactly like
choosing the "Back" menu entry. There is one input stream per process, so
the coordinator is shared; it holds at most one listener at a time.
"""

import atexit
import logging
import signal
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

DEFAULT_BACK_KEYS = ("left", "backspace")


class KeyboardNavigator:
    """Routes back-navigation keystrokes to the prompt currently armed."""

    def __init__(self, back_keys: Iterable[str] = DEFAULT_BACK_KEYS):
        self.back_keys: tuple[str, ...] = tuple(back_keys)
        self._handler: Callable[[], None] | None = None

    @property
    def is_active(self) -> bool:
        return self._handler is not None

    @property
    def listener_count(self) -> int:
        """Number of installed listeners (0 or 1)."""
        return 1 if self._handler is not None else 0

    def configure(self, back_keys: Iterable[str]) -> None:
        """Replace the keys that trigger back navigation."""
        self.back_keys = tuple(back_keys)

    def activate(self, on_back: Callable[[], None]) -> None:
        """Arm the listener for the current prompt.

        Any listener left over from a previous prompt is removed first.

        Args:
            on_back: Called once when a back key is pressed.
        """
        self.deactivate()
        self._handler = on_back
        logger.debug("Back-key listener armed for %s", ", ".join(self.back_keys))

    def deactivate(self) -> None:
        """Remove the listener. Safe to call when nothing is armed."""
        if self._handler is not None:
            self._handler = None
            logger.debug("Back-key listener removed")

    def dispatch(self, key: str) -> bool:
        """Feed a keystroke from the input layer.

        Args:
            key: Key name as reported by prompt_toolkit.

        Returns:
            True if the key triggered back navigation.
        """
        if self._handler is None or key not in self.back_keys:
            return False

        handler = self._handler
        self.deactivate()
        handler()
        return True

    def cleanup(self) -> None:
        """Release the input listener on process exit."""
        self.deactivate()


class NullKeyboardNavigator(KeyboardNavigator):
    """Coordinator that never arms a listener (shortcuts disabled)."""

    def __init__(self) -> None:
        super().__init__(back_keys=())

    def activate(self, on_back: Callable[[], None]) -> None:
        pass


# Process-wide coordinator for the single terminal input stream
keyboard_navigator = KeyboardNavigator()

_exit_handlers_installed = False


def install_exit_handlers(navigator: KeyboardNavigator = keyboard_navigator) -> None:
    """Make sure the listener is released on exit and on SIGTERM."""
    global _exit_handlers_installed
    if _exit_handlers_installed:
        return

    atexit.register(navigator.cleanup)

    previous = signal.getsignal(signal.SIGTERM)

    def _on_sigterm(signum, frame):
        navigator.cleanup()
        if callable(previous):
            previous(signum, frame)
        elif previous != signal.SIG_IGN:
            raise SystemExit(128 + signum)

    try:
        signal.signal(signal.SIGTERM, _on_sigterm)
    except ValueError:
        # Not the main thread; atexit still covers normal shutdown
        logger.debug("SIGTERM handler not installed outside the main thread")

    _exit_handlers_installed = True
