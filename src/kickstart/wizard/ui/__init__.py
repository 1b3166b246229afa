"""
Wizard renderers.

The engine talks to a ``Renderer``; ``RichRenderer`` is the terminal
implementation.
"""

from kickstart.wizard.ui.protocol import Choice, Renderer, Separator

__all__ = ["Choice", "Renderer", "Separator"]
