"""
User Interface module.

This package contains the console side of the grading system: output
formatting (TerminalDisplay) and validated input (InputPrompter).

To add a new UI (e.g., web, GUI), create a new module in this package
with the same method signatures as TerminalDisplay and InputPrompter.
"""

from .terminal import TerminalDisplay
from .prompts import InputPrompter

__all__ = ["TerminalDisplay", "InputPrompter"]
