"""
Command-Line Interface for the Grading System.

This module provides the program entry point. It sets up the audit log,
runs one GradingSession and makes sure cleanup happens however the session
ends.

The program takes no arguments; everything is asked interactively.

NOTE: Don't run this file directly. Run from the repository root:
    python3 -m gradebook
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from .exceptions import InputClosedError
from .logging_setup import configure_audit_log, detach_audit_log
from .session import GradingSession
from .ui import InputPrompter, TerminalDisplay

logger = logging.getLogger(__name__)


def main(input_func: Callable[[str], str] = input,
         results_path: Optional[Path] = None,
         log_path: Optional[Path] = None) -> int:
    """
    Run the grading system.

    ═══════════════════════════════════════════════════════════════════════════
    ERROR HANDLING
    ═══════════════════════════════════════════════════════════════════════════

    Invalid input, cancelled forms, duplicates and report write failures are
    all handled inside the session. Anything that still reaches this level
    (including the input stream closing) is logged and printed, and cleanup
    runs regardless: the termination is logged and the exit code is 0.

    ═══════════════════════════════════════════════════════════════════════════
    """
    handler = configure_audit_log(log_path)

    TerminalDisplay.print_banner()
    logger.info("System Started.")

    try:
        session = GradingSession(
            prompter=InputPrompter(input_func=input_func),
            results_path=results_path,
        )
        session.run()
    except InputClosedError as e:
        logger.error("Input closed: %s", e.message)
        TerminalDisplay.print_error(f"\n>> Input closed before the session finished: {e.message}")
    except KeyboardInterrupt:
        logger.warning("Session interrupted by user.")
        TerminalDisplay.print_error("\n>> Session interrupted.")
    except Exception as e:
        logger.exception("CRITICAL ERROR: %s", e)
        TerminalDisplay.print_error(f"\n>> CRITICAL SYSTEM ERROR: {e}")
    finally:
        logger.info("System Terminated.")
        TerminalDisplay.print_goodbye()
        detach_audit_log(handler)

    return 0


if __name__ == "__main__":
    main()
