from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI and installs a global exception hook so that
unexpected crashes are logged and reported with a non-zero exit code.
"""

import logging
import sys
import traceback
from types import TracebackType
from typing import List, Optional, Type

from assetlife.interface.cli.app import main as cli_main

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(
        exctype: Type[BaseException],
        value: BaseException,
        tb: Optional[TracebackType],
) -> None:
    """
    Trap unhandled exceptions and log them before the interpreter exits.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    if issubclass(exctype, KeyboardInterrupt):
        sys.__excepthook__(exctype, value, tb)
        return

    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("assetlife.supervisor").critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (ASSETLIFE)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)

# -----------------------------------------------------------------------------
# APPLICATION ENTRYPOINT
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """Install the supervisor and run the CLI."""
    sys.excepthook = global_exception_handler
    return cli_main(argv)


if __name__ == "__main__":
    sys.exit(main())
