from __future__ import annotations

"""
Logging Lifecycle.

configure_logging() installs one owned QueueHandler on the root logger and
a QueueListener that feeds the real sinks from a background thread. The
listener is stored on the root logger; its presence is what makes repeated
configuration a no-op.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import Optional

from assetlife.infra.logging.config import LoggingConfig
from assetlife.infra.logging.handlers import build_sinks, is_owned, mark_owned

_LISTENER_ATTR: str = "_assetlife_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route all logging through a queue into the sinks described by cfg.

    Args:
        cfg: Logging settings.
        force: Tear down an earlier configuration and apply cfg anyway.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if active_listener(root) is not None and not force:
        return root

    shutdown_logging()
    root.setLevel(cfg.level_number)

    try:
        sinks = build_sinks(cfg)
        if not sinks:
            return root

        records: queue.Queue[logging.LogRecord] = queue.Queue(-1)
        listener = QueueListener(records, *sinks, respect_handler_level=True)
        listener.start()
    except (OSError, ValueError, TypeError) as e:
        _emergency_console(root, e)
        return root

    root.addHandler(mark_owned(QueueHandler(records)))
    setattr(root, _LISTENER_ATTR, listener)
    atexit.register(_stop, listener)
    return root


def shutdown_logging() -> None:
    """Flush queued records, stop the listener and detach owned handlers."""
    root = logging.getLogger()
    listener = active_listener(root)
    if listener is not None:
        _stop(listener)
        setattr(root, _LISTENER_ATTR, None)

    for h in list(root.handlers):
        if is_owned(h):
            root.removeHandler(h)
            h.close()


def active_listener(root: Optional[logging.Logger] = None) -> Optional[QueueListener]:
    """Return the listener installed by configure_logging(), if any."""
    return getattr(root or logging.getLogger(), _LISTENER_ATTR, None)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _stop(listener: QueueListener) -> None:
    # stop() is not re-entrant: the thread is cleared after the first call
    if getattr(listener, "_thread", None) is not None:
        listener.stop()


def _emergency_console(root: logging.Logger, error: Exception) -> None:
    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
    root.addHandler(mark_owned(sh))
    root.warning(f"Logging setup failed ({error}). Using plain console output.")
