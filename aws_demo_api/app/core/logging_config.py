"""
Root logger wiring for the demo service.

All modules log through ``logging.getLogger(__name__)``; this module only
decides where those records go.  Output goes to stderr and, when
``LOG_FILE`` is set, to that file as well.  The correlation middleware
writes one access line per request on ``aws_demo_api.access``, which
makes uvicorn's own access lines redundant, so they are silenced below
WARNING.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Set the root level and attach handlers if none are attached yet.

    The level is applied on every call so a later ``create_app`` with
    different settings still takes effect.  Handlers are only added the
    first time; test runners that install their own capture handlers
    keep them.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"warning"``.  Unknown names
        mean ``INFO``.
    logfile : Optional[str]
        Extra destination for log records, relative to the working
        directory.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
