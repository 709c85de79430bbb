from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

_HANDLER_TAG = "_tasklist_handler"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable while Streamlit is serving:
    - allow all tasklist logs
    - Python warnings (captured as 'py.warnings') only at ERROR+
    - other third-party loggers (streamlit, tornado, ...) only at WARNING+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "tasklist" or name.startswith("tasklist."):
            return True
        if name == "py.warnings":
            return record.levelno >= logging.ERROR
        return record.levelno >= logging.WARNING


def setup_logging(
    *,
    console_level: int = logging.INFO,
    log_dir: Optional[Union[str, Path]] = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler: filtered, at ``console_level``
    - File handler (only when ``log_dir`` is given): full logs for debugging

    Streamlit re-executes the page script on every interaction, so this is
    safe to call repeatedly: handlers installed by an earlier call are
    replaced, never duplicated.
    """
    root = logging.getLogger()
    # Records below every handler level are not created at all.
    root.setLevel(min(console_level, file_level) if log_dir is not None else console_level)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG, False):
            root.removeHandler(h)
            h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    setattr(ch, _HANDLER_TAG, True)
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "tasklist.log"), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        setattr(fh, _HANDLER_TAG, True)
        root.addHandler(fh)

    logging.captureWarnings(True)
