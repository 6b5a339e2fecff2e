"""Error boundary for cgraph commands.

Unexpected failures are logged through loguru and appended to
``<ROOT>/.cgraph/error.log`` for the project being analysed, then surfaced to
the user as a one-line ClickException pointing at that log. Usage errors and
explicit exits raised by click pass through untouched.
"""

import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any

import click

from componentgraph.utils.logging import get_request_id, logger

from .constants import ERROR_LOG_NAME, STATE_DIR_NAME


def error_log_path(root: str | Path | None) -> Path:
    """Error log for a project root, falling back to the working directory."""
    base = Path(root) if root else Path(".")
    if not base.is_dir():
        base = Path(".")
    return base / STATE_DIR_NAME / ERROR_LOG_NAME


def _append_error(log_path: Path, command: str, root: Any, error: Exception) -> None:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    header = (
        f"[{datetime.now().isoformat()}] cgraph {command} "
        f"root={root or '.'} request_id={get_request_id()}"
    )
    with open(log_path, "a", encoding="utf-8") as f:
        f.write(f"{header}\n{type(error).__name__}: {error}\n")
        f.write(traceback.format_exc())
        f.write("-" * 80 + "\n")


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a click command so crashes land in the project's error log."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit):
            raise
        except Exception as e:
            root = kwargs.get("root")
            log_path = error_log_path(root)

            logger.opt(exception=True).error(
                "cgraph {cmd} failed on {root}: {err}",
                cmd=func.__name__,
                root=root or ".",
                err=str(e),
            )
            try:
                _append_error(log_path, func.__name__, root, e)
            except OSError as write_error:
                logger.warning(f"Could not write {log_path}: {write_error}")
                raise click.ClickException(f"{type(e).__name__}: {e}") from e

            raise click.ClickException(
                f"{type(e).__name__}: {e} (traceback in {log_path})"
            ) from e

    return wrapper
