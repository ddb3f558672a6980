"""Console output adapter for greeting lines."""

from __future__ import annotations

import lib_log_rich.runtime
import rich_click as click


def emit_greeting(text: str) -> None:
    """Write one greeting line to standard output.

    Pending log records are flushed first so they never interleave with
    the greeting itself.

    Args:
        text: Composed greeting line without trailing newline.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    click.echo(text)


__all__ = ["emit_greeting"]
