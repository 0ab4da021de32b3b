# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Error Types
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Fatal error kinds of a harness run.

Build and test exit failures are not errors: they are recorded in the
result and reported. Everything here aborts the run with exit code 1.
The low-level exception is attached as ``__cause__`` (``raise ... from``)
so the whole chain can be printed.
"""

from __future__ import annotations

import traceback
from typing import Iterator


class HarnessError(RuntimeError):
    """Base class for errors that abort a harness run."""


class HarnessIOError(HarnessError):
    """Operator input or terminal output failed (closed stream, EOF)."""


class SpawnError(HarnessError):
    """An external command could not be launched."""


class TransportError(HarnessError):
    """Network or TLS failure while delivering the result."""


class ResponseError(HarnessError):
    """The report endpoint answered with a non-OK status code."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = int(status_code)
        self.body = body
        super().__init__(
            f"A '{self.status_code}' status code was received, "
            f"with this response body:\n{body}"
        )


def iter_error_chain(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None


def format_error_report(exc: BaseException, *, with_traceback: bool = False) -> str:
    """Render ``exc`` and its causes the way the CLI prints them."""
    chain = list(iter_error_chain(exc))
    lines = [f"An error occurred: {chain[0]}"]
    for cause in chain[1:]:
        lines.append(f"\tcaused by: {cause}")
    if with_traceback:
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        lines.append("")
        lines.append(f"\tbacktrace: {trace.rstrip()}")
    return "\n".join(lines)
