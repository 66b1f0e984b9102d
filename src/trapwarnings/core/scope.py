# topmark:header:start
#
#   project      : TrapWarnings
#   file         : scope.py
#   file_relpath : src/trapwarnings/core/scope.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Interception scope for Python warnings.

An [`InterceptionScope`][trapwarnings.core.scope.InterceptionScope] replaces the
process-wide `warnings.showwarning` hook for the duration of one invocation and
appends the text of every emitted warning to its
[`DiagnosticBuffer`][trapwarnings.core.scope.DiagnosticBuffer].

Save and restore are delegated to `warnings.catch_warnings`, which snapshots both
the hook and the filter list on entry and puts them back on exit. The scope is a
context manager, so restoration happens on every exit path, including exceptions
raised by the code under test.

Notes:
    - The hook and the filters are process-wide state. Scopes are not thread-safe
      and must be used sequentially.
    - Nesting is plain save/restore: an inner scope shadows the outer handler and
      closing it reinstates whatever was active right before it opened.
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TextIO

from trapwarnings.config.logging import get_logger
from trapwarnings.errors import ScopeStateError

if TYPE_CHECKING:
    from types import TracebackType

    from trapwarnings.config.logging import TrapLogger

logger: TrapLogger = get_logger(__name__)

# Signature of `warnings.showwarning`.
ShowWarning = Callable[..., Any]


@dataclass(frozen=True)
class CapturedWarning:
    """Arguments of one `warnings.showwarning` call.

    Only used to forward a captured warning to the outer handler; matching
    always works on the plain message text.
    """

    message: Warning | str
    category: type[Warning]
    filename: str
    lineno: int
    file: TextIO | None = None
    line: str | None = None

    @property
    def text(self) -> str:
        """The warning message as a string."""
        return str(self.message)


CaptureCallback = Callable[[str, CapturedWarning], None]


class DiagnosticBuffer:
    """Append-only, insertion-ordered list of captured warning messages."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def append(self, text: str) -> None:
        """Append a captured message."""
        self._items.append(text)

    def snapshot(self) -> tuple[str, ...]:
        """Return the captured messages as an immutable tuple."""
        return tuple(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"DiagnosticBuffer({self._items!r})"


class InterceptionScope:
    """Capture warnings emitted while the scope is open.

    Args:
        on_capture (CaptureCallback | None): Called with ``(text, record)`` for each
            warning as it is captured, after it was appended to the buffer.
        forward (bool): Re-emit each captured warning through the handler that was
            active when the scope opened, so the surrounding environment still sees it.
        capture_all (bool): Install an ``"always"`` filter while open. Without it the
            active filters apply: ignored warnings are not captured, repeats from one
            location may be deduplicated, and ``"error"`` filters raise.

    Attributes:
        buffer (DiagnosticBuffer): Messages captured so far.
        previous_handler (ShowWarning | None): The `warnings.showwarning` hook saved on
            `open`; None while the scope has never been opened.
    """

    def __init__(
        self,
        on_capture: CaptureCallback | None = None,
        *,
        forward: bool = False,
        capture_all: bool = True,
    ) -> None:
        self.buffer: DiagnosticBuffer = DiagnosticBuffer()
        self.previous_handler: ShowWarning | None = None
        self._on_capture: CaptureCallback | None = on_capture
        self._forward: bool = forward
        self._capture_all: bool = capture_all
        self._guard: warnings.catch_warnings | None = None

    @property
    def is_open(self) -> bool:
        """Return True while the scope's handler is installed."""
        return self._guard is not None

    def open(self) -> InterceptionScope:
        """Save the current handler and filters, then install the capturing handler.

        Returns:
            InterceptionScope: ``self``.

        Raises:
            ScopeStateError: If the scope is already open.
        """
        if self._guard is not None:
            raise ScopeStateError("Interception scope is already open")

        guard = warnings.catch_warnings()
        guard.__enter__()
        self._guard = guard
        self.previous_handler = warnings.showwarning
        if self._capture_all:
            warnings.simplefilter("always")
        warnings.showwarning = self._handle
        logger.trace("Opened interception scope %#x", id(self))
        return self

    def close(self) -> None:
        """Restore the handler and filters saved by `open`.

        Raises:
            ScopeStateError: If the scope is not open.
        """
        if self._guard is None:
            raise ScopeStateError("Interception scope is not open")

        guard, self._guard = self._guard, None
        guard.__exit__(None, None, None)
        logger.trace("Closed interception scope %#x (%d captured)", id(self), len(self.buffer))

    def forward(self, record: CapturedWarning) -> None:
        """Send a captured warning to the handler that was active before `open`.

        Args:
            record (CapturedWarning): The warning to re-emit.
        """
        handler: ShowWarning | None = self.previous_handler
        if handler is None:
            return
        handler(
            record.message,
            record.category,
            record.filename,
            record.lineno,
            record.file,
            record.line,
        )

    def _handle(
        self,
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        record = CapturedWarning(message, category, filename, lineno, file, line)
        self.buffer.append(record.text)
        logger.debug("Captured %s: %s (%s:%d)", category.__name__, record.text, filename, lineno)
        if self._forward:
            self.forward(record)
        if self._on_capture is not None:
            self._on_capture(record.text, record)

    def __enter__(self) -> InterceptionScope:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
