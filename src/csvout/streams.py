"""Writable endpoints the output stage can pipe formatted CSV into.

Three concrete endpoints live here:
- StringSink: accumulates every chunk and hands the text to a callback
- FileStream: lazily opened file handle, the ``fs.createWriteStream`` analogue
- IOStream: adapter around an already open Python file object

All of them report failures as ``error`` events instead of raising, and emit
``close`` once everything written has reached the destination.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import (
    Any,
    Callable,
    Mapping,
    Optional,
    Protocol,
    TextIO,
    Union,
    runtime_checkable,
)

from .events import EventEmitter

logger = logging.getLogger(__name__)


@runtime_checkable
class WritableStream(Protocol):
    """Capability set of a destination stream."""

    def write(self, chunk: str) -> bool: ...

    def end(self) -> None: ...

    def on(self, event: str, listener: Callable[..., Any]) -> Any: ...


class StringSink(EventEmitter):
    """Collect written chunks and pass the joined text to ``callback`` on end.

    ``counter`` is read when ``end`` is called, so the callback receives the
    number of records written at that instant.
    """

    def __init__(
        self,
        callback: Callable[[str, int], Any],
        counter: Callable[[], int],
    ) -> None:
        super().__init__()
        self.writable = True
        self._callback = callback
        self._counter = counter
        self._chunks: list[str] = []

    def write(self, chunk: str) -> bool:
        self._chunks.append(chunk)
        return True

    def end(self) -> None:
        if not self.writable:
            return
        self.writable = False
        self._callback("".join(self._chunks), self._counter())


class FileStream(EventEmitter):
    """Write text to a file opened on first use.

    ``flags`` follows the usual open modes: ``w`` creates or truncates and
    ``a`` appends. Opening and writing errors are emitted as ``error``.
    The file is opened with ``newline=""`` so line breaks are written as given.
    """

    def __init__(
        self,
        path: Union[str, os.PathLike],
        flags: str = "w",
        encoding: str = "utf-8",
    ) -> None:
        super().__init__()
        self.path = Path(path)
        self.flags = flags
        self.encoding = encoding
        self.writable = True
        self.bytes_written = 0
        self._handle: Optional[TextIO] = None
        self._failed = False

    @classmethod
    def from_options(
        cls, path: Union[str, os.PathLike], options: Mapping[str, Any]
    ) -> "FileStream":
        """Build a stream from the filesystem-level keys of ``options``."""
        return cls(
            path,
            flags=options.get("flags", "w"),
            encoding=options.get("encoding", "utf-8"),
        )

    def _open(self) -> Optional[TextIO]:
        """Return the open handle, opening it on first use; None on failure."""
        if self._handle is not None:
            return self._handle
        if self._failed:
            return None
        try:
            self._handle = open(
                self.path, self.flags, encoding=self.encoding, newline=""
            )
        except OSError as e:
            self._fail(e)
            return None
        logger.debug("Opened %s (flags=%s)", self.path, self.flags)
        self.emit("open", self.path)
        return self._handle

    def _fail(self, exc: Exception) -> None:
        self._failed = True
        self.writable = False
        self.emit("error", exc)

    def write(self, chunk: str) -> bool:
        if not self.writable:
            return False
        handle = self._open()
        if handle is None:
            return False
        try:
            handle.write(chunk)
        except (OSError, UnicodeEncodeError) as e:
            self._fail(e)
            return False
        self.bytes_written += len(chunk.encode(self.encoding, "replace"))
        return True

    def end(self) -> None:
        if not self.writable:
            return
        handle = self._open()
        if handle is None:
            return
        self.writable = False
        try:
            handle.close()
        except OSError as e:
            self._fail(e)
            return
        logger.debug("Closed %s (%d bytes)", self.path, self.bytes_written)
        self.emit("finish")
        self.emit("close")


class IOStream(EventEmitter):
    """Expose a Python file object (``sys.stdout``, ``io.StringIO``...) as a stream.

    ``end`` flushes the target and closes it only when ``close`` is True, so
    borrowed handles like stdout stay usable.
    """

    def __init__(self, target: TextIO, close: bool = False) -> None:
        super().__init__()
        self.target = target
        self.close_target = close
        self.writable = True

    def write(self, chunk: str) -> bool:
        if not self.writable:
            return False
        try:
            self.target.write(chunk)
        except (OSError, TypeError, ValueError) as e:
            self.writable = False
            self.emit("error", e)
            return False
        return True

    def end(self) -> None:
        if not self.writable:
            return
        self.writable = False
        try:
            if hasattr(self.target, "flush"):
                self.target.flush()
            if self.close_target:
                self.target.close()
        except (OSError, ValueError) as e:
            self.emit("error", e)
            return
        self.emit("finish")
        self.emit("close")


__all__ = ["FileStream", "IOStream", "StringSink", "WritableStream"]
