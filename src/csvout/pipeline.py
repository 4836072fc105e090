"""The pipeline owning an output stage.

A ``Pipeline`` receives records through ``write``/``run``, formats them with
one ``Stringifier`` per attached destination and reports progress through its
events:

- ``end`` (count): the producer has no more records. Destinations may still
  be flushing at this point.
- ``close`` (count): a destination confirmed everything reached it. Wait for
  this one, not ``end``, before reading a written file.
- ``error`` (exception): any failure, forwarded as the original object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from .errors import OutputError
from .events import EventEmitter
from .models import OutputOptions
from .output import Output
from .streams import WritableStream
from .stringify import Record, Stringifier

logger = logging.getLogger(__name__)


@dataclass
class PipelineState:
    """Record counters of a pipeline."""

    count: int = 0
    count_written: int = 0


@dataclass
class _Pipe:
    destination: WritableStream
    stringifier: Stringifier
    end: bool = True


class Pipeline(EventEmitter):
    """CSV session: accepts records and delivers them through ``to``."""

    def __init__(self, options: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__()
        self.state = PipelineState()
        self.to = Output(self, options)
        self._pipes: List[_Pipe] = []
        self._pending: List[Record] = []
        self._ended = False

    def pipe(
        self,
        destination: WritableStream,
        options: Optional[OutputOptions] = None,
        end: bool = True,
    ) -> WritableStream:
        """Attach ``destination``; records are formatted with ``options``.

        With ``end=False`` the destination is left open when the pipeline ends.
        Records written before any destination was attached are replayed into
        every destination piped until the next live ``write``.
        """
        pipe = _Pipe(destination, Stringifier(options), end)
        if not self._pipes:
            self.state.count_written += len(self._pending)
        self._pipes.append(pipe)
        logger.debug(
            "Piping into %s (end=%s, replaying %d)",
            type(destination).__name__,
            end,
            len(self._pending),
        )

        for record in self._pending:
            destination.write(pipe.stringifier.stringify(record))
        if self._ended:
            self._finish(pipe)
        return destination

    def _deliver(self, record: Record) -> bool:
        ok = True
        for pipe in self._pipes:
            if not pipe.destination.write(pipe.stringifier.stringify(record)):
                ok = False
        self.state.count_written += 1
        return ok

    def write(self, record: Record) -> bool:
        """Send one record to every destination.

        Returns False when a destination asked to slow down or failed.
        """
        if self._ended:
            self.error(OutputError("write after end"))
            return False
        self.state.count += 1
        if not self._pipes:
            self._pending.append(record)
            return True
        self._pending = []
        return self._deliver(record)

    def _finish(self, pipe: _Pipe) -> None:
        trailer = pipe.stringifier.flush()
        if trailer:
            pipe.destination.write(trailer)
        if pipe.end:
            pipe.destination.end()

    def end(self) -> "Pipeline":
        """Signal that no more records will come."""
        if self._ended:
            return self
        self._ended = True
        # Destinations piped after this point are finished on attach.
        self.emit("end", self.state.count)
        for pipe in self._pipes:
            self._finish(pipe)
        return self

    def run(self, records: Iterable[Record]) -> "Pipeline":
        """Write every record, then end the pipeline."""
        for record in records:
            self.write(record)
        return self.end()

    def error(self, exc: BaseException) -> "Pipeline":
        """Report ``exc`` on the error channel."""
        if not self.emit("error", exc):
            logger.error("Unhandled pipeline error: %s", exc)
        return self


__all__ = ["Pipeline", "PipelineState"]
