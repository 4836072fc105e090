"""Writing data to a destination.

``pipeline.to`` delivers formatted CSV to a callback, a writable stream or a
file. Call it directly and let it work out what the destination is, or pick
the adapter yourself. These two lines are equivalent:

    pipeline.to("/tmp/data.csv")
    pipeline.to.path("/tmp/data.csv")

Every method returns the pipeline so calls can be chained. Problems are
reported on the pipeline's ``error`` event, never raised, invalid
option values included.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, Callable, Mapping, Union

from pydantic import ValidationError

from .errors import InvalidDestination
from .models import (
    CallbackDestination,
    Error,
    OutputOptions,
    PathDestination,
    StreamDestination,
    resolve_destination,
)
from .streams import FileStream, StringSink, WritableStream

if TYPE_CHECKING:
    from .pipeline import Pipeline

logger = logging.getLogger(__name__)

OptionsArg = Union[OutputOptions, Mapping[str, Any], None]


class Output:
    """Output stage of a pipeline, exposed as ``pipeline.to``."""

    def __init__(self, pipeline: "Pipeline", options: OptionsArg = None) -> None:
        self._pipeline = pipeline
        self._options = OutputOptions()
        self._apply(options)

    def __call__(self, target: Any, options: OptionsArg = None) -> "Pipeline":
        """Write to any sort of destination.

        A string or path-like is a file path, an object with ``write`` is a
        stream and a callable receives ``(data, count)`` once all records
        are written.

        Examples:
            pipeline.to(lambda data, count: print(data))
            pipeline.to("./path/to/file.csv")
            pipeline.to(open("./path/to/file.csv", "w"))
        """
        destination = resolve_destination(target)
        if isinstance(destination, Error):
            self._pipeline.error(InvalidDestination(destination.message, target))
        elif isinstance(destination, PathDestination):
            self.path(destination.path, options)
        elif isinstance(destination, StreamDestination):
            self.stream(destination.stream, options)
        elif isinstance(destination, CallbackDestination):
            self.string(destination.callback, options)
        return self._pipeline

    def options(self, options: OptionsArg = None) -> Union[OutputOptions, "Pipeline"]:
        """Update or retrieve the output options.

        With an argument the options are merged into the current ones (keys
        not mentioned keep their value) and the pipeline is returned. Without
        one the current ``OutputOptions`` are returned.

        Options:
            delimiter    Field delimiter, one character (default ",")
            quote        Quote character (default '"')
            quoted       Quote every field, not only the ones that need it
            escape       Escape character for quotes (default '"')
            columns      Field names, order matters; picks values out of mappings
            header       Write the column names on the first line
            line_breaks  Literal separator or auto, unix, mac, windows, unicode
            flags        "w" to create or overwrite a file, "a" to append
            new_columns  Append columns first seen in later records
            end          Call ``end`` on a stream destination once done
            encoding     Text encoding of files opened by ``path``
        """
        if options is None:
            return self._options
        self._apply(options)
        return self._pipeline

    def _apply(self, options: OptionsArg) -> bool:
        """Merge ``options``; report invalid values on the error channel."""
        try:
            self._options = self._options.merge(options)
        except ValidationError as e:
            self._pipeline.error(e)
            return False
        return True

    def string(
        self, callback: Callable[[str, int], Any], options: OptionsArg = None
    ) -> "Pipeline":
        """Provide the output string to ``callback(data, count)``.

        ``count`` is the number of records written.
        """
        if not self._apply(options):
            return self._pipeline
        state = self._pipeline.state
        sink = StringSink(callback, lambda: state.count_written)
        self._pipeline.pipe(sink, self._options.resolved(), end=True)
        return self._pipeline

    def stream(self, stream: WritableStream, options: OptionsArg = None) -> "Pipeline":
        """Write to a writable stream.

        ``end=False`` keeps the stream open after the last record.
        """
        if not self._apply(options):
            return self._pipeline
        self._attach(stream, self._options.model_dump(), end=self._options.end)
        return self._pipeline

    def path(self, path: Union[str, os.PathLike], options: OptionsArg = None) -> "Pipeline":
        """Write to a file at ``path``.

        The ``close`` event is emitted once the file is written and closed.
        Relying on ``end`` is incorrect: it fires when the records are done
        but before the file is written.

        Files opened here are always closed, whatever ``end`` says.
        """
        if not self._apply(options):
            return self._pipeline
        file_options = self._options.model_dump(exclude={"end"})
        stream = FileStream.from_options(path, file_options)
        self._attach(stream, file_options, end=True)
        return self._pipeline

    def _attach(
        self, stream: WritableStream, options: Mapping[str, Any], end: bool
    ) -> None:
        """Subscribe to ``stream`` and pipe into it.

        ``end`` alone decides whether the stream is ended; an ``end`` key in
        ``options`` is not consulted.
        """
        pipeline = self._pipeline
        resolved = OutputOptions.model_validate(options).resolved()

        def _on_close(*_: Any) -> None:
            logger.debug("Destination closed after %d records", pipeline.state.count)
            pipeline.emit("close", pipeline.state.count)

        stream.on("error", pipeline.error)
        stream.on("close", _on_close)
        pipeline.pipe(stream, resolved, end=end)


__all__ = ["Output"]
