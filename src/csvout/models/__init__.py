"""Pydantic models and typed values of the output stage."""

from .destination import (
    CallbackDestination,
    Destination,
    PathDestination,
    StreamDestination,
    resolve_destination,
)
from .errors import Error
from .options import LINE_BREAKS, LineBreaks, OutputOptions, resolve_line_breaks

__all__ = [
    "CallbackDestination",
    "Destination",
    "Error",
    "LINE_BREAKS",
    "LineBreaks",
    "OutputOptions",
    "PathDestination",
    "StreamDestination",
    "resolve_destination",
    "resolve_line_breaks",
]
