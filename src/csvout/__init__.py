"""csvout: deliver formatted CSV to callbacks, streams and files."""

from .errors import DestinationError, InvalidDestination, OutputError
from .models import LINE_BREAKS, OutputOptions, resolve_line_breaks
from .output import Output
from .pipeline import Pipeline, PipelineState
from .streams import FileStream, IOStream, StringSink, WritableStream

__all__ = [
    "__version__",
    "DestinationError",
    "FileStream",
    "IOStream",
    "InvalidDestination",
    "LINE_BREAKS",
    "Output",
    "OutputError",
    "OutputOptions",
    "Pipeline",
    "PipelineState",
    "StringSink",
    "WritableStream",
    "resolve_line_breaks",
]

__version__ = "0.0.1"
