"""Destination variants and the boundary check that picks one."""

from __future__ import annotations

import io
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Union

from ..streams import IOStream, WritableStream
from .errors import Error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallbackDestination:
    """Receive the whole output as ``callback(data, count)``."""

    callback: Callable[[str, int], Any]


@dataclass(frozen=True)
class PathDestination:
    """Write to a file at ``path``."""

    path: Path


@dataclass(frozen=True)
class StreamDestination:
    """Write to a caller-supplied writable stream."""

    stream: WritableStream


Destination = Union[CallbackDestination, PathDestination, StreamDestination]


def resolve_destination(target: Any) -> Destination | Error:
    """Classify ``target`` by what it can do.

    Resolution order:
    1. ``str`` or ``os.PathLike`` → file path
    2. object with ``write``, ``end`` and ``on`` → stream
    3. Python file object (anything with a callable ``write``) → stream,
       wrapped in an ``IOStream``
    4. callable → callback receiving the output text
    """
    if isinstance(target, (str, os.PathLike)):
        destination: Destination = PathDestination(Path(target))
    elif isinstance(target, WritableStream):
        destination = StreamDestination(target)
    elif isinstance(target, io.IOBase) or callable(getattr(target, "write", None)):
        destination = StreamDestination(IOStream(target))
    elif callable(target):
        destination = CallbackDestination(target)
    else:
        return Error(
            message=f"Invalid destination: {type(target).__name__} is not a "
            "path, a writable stream or a callable"
        )

    logger.debug("Resolved destination %r as %s", target, type(destination).__name__)
    return destination


__all__ = [
    "CallbackDestination",
    "Destination",
    "PathDestination",
    "StreamDestination",
    "resolve_destination",
]
