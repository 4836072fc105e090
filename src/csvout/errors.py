"""Exception types reported on a pipeline's error channel."""


class OutputError(Exception):
    """Error raised or reported by the output stage."""

    pass


class InvalidDestination(OutputError):
    """Destination argument is not a path, a writable stream or a callable."""

    def __init__(self, message: str, target: object = None):
        super().__init__(message)
        self.target = target


class DestinationError(OutputError):
    """Failure reported by a destination while writing or closing.

    Exported for the error taxonomy only: csvout never raises it, since
    destinations forward their own exceptions verbatim. Custom streams may
    emit it as their ``error`` payload.
    """

    pass


__all__ = ["DestinationError", "InvalidDestination", "OutputError"]
