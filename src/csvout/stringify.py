"""Record formatter feeding the output stage."""

from __future__ import annotations

import csv
import io
from typing import Any, List, Mapping, Optional, Sequence, Union

from .models import OutputOptions

Record = Union[Mapping[str, Any], Sequence[Any]]

DEFAULT_LINE_BREAK = "\n"


class Stringifier:
    """Turn records into CSV text, one chunk per record.

    Mapping records are laid out by ``columns`` (from the options, or the
    keys of the first mapping). Sequence records are written positionally.

    Notes:
        - Missing keys result in empty values
        - ``new_columns`` appends keys first seen in later records
        - The header row is prepended to the first chunk
    """

    def __init__(self, options: Optional[OutputOptions] = None) -> None:
        self.options = (options or OutputOptions()).resolved()
        self.columns: Optional[List[str]] = (
            list(self.options.columns) if self.options.columns else None
        )
        self.line_break = self.options.line_breaks or DEFAULT_LINE_BREAK
        self._header_pending = self.options.header

    def _format(self, row: Sequence[Any]) -> str:
        opts = self.options
        buffer = io.StringIO()
        writer = csv.writer(
            buffer,
            delimiter=opts.delimiter,
            quotechar=opts.quote,
            quoting=csv.QUOTE_ALL if opts.quoted else csv.QUOTE_MINIMAL,
            doublequote=opts.escape == opts.quote,
            escapechar=None if opts.escape == opts.quote else opts.escape,
            lineterminator=self.line_break,
        )
        writer.writerow(row)
        return buffer.getvalue()

    def _track_columns(self, record: Mapping[str, Any]) -> List[str]:
        if self.columns is None:
            self.columns = list(record.keys())
        elif self.options.new_columns:
            for key in record:
                if key not in self.columns:
                    self.columns.append(key)
        return self.columns

    def _header(self) -> str:
        if not self._header_pending or not self.columns:
            return ""
        self._header_pending = False
        return self._format(self.columns)

    def stringify(self, record: Record) -> str:
        """Format one record, prefixed by the header row when it is due."""
        if isinstance(record, Mapping):
            columns = self._track_columns(record)
            row: Sequence[Any] = [record.get(column, "") for column in columns]
        elif isinstance(record, str):
            row = [record]
        else:
            row = list(record)
        return self._header() + self._format(row)

    def flush(self) -> str:
        """Return what is still owed at end of input (a lone header row)."""
        return self._header()


__all__ = ["DEFAULT_LINE_BREAK", "Record", "Stringifier"]
