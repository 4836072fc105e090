"""Output options record and line-break resolution."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

LineBreaks = Literal["auto", "unix", "mac", "windows", "unicode"]

# Symbolic line-break names and their literal separators. ``None`` lets the
# producer pick its default.
LINE_BREAKS: Dict[str, Optional[str]] = {
    "auto": None,
    "unix": "\n",
    "mac": "\r",
    "windows": "\r\n",
    "unicode": "\u2028",
}


def resolve_line_breaks(value: Optional[str]) -> Optional[str]:
    """Translate a symbolic line-break name into its literal separator.

    Literal separators and ``None`` pass through unchanged, so resolving an
    already resolved value is a no-op.
    """
    if value is None:
        return None
    return LINE_BREAKS.get(value, value)


class OutputOptions(BaseModel):
    """Settings of the output stage.

    Keys may be given in snake_case or in their camelCase spelling
    (``lineBreaks``, ``newColumns``). Unknown keys are kept as extras so a
    merge never loses what the caller set.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    delimiter: str = Field(",", min_length=1, max_length=1)
    quote: str = Field('"', min_length=1, max_length=1)
    quoted: bool = False
    escape: str = Field('"', min_length=1, max_length=1)
    columns: Optional[List[str]] = None
    header: bool = False
    line_breaks: Optional[Union[LineBreaks, str]] = "auto"
    flags: Literal["w", "a"] = "w"
    new_columns: bool = False
    end: bool = True
    encoding: str = "utf-8"

    def merge(
        self, updates: Union["OutputOptions", Mapping[str, Any], None]
    ) -> "OutputOptions":
        """Return a new record with ``updates`` laid over the current values."""
        if updates is None:
            return self
        if isinstance(updates, OutputOptions):
            updates = updates.model_dump(exclude_unset=True)

        data = self.model_dump()
        for key, value in updates.items():
            data[_field_name(key)] = value
        return type(self).model_validate(data)

    def resolved(self) -> "OutputOptions":
        """Return a copy whose ``line_breaks`` holds a literal or ``None``."""
        return self.model_copy(
            update={"line_breaks": resolve_line_breaks(self.line_breaks)}
        )


def _field_name(key: str) -> str:
    for name, field in OutputOptions.model_fields.items():
        if key == name or key == field.alias:
            return name
    return key


__all__ = ["LINE_BREAKS", "LineBreaks", "OutputOptions", "resolve_line_breaks"]
