# src/searchview/models/ranges.py
"""Offset and position models shared by backend payloads and results."""

from pydantic import BaseModel, ConfigDict, model_validator


class Range(BaseModel):
    """A highlight span given as start/end offsets."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @model_validator(mode="after")
    def _check_order(self) -> "Range":
        if self.start > self.end:
            raise ValueError(f"range start ({self.start}) is after its end ({self.end})")
        return self


class RangeLine(BaseModel):
    """A position inside a file: absolute byte offset plus line/column."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    byte: int
    line: int
    column: int = 0


class LineSpan(BaseModel):
    """A start/end pair of file positions."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    start: RangeLine
    end: RangeLine


# Line number -> highlight ranges on that line, in arrival order
LineRangeMap = dict[int, list[Range]]
