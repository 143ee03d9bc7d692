from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .constants import REPEAT_TEMPLATE
from .wrapping import wrap_batch

RegionKind = Literal["separator", "literal", "comment", "text"]


@dataclass(frozen=True)
class Batch:
    """One executable unit of a script, with offsets into the *original* script.

    ``text`` excludes comments and the separator statement; string literals
    are kept verbatim.
    """

    text: str
    repeat_count: int = 1
    index: int = 0
    char_start: int = 0
    char_end: int = 0
    repeat_template: str = field(default=REPEAT_TEMPLATE, repr=False, compare=False)

    @property
    def sql(self) -> str:
        """Text to hand to an executor, run exactly once."""
        return wrap_batch(self.text, self.repeat_count, self.repeat_template)


@dataclass(frozen=True)
class Region:
    """A classified stretch of the script (character offsets into the script)."""

    kind: RegionKind
    char_start: int
    char_end: int
    detail: str | None = None


@dataclass
class Trace:
    """Structured debugging output."""

    regions: list[Region] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add(
        self, kind: RegionKind, char_start: int, char_end: int, detail: str | None = None
    ) -> None:
        # Consecutive ordinary characters collapse into one text region.
        if kind == "text" and self.regions:
            last = self.regions[-1]
            if last.kind == "text" and last.char_end == char_start:
                self.regions[-1] = Region("text", last.char_start, char_end)
                return
        self.regions.append(Region(kind, char_start, char_end, detail))

    def kinds(self) -> list[RegionKind]:
        return [region.kind for region in self.regions]
