"""Positional index over the OCR text lines of one page.

The statement template is generated, so labels sit at the same pixel
coordinates on every statement of a given layout. Fields are found by
anchoring on those coordinates and then reading neighbouring boxes in
reading order, which survives OCR garbling the label text itself.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def contains(self, point: Point) -> bool:
        """Inclusive containment test."""
        return (
            self.min_x <= point.x <= self.max_x
            and self.min_y <= point.y <= self.max_y
        )


@dataclass(frozen=True)
class TextBox:
    """One OCR text line and its bounding rectangle."""

    text: str
    rect: Rect


class TextBoxIndex:
    """Ordered text boxes of a page with geometric lookups.

    Pages hold a few dozen lines, so lookups are plain linear scans.
    """

    def __init__(self, boxes: Sequence[TextBox]) -> None:
        self._boxes: tuple[TextBox, ...] = tuple(boxes)

    def __len__(self) -> int:
        return len(self._boxes)

    def __iter__(self) -> Iterator[TextBox]:
        return iter(self._boxes)

    def find_by_rect(self, rect: Rect) -> tuple[TextBox, int] | None:
        """Return the first box whose rectangle equals ``rect`` exactly."""
        for idx, box in enumerate(self._boxes):
            if box.rect == rect:
                return box, idx
        return None

    def find_by_point(self, point: Point) -> tuple[TextBox, int] | None:
        """Return the first box whose rectangle contains ``point``."""
        for idx, box in enumerate(self._boxes):
            if box.rect.contains(point):
                return box, idx
        return None

    def box_at(self, index: int) -> TextBox | None:
        """Return the box at ``index``, or None when out of range.

        Negative indexes are treated as out of range, not as offsets from the end.
        """
        if 0 <= index < len(self._boxes):
            return self._boxes[index]
        return None

    def last(self) -> TextBox | None:
        return self._boxes[-1] if self._boxes else None
