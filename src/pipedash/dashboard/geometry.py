# src/pipedash/dashboard/geometry.py
"""Rectangle geometry for laying out the dashboard frame."""
from dataclasses import dataclass
from enum import Enum
from typing import List

from src.pipedash.errors import PartitionContractViolation


class Direction(Enum):
    """Axis along which an area is split."""
    ROW = "row"  # left to right
    COLUMN = "column"  # top to bottom


@dataclass(frozen=True)
class Rect:
    """Integer rectangle in terminal cells."""
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Rect size must not be negative: {self.width}x{self.height}")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.area == 0

    def inner(self, margin: int) -> "Rect":
        """
        Shrink the rectangle by margin cells on every side.

        Dimensions that cannot fit twice the margin collapse to zero.
        """
        return Rect(
            x=self.x + margin,
            y=self.y + margin,
            width=max(0, self.width - 2 * margin),
            height=max(0, self.height - 2 * margin),
        )

    def intersection(self, other: "Rect") -> "Rect":
        """Overlapping part of two rectangles (zero size if disjoint)."""
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))


def split_lengths(length: int, count: int) -> List[int]:
    """Split length into count equal-weight spans that sum to length exactly."""
    return [
        (length * (k + 1)) // count - (length * k) // count
        for k in range(count)
    ]


def partition(area: Rect, direction: Direction, margin: int, count: int) -> List[Rect]:
    """
    Tile the margined interior of an area with count equal-weight regions.

    Args:
        area: Rectangle to split
        direction: ROW splits the width, COLUMN splits the height
        margin: Cells removed from every side before splitting
        count: Number of regions, at least 1

    Returns:
        count contiguous rectangles in order, covering the interior exactly

    Raises:
        PartitionContractViolation: If count < 1 or margin < 0
    """
    if count < 1:
        raise PartitionContractViolation(f"Cannot partition into {count} regions")
    if margin < 0:
        raise PartitionContractViolation(f"Margin must not be negative: {margin}")

    interior = area.inner(margin)
    regions = []

    if direction == Direction.ROW:
        x = interior.x
        for span in split_lengths(interior.width, count):
            regions.append(Rect(x, interior.y, span, interior.height))
            x += span
    else:
        y = interior.y
        for span in split_lengths(interior.height, count):
            regions.append(Rect(interior.x, y, interior.width, span))
            y += span

    return regions
