# src/pipedash/dashboard/surface.py
"""Drawing surfaces that accept positioned panels."""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from rich.cells import cell_len
from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment

from .geometry import Rect
from .stage_panels import PanelSpec, StagePanelRenderer

logger = logging.getLogger(__name__)

# Smallest rectangle that can hold a border
MIN_BORDERED_WIDTH = 2
MIN_BORDERED_HEIGHT = 2


class DrawingSurface(ABC):
    """Something with a fixed size that panels can be drawn onto."""

    @abstractmethod
    def size(self) -> Rect:
        """Full rectangle of the surface."""

    @abstractmethod
    def draw(self, rect: Rect, panel: PanelSpec) -> None:
        """Draw a panel into a rectangle of the surface."""


class ConsoleSurface(DrawingSurface):
    """
    Cell buffer the size of a Rich console.

    Panels are rendered with the console at their rectangle's size and copied
    into the buffer; flush() prints the buffer as one frame.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        renderer: Optional[StagePanelRenderer] = None
    ):
        """
        Initialize surface.

        Args:
            console: Console to render with and print to
            width: Override console width
            height: Override console height
            renderer: Converts panel specs to Rich renderables
        """
        self.console = console or Console()
        self.renderer = renderer or StagePanelRenderer()
        console_width, console_height = self.console.size
        self._rect = Rect(
            0, 0,
            width if width is not None else console_width,
            height if height is not None else console_height
        )
        self._cells: List[List[Segment]] = [
            [Segment(" ")] * self._rect.width for _ in range(self._rect.height)
        ]

    def size(self) -> Rect:
        return self._rect

    def draw(self, rect: Rect, panel: PanelSpec) -> None:
        target = rect.intersection(self._rect)
        if target.is_empty:
            return
        if not panel.bordered:
            # Borderless panels have no content, cells underneath stay as they are
            return
        if rect.width < MIN_BORDERED_WIDTH or rect.height < MIN_BORDERED_HEIGHT:
            logger.debug(f"Skipping panel {panel.title!r}: {rect.width}x{rect.height} cannot hold a border")
            return

        options = self.console.options.update_dimensions(rect.width, rect.height)
        lines = self.console.render_lines(self.renderer.to_renderable(panel), options, pad=True)

        for dy, line in enumerate(lines[:rect.height]):
            y = rect.y + dy
            if target.y <= y < target.bottom:
                self._blit_line(line, rect.x, y, target)

    def _blit_line(self, line: List[Segment], x: int, y: int, clip: Rect) -> None:
        """Copy one rendered line into row y starting at column x, clipped."""
        row = self._cells[y]
        for segment in line:
            if segment.control:
                continue
            for char in segment.text:
                width = cell_len(char)
                if x + width > clip.right:
                    return
                if x >= clip.x:
                    row[x] = Segment(char, segment.style)
                    # Wide characters own the following cells
                    for offset in range(1, width):
                        row[x + offset] = Segment("", segment.style)
                x += width

    def lines(self) -> List[str]:
        """Plain text of each row, for inspection."""
        return ["".join(segment.text for segment in row) for row in self._cells]

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        for index, row in enumerate(self._cells):
            if index:
                yield Segment.line()
            yield from Segment.simplify(row)

    def flush(self) -> None:
        """Clear the console and print the frame."""
        if self.console.is_terminal:
            self.console.clear()
        self.console.print(self, end="", crop=False)
