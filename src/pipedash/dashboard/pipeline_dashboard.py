"""Main dashboard controller for pipeline visualization."""
import logging
from dataclasses import dataclass
from typing import List, Optional
from rich.console import Console

from .frame import DrawCommand, build_frame, paint
from .geometry import Rect
from .models import Pipeline
from .stage_panels import StagePanelRenderer
from .surface import ConsoleSurface

logger = logging.getLogger(__name__)


@dataclass
class DashboardConfig:
    """Configuration for pipeline dashboard."""
    width: Optional[int] = None  # default: console width
    height: Optional[int] = None  # default: console height


class PipelineDashboard:
    """
    Dashboard controller for a single pipeline snapshot.

    Holds the fetched pipeline and paints it as one static frame.
    """

    def __init__(self, config: Optional[DashboardConfig] = None, console: Optional[Console] = None):
        """
        Initialize dashboard.

        Args:
            config: Dashboard configuration options
            console: Console the frame is printed to
        """
        self.config = config or DashboardConfig()
        self.console = console or Console()
        self.stage_renderer = StagePanelRenderer()
        self.pipeline: Optional[Pipeline] = None

    def load(self, pipeline: Pipeline) -> None:
        """
        Set the pipeline snapshot to display.

        Args:
            pipeline: Pipeline with its stages in reported order
        """
        self.pipeline = pipeline
        logger.debug(f"Loaded pipeline {pipeline.name} with {len(pipeline.stages)} stages")

    def build_frame(self, area: Rect) -> List[DrawCommand]:
        """
        Compute all draw commands for the loaded pipeline.

        Args:
            area: Full drawing area

        Returns:
            Draw commands in paint order
        """
        if self.pipeline is None:
            raise RuntimeError("No pipeline loaded")
        return build_frame(area, self.pipeline.stages, self.stage_renderer)

    def create_surface(self) -> ConsoleSurface:
        """Create a surface sized from config, falling back to the console size."""
        return ConsoleSurface(
            console=self.console,
            width=self.config.width,
            height=self.config.height,
            renderer=self.stage_renderer
        )

    def render_once(self) -> ConsoleSurface:
        """
        Render the dashboard once and print it.

        The whole frame is laid out before anything is drawn, so a layout
        error leaves the terminal untouched.

        Returns:
            The painted surface
        """
        surface = self.create_surface()
        commands = self.build_frame(surface.size())
        paint(surface, commands)
        surface.flush()
        return surface
