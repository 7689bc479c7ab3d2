# src/pipedash/dashboard/__init__.py
"""Pipeline dashboard visualization."""
from .geometry import Rect, Direction, partition, split_lengths
from .models import StatusCode, ExecutionStatus, Stage, Pipeline
from .styles import COLORS, STATUS_BORDERS, NO_EXECUTION_BORDER, SECTION_BORDER, get_status_color
from .stage_panels import (
    BorderKind,
    PanelSpec,
    StagePanelRenderer,
    render_panel,
    render_section_panel,
    render_placeholder_panel
)
from .surface import DrawingSurface, ConsoleSurface
from .frame import SECTION_TITLES, DrawCommand, displayable_stages, build_frame, paint
from .pipeline_dashboard import PipelineDashboard, DashboardConfig

__all__ = [
    "Rect",
    "Direction",
    "partition",
    "split_lengths",
    "StatusCode",
    "ExecutionStatus",
    "Stage",
    "Pipeline",
    "COLORS",
    "STATUS_BORDERS",
    "NO_EXECUTION_BORDER",
    "SECTION_BORDER",
    "get_status_color",
    "BorderKind",
    "PanelSpec",
    "StagePanelRenderer",
    "render_panel",
    "render_section_panel",
    "render_placeholder_panel",
    "DrawingSurface",
    "ConsoleSurface",
    "SECTION_TITLES",
    "DrawCommand",
    "displayable_stages",
    "build_frame",
    "paint",
    "PipelineDashboard",
    "DashboardConfig",
]
