# src/pipedash/dashboard/frame.py
"""Frame layout: compute every draw command, then issue them."""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from src.pipedash.errors import EmptyPipelineError
from .geometry import Direction, Rect, partition
from .models import Stage
from .stage_panels import PanelSpec, StagePanelRenderer
from .surface import DrawingSurface

logger = logging.getLogger(__name__)

SECTION_TITLES = ("Stages", "Commits")
SECTION_MARGIN = 1
STAGE_MARGIN = 1
COMMIT_MARGIN = 0


@dataclass(frozen=True)
class DrawCommand:
    """A panel and the rectangle it is drawn into."""
    rect: Rect
    panel: PanelSpec


def displayable_stages(stages: Iterable[Stage]) -> List[Stage]:
    """
    Log each stage and drop the ones that cannot be displayed.

    Args:
        stages: Stages in reported order

    Returns:
        Named stages, order preserved
    """
    result = []
    for stage in stages:
        if stage.name is None:
            logger.error(f"Could not inspect stage: {stage!r}")
            continue
        if stage.latest_execution is None:
            logger.warning(f"Stage: {stage.name} has no recorded execution")
        else:
            logger.info(f"Stage: {stage.name} has status: {stage.latest_execution.status}")
        result.append(stage)
    return result


def build_frame(
    area: Rect,
    stages: Sequence[Stage],
    renderer: Optional[StagePanelRenderer] = None
) -> List[DrawCommand]:
    """
    Lay out the whole dashboard frame.

    Args:
        area: Full drawing surface
        stages: Pipeline stages in reported order
        renderer: Panel renderer (default StagePanelRenderer)

    Returns:
        Draw commands: section headers, then stage panels left to right,
        then commit placeholders

    Raises:
        EmptyPipelineError: If no stage has a name
    """
    renderer = renderer or StagePanelRenderer()
    shown = displayable_stages(stages)
    if not shown:
        raise EmptyPipelineError("Pipeline has no stages to display")

    sections = partition(area, Direction.COLUMN, SECTION_MARGIN, len(SECTION_TITLES))
    commands = [
        DrawCommand(rect, renderer.render_section(title))
        for title, rect in zip(SECTION_TITLES, sections)
    ]
    stages_rect, commits_rect = sections

    stage_rects = partition(stages_rect, Direction.ROW, STAGE_MARGIN, len(shown))
    for stage, rect in zip(shown, stage_rects):
        commands.append(DrawCommand(rect, renderer.render_stage(stage.name, stage.latest_execution)))

    # Commits section has no content yet, one inert cell per stage
    commit_rects = partition(commits_rect, Direction.ROW, COMMIT_MARGIN, len(shown))
    commands.extend(DrawCommand(rect, renderer.render_placeholder()) for rect in commit_rects)

    return commands


def paint(surface: DrawingSurface, commands: Iterable[DrawCommand]) -> int:
    """
    Issue draw commands against a surface in order.

    Returns:
        Number of commands issued
    """
    issued = 0
    for command in commands:
        surface.draw(command.rect, command.panel)
        issued += 1
    logger.debug(f"Painted {issued} panels")
    return issued
