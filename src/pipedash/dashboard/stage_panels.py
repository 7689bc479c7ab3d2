"""Stage panel renderers for pipeline dashboard."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from rich.panel import Panel
from rich.text import Text

from src.pipedash.errors import MissingStageName
from .models import ExecutionStatus
from .styles import SECTION_BORDER, THICK_BOX, TITLE_STYLE, get_status_color


class BorderKind(Enum):
    """Border drawn around a panel."""
    THICK = "thick"
    NONE = "none"


@dataclass(frozen=True)
class PanelSpec:
    """Visual attributes of one panel in a frame."""
    title: Optional[str] = None
    title_style: str = TITLE_STYLE
    border: BorderKind = BorderKind.NONE
    border_color: Optional[str] = None

    @property
    def bordered(self) -> bool:
        return self.border != BorderKind.NONE


class StagePanelRenderer:
    """Maps pipeline stages and sections to panel specs and Rich panels."""

    def render_stage(self, title: Optional[str], status: Optional[ExecutionStatus]) -> PanelSpec:
        """
        Build the panel for a single stage.

        Args:
            title: Stage name, shown bold on the top border
            status: Latest execution, None if the stage never ran

        Returns:
            Thick-bordered panel colored by status

        Raises:
            MissingStageName: If title is None
        """
        if title is None:
            raise MissingStageName("Stage panels need a stage name")

        return PanelSpec(
            title=title,
            border=BorderKind.THICK,
            border_color=get_status_color(status),
        )

    def render_section(self, title: str) -> PanelSpec:
        """Render a section header panel."""
        return PanelSpec(
            title=title,
            border=BorderKind.THICK,
            border_color=SECTION_BORDER,
        )

    def render_placeholder(self) -> PanelSpec:
        """Render an empty borderless cell."""
        return PanelSpec()

    def to_renderable(self, spec: PanelSpec) -> Union[Panel, Text]:
        """
        Convert a panel spec to a Rich renderable.

        Args:
            spec: Panel attributes

        Returns:
            Rich Panel for bordered specs, empty Text otherwise
        """
        if not spec.bordered:
            return Text("")

        title = Text(spec.title, style=spec.title_style) if spec.title else None
        return Panel(
            Text(""),
            title=title,
            title_align="left",
            box=THICK_BOX,
            border_style=spec.border_color or "",
            padding=0,
        )


# Convenience functions
def render_panel(title: Optional[str], status: Optional[ExecutionStatus]) -> PanelSpec:
    """Render stage panel."""
    return StagePanelRenderer().render_stage(title, status)


def render_section_panel(title: str) -> PanelSpec:
    """Render section header panel."""
    return StagePanelRenderer().render_section(title)


def render_placeholder_panel() -> PanelSpec:
    """Render placeholder panel."""
    return StagePanelRenderer().render_placeholder()
