# src/pipedash/dashboard/styles.py
"""Dashboard styling constants and helpers."""
from typing import Dict, Optional

from rich import box

from .models import ExecutionStatus, StatusCode

# Terminal colors
COLORS: Dict[str, str] = {
    "light_blue": "bright_blue",
    "red": "red",
    "green": "green",
    "light_yellow": "bright_yellow",
    "accent": "rgb(255,178,102)",
}

# Border color per known status code
STATUS_BORDERS: Dict[StatusCode, str] = {
    StatusCode.IN_PROGRESS: COLORS["light_blue"],
    StatusCode.FAILED: COLORS["red"],
    StatusCode.SUCCEEDED: COLORS["green"],
    StatusCode.OTHER: COLORS["light_yellow"],
}

# A stage with no recorded execution is shown like a failure
NO_EXECUTION_BORDER = COLORS["red"]

SECTION_BORDER = COLORS["accent"]

TITLE_STYLE = "bold"

# rich box used for thick borders
THICK_BOX = box.HEAVY


def get_status_color(status: Optional[ExecutionStatus]) -> str:
    """Get border color for a stage's latest execution."""
    if status is None:
        return NO_EXECUTION_BORDER
    return STATUS_BORDERS[status.code]
