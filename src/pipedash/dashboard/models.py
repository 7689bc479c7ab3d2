# src/pipedash/dashboard/models.py
"""Pipeline state records consumed by the dashboard."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class StatusCode(Enum):
    """Latest execution status of a pipeline stage."""
    IN_PROGRESS = "InProgress"
    FAILED = "Failed"
    SUCCEEDED = "Succeeded"
    OTHER = "Other"  # any code not listed above

    @classmethod
    def from_raw(cls, raw: str) -> "StatusCode":
        """Map a status string to a code, unknown strings become OTHER."""
        for code in (cls.IN_PROGRESS, cls.FAILED, cls.SUCCEEDED):
            if code.value == raw:
                return code
        return cls.OTHER


@dataclass(frozen=True)
class ExecutionStatus:
    """Latest execution of a stage as reported by the pipeline service."""
    status: str
    pipeline_execution_id: Optional[str] = None

    @property
    def code(self) -> StatusCode:
        return StatusCode.from_raw(self.status)


@dataclass(frozen=True)
class Stage:
    """A pipeline stage and its latest execution, if any."""
    name: Optional[str]
    latest_execution: Optional[ExecutionStatus] = None


@dataclass
class Pipeline:
    """Snapshot of a pipeline's stages in reported order."""
    name: str
    stages: List[Stage] = field(default_factory=list)
