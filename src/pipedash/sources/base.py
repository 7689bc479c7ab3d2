# src/pipedash/sources/base.py
"""Pipeline-state source interface and response parsing."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from src.pipedash.dashboard.models import ExecutionStatus, Pipeline, Stage
from src.pipedash.errors import PipelineFetchError, PipelineNotFoundError


class PipelineStateSource(ABC):
    """Fetches pipeline names and pipeline state snapshots."""

    @abstractmethod
    async def list_pipelines(self) -> List[str]:
        """Names of all pipelines visible to this source."""

    @abstractmethod
    async def get_pipeline(self, name: str) -> Pipeline:
        """Stages and latest executions of one pipeline."""


def parse_pipeline_state(payload: Dict[str, Any]) -> Pipeline:
    """
    Build a Pipeline from a GetPipelineState-shaped document.

    Args:
        payload: Dict with "pipelineName" and "stageStates"

    Returns:
        Pipeline with stages in document order

    Raises:
        PipelineFetchError: If required fields are missing
    """
    if not isinstance(payload, dict):
        raise PipelineFetchError(f"Expected a JSON object, got {type(payload).__name__}")

    name = payload.get("pipelineName")
    states = payload.get("stageStates")
    if not name:
        raise PipelineFetchError("Pipeline state has no pipelineName")
    if states is None:
        raise PipelineFetchError(f"Pipeline {name} has no stageStates")
    if not isinstance(states, list):
        raise PipelineFetchError(f"Pipeline {name} stageStates is not a list")

    stages = []
    for state in states:
        if not isinstance(state, dict):
            raise PipelineFetchError(f"Pipeline {name} has a malformed stage entry: {state!r}")
        execution = state.get("latestExecution")
        latest = None
        if execution is not None:
            if not isinstance(execution, dict):
                raise PipelineFetchError(f"Stage {state.get('stageName')} has a malformed latestExecution")
            if "status" not in execution:
                raise PipelineFetchError(f"Stage {state.get('stageName')} execution has no status")
            latest = ExecutionStatus(
                status=execution["status"],
                pipeline_execution_id=execution.get("pipelineExecutionId")
            )
        stages.append(Stage(name=state.get("stageName"), latest_execution=latest))

    return Pipeline(name=name, stages=stages)


def select_pipeline(names: Iterable[str], fragment: str) -> str:
    """
    Pick the first pipeline whose name contains fragment.

    Raises:
        PipelineNotFoundError: If no name matches
    """
    for name in names:
        if fragment in name:
            return name
    raise PipelineNotFoundError(f"Couldn't find a pipeline matching '{fragment}'")
