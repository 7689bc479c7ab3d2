"""Pytest configuration and fixtures."""
import pytest

from src.pipedash.dashboard.models import ExecutionStatus, Pipeline, Stage


@pytest.fixture
def sample_stages():
    """Build/Test/Deploy stages: succeeded, failed, never run."""
    return [
        Stage("Build", ExecutionStatus("Succeeded", "exec-1")),
        Stage("Test", ExecutionStatus("Failed", "exec-1")),
        Stage("Deploy", None),
    ]


@pytest.fixture
def sample_pipeline(sample_stages):
    """Pipeline holding the sample stages."""
    return Pipeline(name="DavidTestStack-Pipeline", stages=sample_stages)


@pytest.fixture
def pipeline_state_payload():
    """GetPipelineState-shaped response for the sample pipeline."""
    return {
        "pipelineName": "DavidTestStack-Pipeline",
        "pipelineVersion": 3,
        "stageStates": [
            {
                "stageName": "Build",
                "latestExecution": {"pipelineExecutionId": "exec-1", "status": "Succeeded"}
            },
            {
                "stageName": "Test",
                "latestExecution": {"pipelineExecutionId": "exec-1", "status": "Failed"}
            },
            {
                "stageName": "Deploy"
            },
        ]
    }
