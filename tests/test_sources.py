"""Tests for pipeline-state sources."""
import json
import boto3
import pytest
from botocore.stub import Stubber

from src.pipedash.dashboard.models import ExecutionStatus, Stage, StatusCode
from src.pipedash.errors import PipelineFetchError, PipelineNotFoundError
from src.pipedash.sources import (
    CodePipelineSource,
    SnapshotFileSource,
    parse_pipeline_state,
    select_pipeline
)


@pytest.fixture
def client():
    """CodePipeline client with dummy credentials."""
    return boto3.client(
        "codepipeline",
        region_name="us-west-2",
        aws_access_key_id="testing",
        aws_secret_access_key="testing"
    )


@pytest.fixture
def snapshot_file(tmp_path, pipeline_state_payload):
    """Snapshot file holding the sample pipeline state."""
    path = tmp_path / "state.json"
    path.write_text(json.dumps(pipeline_state_payload))
    return path


def test_parse_pipeline_state(pipeline_state_payload, sample_stages):
    """Test the response maps to stages in order."""
    pipeline = parse_pipeline_state(pipeline_state_payload)

    assert pipeline.name == "DavidTestStack-Pipeline"
    assert pipeline.stages == sample_stages
    assert pipeline.stages[0].latest_execution.code == StatusCode.SUCCEEDED
    assert pipeline.stages[2].latest_execution is None


def test_parse_keeps_unnamed_and_unknown_stages():
    """Test unnamed stages and unknown codes survive parsing."""
    pipeline = parse_pipeline_state({
        "pipelineName": "p",
        "stageStates": [
            {"latestExecution": {"pipelineExecutionId": "x", "status": "Stopped"}},
        ]
    })

    assert pipeline.stages == [Stage(None, ExecutionStatus("Stopped", "x"))]
    assert pipeline.stages[0].latest_execution.code == StatusCode.OTHER


@pytest.mark.parametrize("payload", [
    [],
    {"stageStates": []},
    {"pipelineName": "p"},
    {"pipelineName": "p", "stageStates": [{"stageName": "Build", "latestExecution": {}}]},
    {"pipelineName": "p", "stageStates": 5},
    {"pipelineName": "p", "stageStates": ["Build"]},
    {"pipelineName": "p", "stageStates": [{"stageName": "Build", "latestExecution": "Failed"}]},
])
def test_parse_malformed_state_raises(payload):
    """Test malformed documents are fetch errors."""
    with pytest.raises(PipelineFetchError):
        parse_pipeline_state(payload)


def test_select_pipeline_first_match():
    """Test the first name containing the fragment wins."""
    names = ["Other", "DavidTestStack-A", "DavidTestStack-B"]
    assert select_pipeline(names, "DavidTestStack") == "DavidTestStack-A"


def test_select_pipeline_no_match():
    """Test a missing pipeline raises not found."""
    with pytest.raises(PipelineNotFoundError):
        select_pipeline(["Other"], "DavidTestStack")


@pytest.mark.asyncio
async def test_codepipeline_list_pipelines(client):
    """Test listing pipeline names."""
    stubber = Stubber(client)
    stubber.add_response(
        "list_pipelines",
        {"pipelines": [{"name": "Other"}, {"name": "DavidTestStack-Pipeline"}]},
        {}
    )

    with stubber:
        names = await CodePipelineSource(client=client).list_pipelines()

    assert names == ["Other", "DavidTestStack-Pipeline"]
    stubber.assert_no_pending_responses()


@pytest.mark.asyncio
async def test_codepipeline_get_pipeline(client, pipeline_state_payload, sample_stages):
    """Test fetching a pipeline's state."""
    stubber = Stubber(client)
    stubber.add_response(
        "get_pipeline_state",
        pipeline_state_payload,
        {"name": "DavidTestStack-Pipeline"}
    )

    with stubber:
        pipeline = await CodePipelineSource(client=client).get_pipeline("DavidTestStack-Pipeline")

    assert pipeline.name == "DavidTestStack-Pipeline"
    assert pipeline.stages == sample_stages


@pytest.mark.asyncio
async def test_codepipeline_pipeline_not_found(client):
    """Test the service's not-found error is mapped."""
    stubber = Stubber(client)
    stubber.add_client_error(
        "get_pipeline_state",
        service_error_code="PipelineNotFoundException",
        expected_params={"name": "missing"}
    )

    with stubber:
        with pytest.raises(PipelineNotFoundError):
            await CodePipelineSource(client=client).get_pipeline("missing")


@pytest.mark.asyncio
async def test_codepipeline_service_error(client):
    """Test other service errors become fetch errors."""
    stubber = Stubber(client)
    stubber.add_client_error("list_pipelines", service_error_code="ValidationException")

    with stubber:
        with pytest.raises(PipelineFetchError):
            await CodePipelineSource(client=client).list_pipelines()


def test_codepipeline_client_from_profile(tmp_path):
    """Test the client is built from the configured profile and region."""
    credentials = tmp_path / "credentials"
    credentials.write_text("[cdk]\naws_access_key_id = testing\naws_secret_access_key = testing\n")

    source = CodePipelineSource(profile="cdk", region="us-west-2", credentials_file=str(credentials))
    client = source.get_client()

    assert client.meta.region_name == "us-west-2"
    assert source.get_client() is client


def test_codepipeline_unknown_profile(tmp_path):
    """Test a missing profile is a fetch error."""
    credentials = tmp_path / "credentials"
    credentials.write_text("[cdk]\naws_access_key_id = testing\naws_secret_access_key = testing\n")

    source = CodePipelineSource(profile="no-such-profile", region="us-west-2", credentials_file=str(credentials))
    with pytest.raises(PipelineFetchError):
        source.get_client()


@pytest.mark.asyncio
async def test_snapshot_source(snapshot_file, sample_stages):
    """Test reading pipeline state from a snapshot file."""
    source = SnapshotFileSource(snapshot_file)

    assert await source.list_pipelines() == ["DavidTestStack-Pipeline"]
    pipeline = await source.get_pipeline("DavidTestStack-Pipeline")
    assert pipeline.stages == sample_stages


@pytest.mark.asyncio
async def test_snapshot_source_wrong_name(snapshot_file):
    """Test asking a snapshot for another pipeline."""
    with pytest.raises(PipelineNotFoundError):
        await SnapshotFileSource(snapshot_file).get_pipeline("Other")


@pytest.mark.asyncio
async def test_snapshot_source_bad_file(tmp_path):
    """Test unreadable and invalid files are fetch errors."""
    with pytest.raises(PipelineFetchError):
        await SnapshotFileSource(tmp_path / "missing.json").list_pipelines()

    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(PipelineFetchError):
        await SnapshotFileSource(bad).list_pipelines()

    binary = tmp_path / "binary.json"
    binary.write_bytes(b"\xff\xfe")
    with pytest.raises(PipelineFetchError):
        await SnapshotFileSource(binary).list_pipelines()


@pytest.mark.asyncio
async def test_snapshot_source_malformed_stage_entry(tmp_path):
    """Test a snapshot with a non-object stage entry is a fetch error."""
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"pipelineName": "p", "stageStates": ["Build"]}))
    with pytest.raises(PipelineFetchError):
        await SnapshotFileSource(path).get_pipeline("p")
