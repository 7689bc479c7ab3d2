"""Pipeline-state sources."""
from .base import PipelineStateSource, parse_pipeline_state, select_pipeline
from .codepipeline import CodePipelineSource
from .snapshot import SnapshotFileSource

__all__ = [
    "PipelineStateSource",
    "parse_pipeline_state",
    "select_pipeline",
    "CodePipelineSource",
    "SnapshotFileSource",
]
