# src/pipedash/sources/snapshot.py
"""Pipeline state read from a saved JSON snapshot."""
import json
import logging
from pathlib import Path
from typing import List, Union

from src.pipedash.dashboard.models import Pipeline
from src.pipedash.errors import PipelineFetchError, PipelineNotFoundError
from .base import PipelineStateSource, parse_pipeline_state

logger = logging.getLogger(__name__)


class SnapshotFileSource(PipelineStateSource):
    """
    Source backed by a file holding one GetPipelineState response.

    Useful offline, e.g. with the output of
    ``aws codepipeline get-pipeline-state --name <pipeline>``.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._pipeline = None

    def _load(self) -> Pipeline:
        if self._pipeline is None:
            logger.info(f"Reading pipeline snapshot {self.path}...")
            try:
                payload = json.loads(self.path.read_text(encoding="utf-8"))
            except OSError as e:
                raise PipelineFetchError(f"Cannot read snapshot {self.path}: {e}") from e
            except UnicodeDecodeError as e:
                raise PipelineFetchError(f"Snapshot {self.path} is not UTF-8 text: {e}") from e
            except json.JSONDecodeError as e:
                raise PipelineFetchError(f"Snapshot {self.path} is not valid JSON: {e}") from e
            self._pipeline = parse_pipeline_state(payload)
        return self._pipeline

    async def list_pipelines(self) -> List[str]:
        return [self._load().name]

    async def get_pipeline(self, name: str) -> Pipeline:
        pipeline = self._load()
        if pipeline.name != name:
            raise PipelineNotFoundError(f"Snapshot {self.path} holds {pipeline.name}, not {name}")
        return pipeline
