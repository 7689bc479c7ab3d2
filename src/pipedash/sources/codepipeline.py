# src/pipedash/sources/codepipeline.py
"""Pipeline state from AWS CodePipeline using boto3."""
import asyncio
import logging
from typing import Any, List, Optional

import boto3
import botocore.session
from botocore.exceptions import BotoCoreError, ClientError

from src.pipedash.config import config
from src.pipedash.dashboard.models import Pipeline
from src.pipedash.errors import PipelineFetchError, PipelineNotFoundError
from .base import PipelineStateSource, parse_pipeline_state

logger = logging.getLogger(__name__)


class CodePipelineSource(PipelineStateSource):
    """Fetches pipeline state from the CodePipeline API."""

    def __init__(
        self,
        client: Optional[Any] = None,
        profile: Optional[str] = None,
        region: Optional[str] = None,
        credentials_file: Optional[str] = None
    ):
        """
        Initialize source.

        Args:
            client: Existing boto3 codepipeline client (created lazily otherwise)
            profile: Credentials profile name
            region: AWS region
            credentials_file: Shared credentials file path
        """
        self._client = client
        self.profile = profile or config.AWS_PROFILE
        self.region = region or config.AWS_REGION
        self.credentials_file = credentials_file or config.AWS_CREDENTIALS_FILE

    def get_client(self):
        """Get or create the CodePipeline client."""
        if self._client is None:
            core_session = botocore.session.Session()
            core_session.set_config_variable("credentials_file", self.credentials_file)
            try:
                session = boto3.Session(
                    botocore_session=core_session,
                    profile_name=self.profile,
                    region_name=self.region
                )
                self._client = session.client("codepipeline")
            except BotoCoreError as e:
                raise PipelineFetchError(f"Cannot create CodePipeline client: {e}") from e
        return self._client

    def _list_pipelines(self) -> List[str]:
        paginator = self.get_client().get_paginator("list_pipelines")
        names = []
        for page in paginator.paginate():
            names.extend(p["name"] for p in page.get("pipelines", []) if p.get("name"))
        return names

    async def list_pipelines(self) -> List[str]:
        logger.info("Getting pipelines list...")
        try:
            names = await asyncio.to_thread(self._list_pipelines)
        except (BotoCoreError, ClientError) as e:
            raise PipelineFetchError(f"Listing pipelines failed: {e}") from e
        logger.info("Successfully listed pipelines.")
        return names

    async def get_pipeline(self, name: str) -> Pipeline:
        logger.info(f"Getting info for pipeline {name}...")
        try:
            response = await asyncio.to_thread(self.get_client().get_pipeline_state, name=name)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "PipelineNotFoundException":
                raise PipelineNotFoundError(f"Pipeline {name} not found") from e
            raise PipelineFetchError(f"Getting pipeline {name} failed: {e}") from e
        except BotoCoreError as e:
            raise PipelineFetchError(f"Getting pipeline {name} failed: {e}") from e
        logger.info(f"Successfully got info for pipeline {name}.")
        return parse_pipeline_state(response)
