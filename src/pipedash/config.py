"""Configuration management."""
import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Config:
    # AWS access
    AWS_PROFILE: str = os.getenv("PIPEDASH_AWS_PROFILE", "cdk")
    AWS_REGION: str = os.getenv("PIPEDASH_AWS_REGION", "us-west-2")
    AWS_CREDENTIALS_FILE: str = os.getenv(
        "PIPEDASH_AWS_CREDENTIALS_FILE",
        os.path.join(os.path.expanduser("~"), ".aws", "credentials")
    )

    # Pipeline selection
    PIPELINE_NAME: str = os.getenv("PIPEDASH_PIPELINE_NAME", "")
    PIPELINE_MATCH: str = os.getenv("PIPEDASH_PIPELINE_MATCH", "DavidTestStack")

    # Logging
    LOG_LEVEL: str = os.getenv("PIPEDASH_LOG_LEVEL", "INFO")

    def validate(self, require_selection: bool = True):
        """
        Validate configuration.

        Args:
            require_selection: Whether a pipeline name or match fragment must be set.
                Reading a snapshot file needs neither.
        """
        if not isinstance(logging.getLevelName(self.LOG_LEVEL.upper()), int):
            raise ValueError(f"Unknown log level: {self.LOG_LEVEL}")
        if require_selection and not self.PIPELINE_NAME and not self.PIPELINE_MATCH:
            raise ValueError("Neither PIPEDASH_PIPELINE_NAME nor PIPEDASH_PIPELINE_MATCH is set")

config = Config()
