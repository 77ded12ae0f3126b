"""
config.py
=========
Runtime settings for selectorkit, read from the environment.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Logging and telemetry settings.

    Attributes:
        log_level: Logging level name ('DEBUG', 'INFO', ... or 'ALL')
        logfire_token: Logfire write token; events stay local when unset
        service_name: Service name reported to logfire

    """

    log_level: str = Field(default='INFO', description='Logging level name')
    logfire_token: str | None = Field(default=None, description='Logfire write token')
    service_name: str = Field(default='selectorkit', description='Service name for logfire')

    @classmethod
    def from_env(cls) -> 'Settings':
        """Build settings from environment variables, loading .env first."""
        load_dotenv()

        return cls(
            log_level=os.getenv('SELECTORKIT_LOG_LEVEL', 'INFO'),
            logfire_token=os.getenv('LOGFIRE_TOKEN') or None,
            service_name=os.getenv('SELECTORKIT_SERVICE_NAME', 'selectorkit'),
        )
