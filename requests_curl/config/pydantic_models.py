"""
Pydantic-based settings model for requests-curl.

Validates settings read from a JSON file or from environment variables before
they are turned into a Configuration.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CurlSettingsModel(BaseModel):
    """Settings for cURL logging."""

    model_config = ConfigDict(extra='forbid')

    environment: Optional[str] = Field(
        default=None,
        description="Deployment environment tag; development and test enable logging"
    )
    curl_logging_enabled: Optional[bool] = Field(
        default=None,
        description="Explicit switch, overrides the environment-derived default"
    )
    log_folder: Optional[str] = Field(
        default=None,
        description="Directory for the curl log file"
    )
    debug: bool = Field(default=False)
