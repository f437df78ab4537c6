"""
Handler configuration loaded from the Lambda environment.

Values are injected by the CDK compute stack at deploy time. The settings
object is built once per process and passed explicitly into each handler's
work function.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class HandlerSettings(BaseSettings):
    """Deployment-specific parameters for the API handlers."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    table_name: Optional[str] = None
    cast_table_name: Optional[str] = None
    region: str = Field(
        default="us-east-1",
        validation_alias=AliasChoices("REGION", "AWS_REGION"),
    )
    user_pool_id: Optional[str] = None
    client_id: Optional[str] = None

    def require_table(self) -> str:
        """Return TABLE_NAME or raise if the function was deployed without it."""
        if not self.table_name:
            raise ValueError("TABLE_NAME environment variable not set")
        return self.table_name

    def require_client_id(self) -> str:
        """Return CLIENT_ID or raise if the function was deployed without it."""
        if not self.client_id:
            raise ValueError("CLIENT_ID environment variable not set")
        return self.client_id


@lru_cache(maxsize=1)
def get_settings() -> HandlerSettings:
    """
    Get the process-wide settings (cached).

    Returns:
        HandlerSettings singleton instance
    """
    settings = HandlerSettings()
    logger.info(
        f"Loaded settings: table={settings.table_name}, "
        f"cast_table={settings.cast_table_name}, region={settings.region}"
    )
    return settings
