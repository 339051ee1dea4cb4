"""Configuration for the RemoteData demo CLI.

The RemoteData type itself reads no configuration; these settings only shape
the simulated request the demo walks through.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class DemoConfig(BaseSettings):
    """Simulated request settings.

    All settings can be overridden via environment variables with the
    REMOTE_DATA_ prefix. Example: REMOTE_DATA_SHOULD_FAIL=true
    """

    model_config = {"env_prefix": "REMOTE_DATA_"}

    latency_seconds: float = Field(
        default=0.0, ge=0.0, description="Time spent Loading before settling"
    )
    should_fail: bool = Field(default=False, description="Settle as Failure instead of Success")
    success_value: str = Field(default="payload", description="Value of the simulated Success")
    failure_message: str = Field(
        default="request failed", description="Error of the simulated Failure"
    )
    fallback: str = Field(default="<no data>", description="Default used when there is no value")

    @classmethod
    def with_overrides(cls, **kwargs: object) -> DemoConfig:
        """Create a config with specific overrides."""
        return cls(**kwargs)  # type: ignore[arg-type]
