"""Startup configuration injected into the bridge application."""

from pydantic import BaseModel, ConfigDict, field_validator


class BridgeConfig(BaseModel):
    """Deploy-time values for one institution's bridge"""

    model_config = ConfigDict(frozen=True)

    institution_name: str = "Grambling State University"
    upstream_api_host: str = "grambling.instructure.com"
    passthrough_enabled: bool = True

    @field_validator("upstream_api_host")
    @classmethod
    def _strip_scheme(cls, value: str) -> str:
        # Accept "https://host/" as well as a bare host name
        for prefix in ("https://", "http://"):
            if value.startswith(prefix):
                value = value[len(prefix):]
        return value.rstrip("/")

    @property
    def upstream_base_url(self) -> str:
        return f"https://{self.upstream_api_host}"

    @classmethod
    def from_settings(cls) -> "BridgeConfig":
        """Build a config from the values resolved in settings.py"""
        import settings

        return cls(
            institution_name=settings.INSTITUTION_NAME,
            upstream_api_host=settings.UPSTREAM_API_HOST,
            passthrough_enabled=settings.PASSTHROUGH_ENABLED,
        )
