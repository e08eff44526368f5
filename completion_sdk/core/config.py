from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from completion_sdk.core.errors import ConfigurationError

DEFAULT_HOST = "https://api.openai.com/v1"
DEFAULT_REQUEST_TIMEOUT_SEC = 10.0


class APISettings(BaseSettings):
    """Credentials and endpoint configuration shared by every API call.

    Values come from constructor arguments first, then ``OPENAPI_*``
    environment variables, then a local ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENAPI_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    secret_key: str
    organization_id: Optional[str] = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SEC
    host: str = DEFAULT_HOST

    @classmethod
    def new(cls, secret_key: str, organization_id: Optional[str] = None) -> "APISettings":
        return cls(secret_key=secret_key, organization_id=organization_id)

    @classmethod
    def from_env(cls) -> "APISettings":
        """Load settings from OPENAPI_SECRET_KEY / OPENAPI_ORGANIZATION_ID."""
        try:
            return cls()
        except ValidationError as e:
            missing = [
                ".".join(str(part) for part in error["loc"])
                for error in e.errors()
            ]
            raise ConfigurationError(
                f"Could not load API settings from environment "
                f"(invalid or missing: {', '.join(missing)}); "
                f"set OPENAPI_SECRET_KEY",
                original=e,
            ) from e

    def with_organization_id(self, organization_id: str) -> "APISettings":
        return self.model_copy(update={"organization_id": organization_id})

    def with_request_timeout(self, seconds: float) -> "APISettings":
        return self.model_copy(update={"request_timeout": float(seconds)})

    def with_host(self, host: str) -> "APISettings":
        return self.model_copy(update={"host": host})
