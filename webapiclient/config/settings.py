"""Settings for the client."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    base_url: str = Field("http://localhost", validation_alias="WEBAPICLIENT_BASE_URL")

    connect_timeout_seconds: float = Field(5.0, validation_alias="WEBAPICLIENT_CONNECT_TIMEOUT_SECONDS")
    read_timeout_seconds: float = Field(15.0, validation_alias="WEBAPICLIENT_READ_TIMEOUT_SECONDS")
    # Overall deadline for the transport call of each request; None leaves only the httpx timeouts.
    request_timeout_seconds: float | None = Field(None, validation_alias="WEBAPICLIENT_REQUEST_TIMEOUT_SECONDS")

    follow_redirects: bool = Field(True, validation_alias="WEBAPICLIENT_FOLLOW_REDIRECTS")
    user_agent: str = Field("", validation_alias="WEBAPICLIENT_USER_AGENT")
