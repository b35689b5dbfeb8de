"""Client configuration via HASTE_-prefixed environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """Settings for the document client.

    Environment Variables:
        HASTE_APP_NAME: Name used in document titles
        HASTE_BASE_URL: Server the storage client talks to
        HASTE_ENABLE_SHARING: Allow the share command
        HASTE_SHARE_URL_TEMPLATE: Share URL with a {url} placeholder
        HASTE_REQUEST_TIMEOUT: HTTP timeout in seconds
    """

    model_config = SettingsConfigDict(
        env_prefix="HASTE_",
        case_sensitive=True,
        extra="ignore",
    )

    APP_NAME: str = "Haste"
    BASE_URL: str = "http://localhost:8000"
    ENABLE_SHARING: bool = True
    SHARE_URL_TEMPLATE: str = "https://twitter.com/share?url={url}"
    REQUEST_TIMEOUT: float = 10.0
