"""Runtime configuration for the API.

Uses Pydantic BaseSettings to read environment variables with the
`CHATUIX_API_` prefix.

Example:
    export CHATUIX_API_CORS_ALLOW_ALL=false
    export CHATUIX_API_GREETING=false
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings read from environment variables.

    Attributes:
        cors_allow_all (bool): Whether to allow all CORS origins. Useful in dev.
        greeting (bool): Seed new sessions with the assistant greeting.
    """

    model_config = SettingsConfigDict(env_prefix="CHATUIX_API_")

    cors_allow_all: bool = True
    greeting: bool = True


settings = Settings()
