"""
Configuration management for the dogql service
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream Dog CEO API
    dog_api_base_url: str = "https://dog.ceo/api"
    upstream_timeout: float | None = None  # seconds; None disables the timeout

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    graphiql: bool = True

    # Environment
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "DOGQL_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_public_url(host: str | None = None, port: int | None = None) -> str:
    """Build the URL the GraphQL endpoint is reachable at."""
    host = host or settings.api_host
    port = port or settings.api_port
    # 0.0.0.0 is a bind address, not something a client can open
    if host in ("0.0.0.0", "::"):
        host = "localhost"
    elif ":" in host:
        host = f"[{host}]"
    return f"http://{host}:{port}/graphql"
