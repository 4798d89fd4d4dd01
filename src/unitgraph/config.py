"""
Configuration management for the unitgraph server
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "UNITGRAPH_"
        case_sensitive = False


# Global settings instance
settings = Settings()
