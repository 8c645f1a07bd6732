"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings

from .core.pathfinding import CostPolicy


class Settings(BaseSettings):
    """Application settings pulled from ``PATHGRID_*`` environment variables."""

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Generation
    default_distance: int = Field(default=12, ge=0, description="Default start/end Manhattan distance")
    default_border: int = Field(default=1, ge=0, description="Default margin around the endpoints")
    default_hug_edge: bool = Field(default=False, description="Drop the margin on the longer axis")
    max_distance: int = Field(default=200, ge=0, description="Maximum distance accepted by the API")
    max_border: int = Field(default=20, ge=0, description="Maximum border accepted by the API")
    cost_policy: CostPolicy = Field(default=CostPolicy.RAW, description="How negative costs are searched")

    class Config:
        env_file = ".env"
        env_prefix = "PATHGRID_"
        extra = "ignore"


settings = Settings()
