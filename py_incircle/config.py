"""Configuration management."""

import os
from pathlib import Path

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env for local/dev environments only for values missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    for k, v in file_env.items():
        if k not in os.environ and v is not None:
            os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from INCIRCLE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="INCIRCLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Star polygon defaults
    default_n: int = Field(default=8, ge=3, description="Default star polygon vertex count")
    default_m: int = Field(default=3, ge=1, description="Default star polygon step")

    # Point generation area
    canvas_width: float = Field(default=800.0, gt=0, description="Width of the generation area")
    canvas_height: float = Field(default=600.0, gt=0, description="Height of the generation area")

    # Geometry tuning
    voronoi_padding: float = Field(default=10.0, ge=0, description="Padding around sites for cell clipping")
    pole_tolerance: float = Field(default=1.0, gt=0, description="Precision of the pole of inaccessibility search")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    max_points: int = Field(default=10000, gt=0, description="Largest point cloud accepted by the API")


settings = Settings()
