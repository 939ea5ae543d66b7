import json
import os
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, Field, ValidationInfo, field_validator

CONFIG_ENV_VAR = "FIRECALC_CONFIG"


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be loaded or parsed."""


class AppConfig(BaseModel):
    """Deployment settings for the API and the engine defaults it passes down."""

    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call /api/*.",
    )
    log_level: str = Field("INFO", description="Minimum loguru level for the stderr sink.")
    scenario_min_rate: float = Field(
        0.01, ge=0.0, le=1.0, description="Floor for the conservative scenario return rate."
    )
    scenario_max_rate: float = Field(
        0.20, ge=0.0, le=1.0, description="Ceiling for the optimistic scenario return rate."
    )
    fire_horizon_years: int = Field(
        50, ge=1, le=100, description="Longest time-to-FIRE search before giving up."
    )

    @field_validator("scenario_max_rate")
    @classmethod
    def check_scenario_bounds(cls, v: float, info: ValidationInfo) -> float:
        min_rate = info.data.get("scenario_min_rate")
        if min_rate is not None and v <= min_rate:
            raise ValueError("scenario_max_rate must be greater than scenario_min_rate")
        return v

    @field_validator("log_level")
    @classmethod
    def normalise_level(cls, v: str) -> str:
        return v.upper()


def load_config_from_json(file_path: str) -> dict:
    """Loads and returns the configuration dictionary from a JSON file."""
    if not os.path.exists(file_path):
        raise ConfigurationError(f"Configuration file not found at: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Error parsing JSON file '{file_path}': {e}") from e


def load_config(file_path: Optional[str] = None) -> AppConfig:
    """Build the app config from `file_path`, $FIRECALC_CONFIG, or defaults."""
    path = file_path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return AppConfig()

    logger.info(f"Loading configuration from: {path}")
    return AppConfig.model_validate(load_config_from_json(path))
