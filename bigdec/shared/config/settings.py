from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bigdec.domain.values import RoundingMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    DEFAULT_PRECISION: int = Field(
        default=32,
        ge=0,
        le=10_000,
        description="Fractional digits used by the command line when none are given",
    )

    ROUNDING_MODE: RoundingMode = Field(
        default=RoundingMode.HALF_EVEN,
        description="Rounding mode used by the command line when none is given",
    )

    NEWTON_MAX_ITERATIONS: int = Field(
        default=1000,
        ge=10,
        description="Newton iterations allowed before nth_root falls back to bisection",
    )

    BISECTION_MAX_ITERATIONS: int = Field(
        default=10_000,
        ge=100,
        description="Bisection iterations allowed before giving up with ConvergenceError",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("ROUNDING_MODE", mode="before")
    @classmethod
    def normalize_rounding_mode(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_iteration_budgets(self) -> "Settings":
        if self.BISECTION_MAX_ITERATIONS <= self.NEWTON_MAX_ITERATIONS:
            raise ValueError(
                f"BISECTION_MAX_ITERATIONS ({self.BISECTION_MAX_ITERATIONS}) "
                f"should be greater than NEWTON_MAX_ITERATIONS ({self.NEWTON_MAX_ITERATIONS})"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    from bigdec.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.debug("Settings loaded successfully")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise
