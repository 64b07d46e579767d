from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_database_url() -> str:
    """Get database URL, using an absolute path for the local SQLite file."""
    db_path = Path(__file__).parent.parent.parent / "liftbook.db"
    return f"sqlite:///{db_path.resolve()}"


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LIFTBOOK_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="LIFTBOOK_LOG_FILE",
        description="Path of a rotating log file; console only when unset",
    )
    log_rotation: str = Field(default="10 MB", validation_alias="LIFTBOOK_LOG_ROTATION")
    log_retention: str = Field(default="7 days", validation_alias="LIFTBOOK_LOG_RETENTION")
    database_url: str = Field(
        default_factory=get_database_url,
        validation_alias="LIFTBOOK_DATABASE_URL",
    )
    previous_lookup_window: int = Field(
        default=50,
        validation_alias="LIFTBOOK_PREVIOUS_LOOKUP_WINDOW",
        description="Number of most recent finished workouts scanned for previous performance",
    )
    session_tick_seconds: float = Field(
        default=1.0,
        validation_alias="LIFTBOOK_SESSION_TICK_SECONDS",
        description="Interval between session clock samples",
    )
    default_new_exercise_reps: int = Field(
        default=10,
        validation_alias="LIFTBOOK_DEFAULT_NEW_EXERCISE_REPS",
        description="Target reps for the first set of an exercise added mid-session without history",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("previous_lookup_window")
    @classmethod
    def validate_lookup_window(cls, value: int) -> int:
        if value < 1:
            logger.warning(f"LIFTBOOK_PREVIOUS_LOOKUP_WINDOW must be positive, got {value}. Defaulting to 50.")
            return 50
        return value

    @field_validator("session_tick_seconds")
    @classmethod
    def validate_tick(cls, value: float) -> float:
        if value <= 0:
            logger.warning(f"LIFTBOOK_SESSION_TICK_SECONDS must be positive, got {value}. Defaulting to 1.0.")
            return 1.0
        return value


settings = Settings()
