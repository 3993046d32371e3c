from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Output for write_to_file
    output_directory: str = "."
    timestamp_format: str = "%Y%m%d_%H%M%S"  # yyyyMMdd_HHmmss

    # Polling
    count_poll_sleep_ms: int = 1  # 0 = pure busy-poll
    default_wait_duration_ms: int = 10000
    default_wait_interval_ms: int = 500

    # Validation
    raise_on_validation_failure: bool = True

    # Logging konfiguration
    log_level: str = "INFO"
    log_file_path: str = "logs/filesteps.log"
    log_retention_days: int = 30

    model_config = SettingsConfigDict(
        env_prefix="FILESTEPS_", env_file="settings.env", extra="ignore"
    )

    @property
    def log_directory(self) -> Path:
        """Returns the log directory as a Path object"""
        return Path(self.log_file_path).parent

    @property
    def count_poll_sleep_seconds(self) -> float:
        return self.count_poll_sleep_ms / 1000.0
