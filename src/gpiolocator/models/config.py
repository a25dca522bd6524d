"""Application configuration model."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator

from gpiolocator.exceptions import ConfigFileInvalidError, wrap_pydantic_error

from .line import LINES_PER_ROW

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".gpiolocator" / "config.json"


def normalize_line_count(count: int) -> int:
    """
    Round a requested line count up to the next multiple of 8.

    1 -> 8, 10 -> 16, 256 -> 256, 257 -> 264.

    Raises:
        ValueError: If count is less than 1
    """
    if count < 1:
        raise ValueError(f"line count must be at least 1, got {count}")
    return -(-count // LINES_PER_ROW) * LINES_PER_ROW


class AppConfig(BaseModel):
    """Application configuration and settings."""

    line_count: int = Field(
        default=256,
        description="Number of GPIO lines to watch (rounded up to a multiple of 8)",
    )
    poll_interval: float = Field(
        default=0.25, gt=0, description="Seconds between two samples of all lines"
    )
    frames_per_second: float = Field(
        default=60.0, gt=0, le=240, description="Dashboard redraw rate"
    )
    gpio_root: Path = Field(
        default=Path("/sys/class/gpio"),
        description="Sysfs GPIO directory containing the export file",
    )
    lock_timeout: float = Field(
        default=1.0,
        gt=0,
        description="Seconds to wait for the line bank lock before skipping an operation",
    )

    @field_validator("line_count")
    @classmethod
    def round_line_count(cls, v: int) -> int:
        """Round up to a whole number of grid rows."""
        return normalize_line_count(v)

    @field_serializer("gpio_root")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @property
    def frame_interval(self) -> float:
        """Seconds between two redraws."""
        return 1.0 / self.frames_per_second

    def with_overrides(self, **overrides) -> "AppConfig":
        """
        Return a validated copy with command-line overrides applied.

        None values are ignored so unset CLI options keep the loaded value.

        Raises:
            ConfigValidationError: If an override is invalid
        """
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return AppConfig.model_validate(values)
        except ValidationError as e:
            raise wrap_pydantic_error(e, None) from e

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        The file is only read, never written.

        Args:
            path: Path to config file. If None, uses ~/.gpiolocator/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        if not path.exists():
            logger.debug(f"No config file at {path}, using defaults")
            return cls()

        json_content = path.read_text()
        if not json_content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            config = cls.model_validate_json(json_content)
        except ValidationError as e:
            raise wrap_pydantic_error(e, str(path)) from e

        logger.info(f"Loaded configuration from {path}")
        return config
