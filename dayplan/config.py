"""Configuration for the day planner."""

import os
from datetime import date
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from dayplan.constants import (
    DAY_FILE_DATE_FORMAT,
    DEFAULT_CATEGORIES_FILENAME,
    DEFAULT_HOME_DIR,
    DEFAULT_LOG_FILENAME,
    DEFAULT_SNAP_RESOLUTION,
)


class DayplanConfig(BaseModel):
    """Day planner configuration with Pydantic validation."""

    # Storage paths
    home_dir: Path = Field(default_factory=lambda: Path(DEFAULT_HOME_DIR).expanduser())
    log_dir: Path | None = None

    # File naming
    categories_filename: str = Field(default=DEFAULT_CATEGORIES_FILENAME)
    log_filename: str = Field(default=DEFAULT_LOG_FILENAME)

    # Editing defaults
    snap_resolution: int = Field(default=DEFAULT_SNAP_RESOLUTION, ge=1, le=60)

    @field_validator("snap_resolution")
    @classmethod
    def validate_snap_resolution(cls, v: int) -> int:
        """Resolution must split an hour into equal grid steps."""
        if 60 % v != 0:
            raise ValueError(f"snap resolution {v} does not divide an hour evenly")
        return v

    @property
    def days_dir(self) -> Path:
        """Directory holding one file per date."""
        return self.home_dir / "days"

    @property
    def categories_path(self) -> Path:
        """Path of the category registry file."""
        return self.home_dir / self.categories_filename

    @property
    def effective_log_dir(self) -> Path:
        """Log directory, defaulting to a logs folder under the home dir."""
        if self.log_dir is not None:
            return self.log_dir
        return self.home_dir / "logs"

    def day_path(self, day_date: date) -> Path:
        """Path of the file for a given date."""
        return self.days_dir / day_date.strftime(DAY_FILE_DATE_FORMAT)

    @classmethod
    def from_env(cls) -> "DayplanConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Storage paths
        if os.environ.get("DAYPLAN_HOME"):
            config_dict["home_dir"] = Path(
                os.environ["DAYPLAN_HOME"].rstrip("/")
            ).expanduser()
        if os.environ.get("DAYPLAN_LOG_DIR"):
            config_dict["log_dir"] = Path(os.environ["DAYPLAN_LOG_DIR"])

        # File naming
        if "DAYPLAN_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["DAYPLAN_LOG_FILENAME"]
        if "DAYPLAN_CATEGORIES_FILE" in os.environ:
            config_dict["categories_filename"] = os.environ["DAYPLAN_CATEGORIES_FILE"]

        # Editing defaults
        if "DAYPLAN_SNAP_RESOLUTION" in os.environ:
            try:
                resolution = int(os.environ["DAYPLAN_SNAP_RESOLUTION"])
            except ValueError:
                resolution = None  # Keep default if invalid
            if resolution is not None and 1 <= resolution <= 60 and 60 % resolution == 0:
                config_dict["snap_resolution"] = resolution

        return cls(**config_dict)
