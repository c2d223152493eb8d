"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (FEATUREGATE__SECTION__KEY)
3. Global YAML (~/.config/featuregate/config.yaml)
4. Built-in defaults (this file)

Examples:
    FEATUREGATE__LOGGING__LEVEL=DEBUG
    FEATUREGATE__SUPPLY__SCRATCH_DIR=/var/tmp/featuregate
"""

import tempfile
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        FEATUREGATE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG also shows the text of every submission.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SupplyConfig(BaseModel):
    """Interactive feature supply configuration.

    Env vars:
        FEATUREGATE__SUPPLY__SCRATCH_DIR: Where submissions are published
        FEATUREGATE__SUPPLY__SUBMIT_COMMAND: Terminal line that submits the buffer
        FEATUREGATE__SUPPLY__QUIT_COMMAND: Terminal line that ends the session
    """

    scratch_dir: str | None = Field(
        default=None,
        description="Directory receiving one .feature file per submission. "
        "Default: the system temporary directory.",
    )
    encoding: str = Field(default="utf-8", description="Encoding of published files.")
    feature_keyword: str = Field(default="Feature:")
    scenario_keyword: str = Field(default="Scenario:")
    synthetic_feature_name: str = Field(default="Feature")
    synthetic_scenario_name: str = Field(default="Scenario")
    submit_command: str = Field(default="go")
    quit_command: str = Field(default="quit")

    @field_validator("feature_keyword", "scenario_keyword")
    @classmethod
    def validate_keyword(cls, v: str) -> str:
        if not v.endswith(":"):
            raise ValueError(f"Keyword marker must end with ':', got {v!r}")
        return v

    @field_validator("submit_command", "quit_command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Command must not be blank")
        return v

    def resolved_scratch_dir(self) -> Path:
        return Path(self.scratch_dir or tempfile.gettempdir()).expanduser()


class FeatureGateConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    supply: SupplyConfig = Field(default_factory=SupplyConfig)
