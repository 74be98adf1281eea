"""Top-level reporttime configuration."""

import json
import math
import os
from contextlib import suppress
from decimal import Decimal
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import (
    DEFAULT_BYPASS_COMMAND,
    DEFAULT_CALIBRATION_LOOPS,
    DEFAULT_PRECISION,
    DEFAULT_THRESHOLD,
    MAX_PRECISION,
    NEVER_VALUES,
)
from ...utils.get_home_dir import get_home_dir
from .ConfigError import ConfigError

# Environment variables honoured by the shell integration, mapped to fields
ENV_OVERRIDES = {
    "REPORTTIME": "threshold",
    "REPORTTIME_SCALE": "precision",
    "REPORTTIME_LOOP": "calibration_loops",
}


def _as_int(v: Any, name: str) -> int:
    """Integer value of a config or environment setting.

    Raises:
        ValueError: If the value is missing or not a number
    """
    try:
        return int(v.strip()) if isinstance(v, str) else int(v)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"{name} must be an integer (found: {v!r})") from None


class ReportTimeConfig(BaseModel):
    """Process-wide timing configuration, read once at startup."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    threshold: float | Literal["never"] = Field(
        DEFAULT_THRESHOLD,
        description="Seconds a command must exceed to be reported; <= 0 reports always, 'never' disables",
    )
    precision: int = Field(DEFAULT_PRECISION, description="Fractional-second digits (0-9)")
    calibration_loops: int = Field(DEFAULT_CALIBRATION_LOOPS, description="Clock samples used for overhead calibration")
    bypass_command: str = Field(DEFAULT_BYPASS_COMMAND, min_length=1, description="Command that shows the last report")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Logging level")

    @field_validator("threshold", mode="before")
    @classmethod
    def _parse_threshold(cls, v: Any) -> float | str:
        if isinstance(v, str):
            text = v.strip().lower()
            if text in NEVER_VALUES:
                return "never"
            if text == "always":
                return 0.0
            try:
                v = float(text)
            except ValueError:
                raise ValueError(f"threshold must be a number, 'always' or 'no' (found: {v!r})") from None
        if isinstance(v, (int, float)) and not math.isfinite(v):
            raise ValueError(f"threshold must be finite (found: {v!r})")
        return v

    @field_validator("precision", mode="before")
    @classmethod
    def _clamp_precision(cls, v: Any) -> int:
        value = _as_int(v, "precision")
        return min(max(value, 0), MAX_PRECISION)

    @field_validator("calibration_loops", mode="before")
    @classmethod
    def _clamp_loops(cls, v: Any) -> int:
        value = _as_int(v, "calibration_loops")
        return max(value, 1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @property
    def never_reports(self) -> bool:
        return self.threshold == "never"

    @property
    def always_reports(self) -> bool:
        return not self.never_reports and float(self.threshold) <= 0

    def should_report(self, elapsed: Decimal) -> bool:
        """Whether a command that ran ``elapsed`` seconds gets a report line.

        Only a strictly greater elapsed time crosses a positive threshold.
        """
        if self.never_reports:
            return False
        if self.always_reports:
            return True
        return elapsed > Decimal(str(self.threshold))

    def threshold_text(self) -> str:
        """Threshold as the shell variable ``REPORTTIME`` spells it."""
        if self.never_reports:
            return "no"
        value = float(self.threshold)
        return str(int(value)) if value.is_integer() else str(value)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on REPORTTIME_HOME or default to ~/.reporttime."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls, environ: dict[str, str] | None = None) -> "ReportTimeConfig":
        """Load configuration: defaults, then config.json, then environment.

        Every input is optional. Empty environment values are ignored, the
        same way ``[[ -n $REPORTTIME ]]`` treats them in the shell.

        Raises:
            ConfigError: If the config file is not valid JSON or a value cannot be parsed
        """
        if environ is None:
            environ = dict(os.environ)

        path = cls.get_config_path()
        raw: dict[str, Any] = {}
        if path.exists():
            try:
                with path.open() as fh:
                    raw = json.load(fh)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
            if not isinstance(raw, dict):
                raise ConfigError(f"Config file {path} must contain a JSON object")

        for env_name, field_name in ENV_OVERRIDES.items():
            value = environ.get(env_name, "")
            if value.strip():
                raw[field_name] = value

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert ReportTimeConfig instance to a dictionary for serialization."""
        return self.model_dump(mode="python")

    def save(self) -> None:
        """Save the configuration to config.json.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise ConfigError(f"Failed to save config: {e}") from e
