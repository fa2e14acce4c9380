from pydantic import BaseModel, field_validator
from typing import Optional, Literal
from enum import IntEnum
from dataclasses import dataclass


class LogLevel(IntEnum):
    """Front-end log levels, ordered by importance."""
    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    NONE = 6


class Severity(IntEnum):
    """Engine severities."""
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


@dataclass(frozen=True)
class EventId:
    """Front-end event identifier. Accepted by the bridge, never emitted."""
    id: int = 0
    name: Optional[str] = None

    def __str__(self) -> str:
        return self.name or str(self.id)


class BridgeSettings(BaseModel):
    """Validated bridge configuration."""
    root_logger_name: str = "log_bridge"
    min_level: Severity = Severity.DEBUG
    scope_mode: Literal["context", "shared"] = "context"
    json_output: bool = True

    @field_validator("min_level", mode="before")
    @classmethod
    def parse_min_level(cls, value):
        # YAML and env vars carry severity names
        if isinstance(value, str):
            try:
                return Severity[value.strip().upper()]
            except KeyError:
                raise ValueError(f"unknown severity name: {value!r}")
        return value
