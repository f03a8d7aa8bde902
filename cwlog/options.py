import os
from datetime import datetime
from typing import Any, Callable, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .stream import DEFAULT_STREAM_TEMPLATE, check_template

DEFAULT_RETENTION_DAYS = 30

LogGroupClass = Literal["STANDARD", "INFREQUENT_ACCESS", "DELIVERY"]


def local_now() -> datetime:
    return datetime.now().astimezone()


class Options(BaseModel):
    """Settings for a CloudWatchLog handle.

    Only ``log_group`` is required. ``log_stream`` defaults to the group name
    and is substituted into ``log_stream_template`` as ``{stream}`` together
    with ``{group}``, ``{YYYY}``, ``{MM}``, ``{DD}`` and ``{HH}``.

    ``client`` and ``now`` exist for tests: when ``client`` is missing a
    ``boto3`` logs client is built from ``region_name``/``max_attempts``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    log_group: str
    log_group_class: Optional[LogGroupClass] = None
    log_stream: Optional[str] = None
    log_stream_template: str = DEFAULT_STREAM_TEMPLATE
    retention_in_days: int = DEFAULT_RETENTION_DAYS
    region_name: Optional[str] = None
    max_attempts: Optional[int] = None
    client: Any = None
    now: Callable[[], datetime] = local_now

    @field_validator("log_group")
    @classmethod
    def _group_required(cls, v: str) -> str:
        if not v:
            raise ValueError("log_group is required")
        return v

    @field_validator("log_stream_template", mode="before")
    @classmethod
    def _template(cls, v):
        return check_template(v or DEFAULT_STREAM_TEMPLATE)

    @field_validator("retention_in_days")
    @classmethod
    def _retention(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"retention_in_days must not be negative: {v}")
        return v or DEFAULT_RETENTION_DAYS

    @field_validator("max_attempts")
    @classmethod
    def _attempts(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError(f"max_attempts must be at least 1: {v}")
        return v

    @model_validator(mode="after")
    def _stream_defaults_to_group(self):
        if not self.log_stream:
            self.log_stream = self.log_group
        return self

    @classmethod
    def from_env(cls, **overrides) -> "Options":
        env = {
            "log_group":           os.getenv("CW_LOG_GROUP"),
            "log_group_class":     os.getenv("CW_LOG_GROUP_CLASS"),
            "log_stream":          os.getenv("CW_LOG_STREAM"),
            "log_stream_template": os.getenv("CW_LOG_STREAM_TEMPLATE"),
            "retention_in_days":   os.getenv("CW_RETENTION_DAYS"),
            "region_name":         os.getenv("AWS_REGION"),
            "max_attempts":        os.getenv("CW_MAX_ATTEMPTS"),
        }
        values = {k: v for k, v in env.items() if v}
        values.update(overrides)
        return cls(**values)
