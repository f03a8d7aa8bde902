from .errors import (
    CloudWatchLogError,
    CreateGroupError,
    CreateStreamError,
    PutEventsError,
    RetentionError,
    StreamTemplateError,
)
from .handler import CloudWatchHandler
from .log import CloudWatchLog, LogEvent
from .options import Options
from .stream import DEFAULT_STREAM_TEMPLATE, stream_name

__all__ = [
    "CloudWatchHandler",
    "CloudWatchLog",
    "CloudWatchLogError",
    "CreateGroupError",
    "CreateStreamError",
    "DEFAULT_STREAM_TEMPLATE",
    "LogEvent",
    "Options",
    "PutEventsError",
    "RetentionError",
    "StreamTemplateError",
    "stream_name",
]
