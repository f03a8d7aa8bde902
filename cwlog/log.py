import json
import logging
from datetime import datetime
from typing import Iterable, Optional, Union

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError
from pydantic import BaseModel

from .errors import CreateGroupError, CreateStreamError, PutEventsError, RetentionError
from .options import Options
from .stream import stream_name

logger = logging.getLogger(__name__)

ALREADY_EXISTS = "ResourceAlreadyExistsException"


class LogEvent(BaseModel):
    timestamp: int
    message: str


def epoch_millis(t: datetime) -> int:
    return int(t.timestamp() * 1000)


def error_code(e: ClientError) -> str:
    return e.response.get("Error", {}).get("Code", "ClientError")


def make_client(options: Options):
    kwargs = {}
    if options.region_name:
        kwargs["region_name"] = options.region_name
    if options.max_attempts:
        kwargs["config"] = Config(retries={"max_attempts": options.max_attempts})
    return boto3.client("logs", **kwargs)


class CloudWatchLog:
    """Ships log events to one CloudWatch Logs group.

    Construction creates the group (an existing group is fine) and applies
    the retention policy. Every write derives the stream name from the
    template and the current time; the stream is created whenever that
    name changes, so streams roll over by hour with the default template.
    """

    def __init__(self, options: Options):
        self.options = options
        self.client = options.client or make_client(options)
        self.stream = ""  # last created stream; empty forces a create
        self._create_group()
        self._put_retention()

    @property
    def log_group(self) -> str:
        return self.options.log_group

    def _create_group(self):
        args = {"logGroupName": self.log_group}
        if self.options.log_group_class:
            args["logGroupClass"] = self.options.log_group_class
        try:
            self.client.create_log_group(**args)
            logger.debug("created log group %s", self.log_group)
        except ClientError as e:
            if error_code(e) != ALREADY_EXISTS:
                raise CreateGroupError(f"create group error: {self.log_group}: {e}") from e

    def _put_retention(self):
        days = self.options.retention_in_days
        try:
            self.client.put_retention_policy(logGroupName=self.log_group, retentionInDays=days)
        except ClientError as e:
            raise RetentionError(
                f"put group retention error: group={self.log_group} retention={days}: {e}"
            ) from e

    def stream_name(self, now: Optional[datetime] = None) -> str:
        o = self.options
        return stream_name(o.log_stream_template, o.log_group, o.log_stream, now or o.now())

    def _ensure_stream(self, stream: str):
        if stream == self.stream:
            return
        try:
            self.client.create_log_stream(logGroupName=self.log_group, logStreamName=stream)
        except ClientError as e:
            if error_code(e) == ALREADY_EXISTS:
                # created elsewhere; only streams created here are remembered
                return
            self.stream = ""
            raise CreateStreamError(
                f"create log stream error: group={self.log_group} stream={stream}: {e}"
            ) from e
        logger.debug("created log stream %s in %s", stream, self.log_group)
        self.stream = stream

    def put_log_events(self, events: Iterable[Union[dict, LogEvent]]) -> dict:
        stream = self.stream_name()
        self._ensure_stream(stream)
        log_events = [e.model_dump() if isinstance(e, LogEvent) else e for e in events]
        try:
            return self.client.put_log_events(
                logGroupName=self.log_group,
                logStreamName=stream,
                logEvents=log_events,
            )
        except ClientError as e:
            logger.warning("put_log_events failed: %s/%s: %s", self.log_group, stream, error_code(e))
            raise PutEventsError(
                f"PutLogEvents error: group={self.log_group} stream={stream}: {e}"
            ) from e

    def put_simple(self, message: str) -> dict:
        ts = epoch_millis(self.options.now())
        return self.put_log_events([{"timestamp": ts, "message": message}])

    def put_json(self, event: dict) -> dict:
        ts = epoch_millis(self.options.now())
        msg = json.dumps({**event, "ts": ts}, separators=(",", ":"), default=str)
        return self.put_log_events([{"timestamp": ts, "message": msg}])
