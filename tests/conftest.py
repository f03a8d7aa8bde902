"""
Shared fixtures: an in-memory CloudWatch Logs client.
"""
import logging
from datetime import datetime, timezone

import pytest
from botocore.exceptions import ClientError


def client_error(code, message, operation):
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeLogs:
    """Keeps groups as {group: {stream: [events]}} and records every call."""

    def __init__(self):
        self.groups = {}
        self.retention = {}
        self.calls = []
        self.deny = set()
        self.group_class = None
        self.group_kwargs = None

    def _check(self, operation):
        self.calls.append(operation)
        if operation in self.deny:
            raise client_error("AccessDeniedException", f"{operation} denied", operation)

    def create_log_group(self, logGroupName, **kwargs):
        self._check("CreateLogGroup")
        if logGroupName in self.groups:
            raise client_error("ResourceAlreadyExistsException",
                               "The specified log group already exists", "CreateLogGroup")
        self.groups[logGroupName] = {}
        self.group_kwargs = kwargs
        self.group_class = kwargs.get("logGroupClass")
        return {}

    def put_retention_policy(self, logGroupName, retentionInDays):
        self._check("PutRetentionPolicy")
        self.retention[logGroupName] = retentionInDays
        return {}

    def create_log_stream(self, logGroupName, logStreamName):
        self._check("CreateLogStream")
        group = self.groups.get(logGroupName)
        if group is None:
            raise client_error("ResourceNotFoundException", "group not found", "CreateLogStream")
        if logStreamName in group:
            raise client_error("ResourceAlreadyExistsException",
                               "The specified log stream already exists", "CreateLogStream")
        group[logStreamName] = []
        return {}

    def put_log_events(self, logGroupName, logStreamName, logEvents):
        self._check("PutLogEvents")
        group = self.groups.get(logGroupName)
        if group is None or logStreamName not in group:
            raise client_error("ResourceNotFoundException", "stream not found", "PutLogEvents")
        group[logStreamName].extend(logEvents)
        return {"rejectedLogEventsInfo": {}}


class ChattyLogs(FakeLogs):
    """Logs through the SDK's loggers while sending, like botocore does."""

    def put_log_events(self, **kwargs):
        logging.getLogger("botocore.endpoint").debug("sending request")
        logging.getLogger("app.retry").warning("delivery slow")
        return super().put_log_events(**kwargs)


class Clock:
    def __init__(self, t):
        self.t = t

    def __call__(self):
        return self.t


@pytest.fixture
def fake_logs():
    return FakeLogs()


@pytest.fixture
def chatty_logs():
    return ChattyLogs()


@pytest.fixture
def clock():
    return Clock(datetime(2024, 3, 5, 7, 30, tzinfo=timezone.utc))
