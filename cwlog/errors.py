class CloudWatchLogError(Exception):
    """Base class for failures reported by cwlog."""


class StreamTemplateError(CloudWatchLogError, ValueError):
    pass


class CreateGroupError(CloudWatchLogError):
    pass


class RetentionError(CloudWatchLogError):
    pass


class CreateStreamError(CloudWatchLogError):
    pass


class PutEventsError(CloudWatchLogError):
    pass
