import logging
import threading

from .log import CloudWatchLog

# loggers written to while a record is being delivered
SKIPPED_LOGGERS = ("cwlog", "boto3", "botocore", "urllib3", "s3transfer")


class CloudWatchHandler(logging.Handler):
    """logging.Handler that sends each formatted record with put_simple.

    Records logged while this thread is already delivering one are dropped,
    as are records from cwlog and the AWS SDK's own loggers, so a delivery
    never feeds itself.
    """

    def __init__(self, log: CloudWatchLog, level=logging.NOTSET):
        super().__init__(level)
        self.log = log
        self._local = threading.local()

    def _skip(self, record: logging.LogRecord) -> bool:
        name = record.name
        return any(name == n or name.startswith(n + ".") for n in SKIPPED_LOGGERS)

    def emit(self, record: logging.LogRecord):
        if getattr(self._local, "sending", False) or self._skip(record):
            return
        self._local.sending = True
        try:
            self.log.put_simple(self.format(record))
        except Exception:
            self.handleError(record)
        finally:
            self._local.sending = False
