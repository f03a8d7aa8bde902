import os, sys, time

from pydantic import ValidationError

from cwlog import CloudWatchLog, CloudWatchLogError, Options

LOG_GROUP  = os.getenv("CW_LOG_GROUP", "/cloudwatchlogs/example")
LOG_STREAM = os.getenv("CW_LOG_STREAM", "/cloudwatchlogs/example")

def log(*a): print(*a, flush=True)

def main(argv=None) -> int:
    lines = (sys.argv[1:] if argv is None else argv) or [
        "hello cloudwatchlog-example - 1",
        "hello cloudwatchlog-example - 2",
    ]
    try:
        cw = CloudWatchLog(Options.from_env(log_group=LOG_GROUP, log_stream=LOG_STREAM))
    except (CloudWatchLogError, ValidationError) as e:
        log("client error:", e)
        return 1
    now = int(time.time() * 1000)
    events = [{"timestamp": now, "message": line} for line in lines]
    try:
        cw.put_log_events(events)
        log("sent:", len(events), "events to", cw.log_group, cw.stream)
    except CloudWatchLogError as e:
        log("log failed:", e)
    return 0

if __name__ == "__main__":
    sys.exit(main())
