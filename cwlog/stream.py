from datetime import datetime
from string import Formatter

from .errors import StreamTemplateError

DEFAULT_STREAM_TEMPLATE = "{stream}-{YYYY}-{MM}-{DD}-{HH}"

FIELDS = ("group", "stream", "YYYY", "MM", "DD", "HH")

_SAMPLE_TIME = datetime(2000, 1, 2, 3)


def stream_fields(group: str, stream: str, now: datetime) -> dict:
    # strftime("%Y") does not pad years below 1000 on every platform
    return {
        "group": group,
        "stream": stream,
        "YYYY": f"{now.year:04d}",
        "MM": f"{now.month:02d}",
        "DD": f"{now.day:02d}",
        "HH": f"{now.hour:02d}",
    }


def stream_name(template: str, group: str, stream: str, now: datetime) -> str:
    try:
        return template.format(**stream_fields(group, stream, now))
    except (KeyError, IndexError, AttributeError, ValueError) as e:
        raise StreamTemplateError(f"log stream template error: {template!r}: {e}") from e


def check_template(template: str) -> str:
    if not template:
        raise StreamTemplateError("log stream template is empty")
    try:
        parsed = list(Formatter().parse(template))
    except ValueError as e:
        raise StreamTemplateError(f"log stream template error: {template!r}: {e}") from e
    for _, field, spec, conversion in parsed:
        if field is None:
            continue
        # plain names only: no attribute/index lookups, conversions or nested specs
        if field not in FIELDS or conversion or (spec and "{" in spec):
            raise StreamTemplateError(
                f"log stream template error: {template!r}: unsupported field {{{field}}}"
            )
    stream_name(template, "group", "stream", _SAMPLE_TIME)
    return template
