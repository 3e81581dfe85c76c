"""Exceptions raised by stockchart."""


class ChartDataError(Exception):
    """Base class for all stockchart errors."""


class MalformedPayloadError(ChartDataError):
    """Payload is not valid JSON or lacks the expected series object."""


class InvalidFieldError(ChartDataError):
    """A field could not be parsed while parsing in strict mode.

    Attributes:
        key: Series entry key (the timestamp string) the field belongs to.
        field: Field label, or ``"time"`` for the entry key itself.
    """

    def __init__(self, key: str, field: str, value: object):
        self.key = key
        self.field = field
        self.value = value
        super().__init__(f"Invalid value {value!r} for '{field}' in entry '{key}'")


class ConfigError(ChartDataError):
    """Configuration file exists but cannot be read or validated."""
