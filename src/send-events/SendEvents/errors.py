import enum


class SendEventsError(Exception):
    """Base class for failures raised while handling a SendEvents request."""


class ConfigurationMissing(SendEventsError):
    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__(
            "EventHub configuration is missing. Please set EventHubConnectionString "
            "and EventHubName in local.settings.json"
        )


class EventTooLargeError(SendEventsError):
    pass


class ErrorKind(enum.Enum):
    CONFIGURATION_MISSING = "configuration_missing"
    MESSAGE_TOO_LARGE = "message_too_large"
    BROKER_FAILURE = "broker_failure"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @classmethod
    def classify(cls, exc: BaseException) -> "ErrorKind":
        if isinstance(exc, ConfigurationMissing):
            return cls.CONFIGURATION_MISSING
        if isinstance(exc, EventTooLargeError):
            return cls.MESSAGE_TOO_LARGE
        return cls.BROKER_FAILURE


# Only missing configuration is reported to the caller; everything else is a bare 500.
_STATUS_CODES = {
    ErrorKind.CONFIGURATION_MISSING: 400,
    ErrorKind.MESSAGE_TOO_LARGE: 500,
    ErrorKind.BROKER_FAILURE: 500,
}
