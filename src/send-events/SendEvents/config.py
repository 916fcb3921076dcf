import os
from dataclasses import dataclass

from .errors import ConfigurationMissing

CONNECTION_STRING_VAR = "EventHubConnectionString"
EVENTHUB_NAME_VAR = "EventHubName"


@dataclass(frozen=True)
class EventHubSettings:
    connection_string: str
    eventhub_name: str

    @classmethod
    def from_env(cls, environ=None) -> "EventHubSettings":
        """Read the hub settings, raising ConfigurationMissing if any is unset or empty."""
        if environ is None:
            environ = os.environ
        cs = environ.get(CONNECTION_STRING_VAR)
        hub = environ.get(EVENTHUB_NAME_VAR)

        missing = [name for name, value in ((CONNECTION_STRING_VAR, cs), (EVENTHUB_NAME_VAR, hub)) if not value]
        if missing:
            raise ConfigurationMissing(missing)
        return cls(connection_string=cs, eventhub_name=hub)
