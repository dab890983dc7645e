"""Custom exception classes for the bridge."""


class BridgeError(Exception):
    """Base exception for ntfy-bridge.

    ``stage`` names the pipeline step an error belongs to when it is raised
    for a single alert.
    """

    stage = "internal"

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)

    def violation_lines(self) -> list[str]:
        """One ``- loc: msg`` line per entry in ``details``."""
        if not isinstance(self.details, list):
            return []
        lines = []
        for item in self.details:
            if isinstance(item, dict):
                lines.append(f"- {item.get('loc', '<root>')}: {item.get('msg', '')}")
            else:
                lines.append(f"- {item}")
        return lines

    def diagnostic(self, separator: str = "\n") -> str:
        """Message followed by every violation."""
        return separator.join([self.message, *self.violation_lines()])


class ValidationError(BridgeError):
    """Malformed mapping, batch or alert."""

    stage = "validation"

    def __init__(self, message: str, details=None):
        super().__init__("VALIDATION_ERROR", message, details, status_code=400)


class ExtractionError(BridgeError):
    """A field query could not be evaluated against an alert."""

    stage = "extraction"

    def __init__(self, query: str, reason: str):
        self.query = query
        super().__init__("EXTRACTION_ERROR", f"query {query!r} failed: {reason}")


class NotificationSchemaError(BridgeError):
    """The assembled notification violates the output contract."""

    stage = "notification"

    def __init__(self, message: str, details=None):
        super().__init__("NOTIFICATION_SCHEMA_ERROR", message, details)


class DeliveryError(BridgeError):
    """The sink rejected the notification or could not be reached."""

    stage = "delivery"

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__("DELIVERY_ERROR", message)
