from typing import Optional


class EvaluationError(RuntimeError):
    """Base class for every failure an evaluation can end with.

    ``kind`` is a stable machine-readable name so callers (and the HTTP
    layer) can branch on the failure without matching on message text.
    """

    kind = "EvaluationError"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": str(self)}


class InvalidInput(EvaluationError, ValueError):
    """Raised when the resume or job description is blank"""

    kind = "InvalidInput"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"'{field}' must be a non-blank string")

    def to_dict(self) -> dict:
        return {**super().to_dict(), "field": self.field}


class ProviderError(EvaluationError):
    """Raised when the underlying LLM provider fails"""

    kind = "ProviderError"
    transient = False


class TransportTimeout(ProviderError):
    """Raised when the provider does not answer within the configured timeout"""

    kind = "TransportTimeout"
    transient = True

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout
        if timeout is None:
            message = "Provider request timed out"
        else:
            message = f"Provider request timed out after {timeout:g}s"
        super().__init__(message)


class TransportFailure(ProviderError):
    """Raised for connection and HTTP level failures.

    ``transient`` marks failures worth retrying (a connection reset
    mid-exchange). Application-level rejections (non-2xx) and refused
    connections are terminal.
    """

    kind = "TransportFailure"

    def __init__(
        self,
        cause: str,
        status_code: Optional[int] = None,
        transient: bool = False,
    ):
        self.cause = cause
        self.status_code = status_code
        self.transient = transient
        message = "Provider transport failure"
        if status_code is not None:
            message += f" (status code: {status_code})"
        super().__init__(f"{message}: {cause}")

    def to_dict(self) -> dict:
        return {**super().to_dict(), "status_code": self.status_code}


class StrategyError(EvaluationError):
    """Raised when a Strategy cannot parse/return expected output"""

    kind = "StrategyError"


class EmptyResponse(StrategyError):
    """Raised when the provider envelope carries no generated text"""

    kind = "EmptyResponse"

    def __init__(self, message: str = "Provider returned no text payload"):
        super().__init__(message)


class MalformedResponse(StrategyError):
    """Raised when the generated text is not a JSON object, even after fence trimming"""

    kind = "MalformedResponse"

    def __init__(self, message: str, raw: str = ""):
        self.raw = raw
        super().__init__(message)


class InvalidShape(StrategyError):
    """Raised when decoded JSON violates the contract of one field"""

    kind = "InvalidShape"

    def __init__(self, field: str, reason: str = ""):
        self.field = field
        self.reason = reason
        message = f"Invalid value for field '{field}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)

    def to_dict(self) -> dict:
        return {**super().to_dict(), "field": self.field}
