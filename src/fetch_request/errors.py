from typing import Optional


class RequestBuilderError(Exception):
    """Base exception for request builder errors."""
    pass


class InvalidArgumentError(RequestBuilderError, ValueError):
    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class MissingValueError(InvalidArgumentError):
    def __init__(self, field: str, key: Optional[str] = None):
        if key:
            msg = f"The {field} value of key={key} is empty"
        else:
            msg = f"The {field} value is empty"
        super().__init__(msg, key)
        self.field = field


class SerializationFailedError(RequestBuilderError):
    def __init__(self, value_type: str, cause: Exception):
        msg = f"Failed to serialize body of type '{value_type}': {str(cause)}"
        super().__init__(msg)
        self.value_type = value_type
        self.cause = cause


class BuilderFinalizedError(RequestBuilderError, RuntimeError):
    def __init__(self, request_id: str, operation: str):
        msg = f"Request {request_id} is already built; '{operation}' is not allowed"
        super().__init__(msg)
        self.request_id = request_id
        self.operation = operation
