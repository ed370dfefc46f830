from typing import List, Optional


class AppError(Exception):
    """Base class for errors raised by services and mapped to HTTP by routers."""


class ConfigError(AppError):
    """A required setting (e.g. the OpenAI API key) is missing."""


class ValidationError(AppError):
    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.fields = fields or []


class UpstreamError(AppError):
    """The LLM provider call failed. The provider exception is chained as __cause__."""


class ModerationRejected(AppError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NotFoundError(AppError):
    pass


class ConstraintViolation(AppError):
    pass
