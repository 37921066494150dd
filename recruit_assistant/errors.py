"""Exception types raised by the data engine and the assistant."""


class RecruitAssistantError(Exception):
    """Base class for all application errors."""


class SourceUnavailable(RecruitAssistantError):
    """The record store could not be read, so no snapshot was built."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"failed to load data: {cause}")


class InvalidFilter(RecruitAssistantError):
    """Caller supplied a malformed search filter."""


class AssistantUnavailable(RecruitAssistantError):
    """The LLM backend is not configured or the completion call failed."""
