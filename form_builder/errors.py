from __future__ import annotations


class FormBuilderError(ValueError):
    """Base class for errors reported back to the editor as a message."""


class EmptyInputError(FormBuilderError):
    def __init__(self, message: str = "Invalid JSON: empty input"):
        super().__init__(message)


class JsonParseError(FormBuilderError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid JSON: {detail}")


class DataShapeError(FormBuilderError):
    def __init__(self, message: str = "Data must be an object (not an array, string, number, or null)"):
        super().__init__(message)


class NestingTooDeepError(FormBuilderError):
    """Raised when a value nests deeper than the configured limit."""

    def __init__(self, message: str = "Invalid JSON: data is nested too deeply"):
        super().__init__(message)
