"""Custom exceptions for the material master assistant."""


class MaterialAIError(Exception):
    """Base exception for all assistant errors."""


class ConfigError(MaterialAIError):
    """Configuration-related errors."""


class UnsupportedFileError(MaterialAIError):
    """Uploaded file type is not .csv or .json."""


class DataImportError(MaterialAIError):
    """Uploaded data could not be parsed or failed row validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []


class LLMError(MaterialAIError):
    """External model service errors."""


class LLMConnectionError(LLMError):
    """Connection to the model API failed."""


class LLMRateLimitError(LLMError):
    """Model API rate limit exceeded."""


class LLMResponseError(LLMError):
    """Model API returned an error status or an unusable reply."""
