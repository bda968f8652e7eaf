"""
Token generation error taxonomy
"""

from typing import List, Optional


class TokenGenerationError(RuntimeError):
    """Base class for token generation errors"""
    pass


class InvalidColorError(TokenGenerationError, ValueError):
    """A color string could not be decoded"""

    def __init__(self, value: str):
        super().__init__(f"Invalid hex color: {value}")
        self.value = value


class InvalidThemeError(TokenGenerationError):
    """A seed theme batch violated the scale rules"""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors) or "Invalid theme")
        self.errors = list(errors)


class CreateOrUpdateError(TokenGenerationError):
    """The external namespace rejected a write"""
    pass


class StoreWriteError(CreateOrUpdateError):
    """The document cannot be written to (closed or read-only)"""
    pass


class ModeLimitError(StoreWriteError):
    """The collection cannot take another mode"""

    def __init__(self, collection_name: str, limit: Optional[int]):
        super().__init__(
            f"Collection '{collection_name}' is limited to {limit} mode(s)"
        )
        self.collection_name = collection_name
        self.limit = limit


class ValidationFailureError(TokenGenerationError):
    """State validation found rule violations"""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors) or "Validation failed")
        self.errors = list(errors)
