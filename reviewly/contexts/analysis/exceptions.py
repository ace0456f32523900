"""Custom exceptions for the analysis context."""

from pathlib import Path
from typing import Optional


class InvalidVocabularyError(ValueError):
    """
    Exception raised when a vocabulary override file is malformed.

    Attributes:
        message: Error description
        config_path: Path of the offending vocabulary file, when known
        key: Offending top-level key, when known
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        key: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.key = key

        parts = [message]
        if config_path is not None:
            parts.append(f"Vocabulary file: {config_path}")
        if key is not None:
            parts.append(f"Key: {key}")

        super().__init__("\n".join(parts))
