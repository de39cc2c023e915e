"""Language utilities for rentline-lookup.

This module centralizes the language options supported for user-facing
messages. Keeping it in the domain layer allows both CLI and service
layers to share a single source of truth without creating circular
imports with adapters.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    PORTUGUESE = "pt"
    ENGLISH = "en"

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "Português" if self is Language.PORTUGUESE else "English"
