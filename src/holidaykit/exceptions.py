"""
HolidayKit Exception Hierarchy

Domain-specific exceptions for holiday computation.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: HK_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class HolidayKitError(Exception):
    """
    Base exception for all HolidayKit errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (HK_*)
        details: Additional context about the error
        provider_id: Associated provider (jurisdiction) if applicable
    """
    message: str
    code: str = "HK_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    provider_id: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.provider_id:
            parts.append(f"(provider: {self.provider_id})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/CLI output."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.provider_id:
            result["provider_id"] = self.provider_id
        return result


# =============================================================================
# Argument Errors
# =============================================================================

@dataclass
class InvalidArgumentError(HolidayKitError):
    """An argument is empty, malformed or out of its allowed range."""
    code: str = "HK_INVALID_ARGUMENT"


@dataclass
class UnknownLocaleError(HolidayKitError):
    """Requested display or translation locale is not registered."""
    code: str = "HK_UNKNOWN_LOCALE"


# =============================================================================
# Date Errors
# =============================================================================

@dataclass
class InvalidDateError(HolidayKitError):
    """A rule produced a day that does not exist on the calendar."""
    code: str = "HK_INVALID_DATE"


# =============================================================================
# Provider Errors
# =============================================================================

@dataclass
class ProviderNotFoundError(HolidayKitError):
    """Requested provider (jurisdiction) is not registered."""
    code: str = "HK_PROVIDER_NOT_FOUND"


@dataclass
class CollectionLockedError(HolidayKitError):
    """A locked holiday collection was asked to change."""
    code: str = "HK_COLLECTION_LOCKED"


# =============================================================================
# Translation Errors
# =============================================================================

@dataclass
class TranslationLoadError(HolidayKitError):
    """Failed to read a translation or locale data file."""
    code: str = "HK_TRANSLATION_LOAD_ERROR"


@dataclass
class TranslationValidationError(HolidayKitError):
    """Translation data failed schema or locale validation."""
    code: str = "HK_TRANSLATION_VALIDATION_ERROR"
