"""Errors raised while building option records and configuring the engine."""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional, Sequence


class ErrorCode(str, Enum):
    """Canonical error identifiers for configuration failures."""

    CLASS_NOT_FOUND = "class_not_found"
    CLASS_NOT_INSTANTIABLE = "class_not_instantiable"
    CLASS_WRONG_CAPABILITY = "class_wrong_capability"
    PROPERTY_REJECTED = "property_rejected"
    OPTIONS_NOT_OBJECT = "options_not_object"
    INVALID_OPTION_VALUE = "invalid_option_value"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.value)


class ConfigurationError(Exception):
    """Raised when the engine configuration cannot be applied."""

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        option: Optional[str] = None,
        feature: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.option = option
        self.feature = feature

    def with_option(self, option: str) -> "ConfigurationError":
        if self.option is None:
            self.option = option
        return self

    def __str__(self) -> str:
        if self.option:
            return f"[{self.code}] {self.option}: {self.message}"
        return f"[{self.code}] {self.message}"


class OptionsError(ValueError):
    """Raised when a raw option payload cannot be turned into a record."""

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        errors: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.errors: dict[str, list[str]] = {
            key: list(value) for key, value in (errors or {}).items()
        }


__all__ = ["ErrorCode", "ConfigurationError", "OptionsError"]
