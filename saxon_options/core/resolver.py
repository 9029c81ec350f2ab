from __future__ import annotations

import importlib
from typing import Any, Dict, Optional, Tuple

from ..exceptions import ConfigurationError, ErrorCode
from .engine import ClassResolver, Feature


def _split_class_name(name: str) -> Tuple[str, str]:
    text = name.strip()
    if ":" in text:
        module_name, _, attr = text.partition(":")
    else:
        module_name, _, attr = text.rpartition(".")
    if not module_name or not attr:
        raise ConfigurationError(
            f"'{name}' is not a qualified class name",
            code=ErrorCode.CLASS_NOT_FOUND,
        )
    return module_name, attr


class ImportlibClassResolver:
    """Instantiate classes named ``package.module.Class`` or ``package.module:Class``."""

    def __init__(self, capability: Optional[type] = None) -> None:
        self.capability = capability

    def load(self, name: str) -> type:
        module_name, attr = _split_class_name(name)
        try:
            module = importlib.import_module(module_name)
        except (ImportError, TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"cannot import module '{module_name}'",
                code=ErrorCode.CLASS_NOT_FOUND,
            ) from exc
        try:
            target = getattr(module, attr)
        except AttributeError as exc:
            raise ConfigurationError(
                f"module '{module_name}' has no attribute '{attr}'",
                code=ErrorCode.CLASS_NOT_FOUND,
            ) from exc
        if not isinstance(target, type):
            raise ConfigurationError(
                f"'{name}' is not a class",
                code=ErrorCode.CLASS_NOT_INSTANTIABLE,
            )
        return target

    def resolve(self, name: str) -> object:
        cls = self.load(name)
        try:
            instance = cls()
        except Exception as exc:
            raise ConfigurationError(
                f"cannot instantiate '{name}': {exc}",
                code=ErrorCode.CLASS_NOT_INSTANTIABLE,
            ) from exc
        if self.capability is not None and not isinstance(instance, self.capability):
            raise ConfigurationError(
                f"'{name}' is not a {self.capability.__name__}",
                code=ErrorCode.CLASS_WRONG_CAPABILITY,
            )
        return instance


class PropertyConfiguration:
    """In-memory engine configuration keeping the last value of every feature."""

    def __init__(self, resolver: Optional[ClassResolver] = None) -> None:
        self.resolver: ClassResolver = resolver or ImportlibClassResolver()
        self.properties: Dict[Feature, Any] = {}

    def set_property(self, feature: Feature, value: Any) -> None:
        self.properties[Feature(feature)] = value

    def get_property(self, feature: Feature, default: Any = None) -> Any:
        return self.properties.get(Feature(feature), default)

    def get_instance(self, class_name: str) -> object:
        return self.resolver.resolve(class_name)


__all__ = ["ImportlibClassResolver", "PropertyConfiguration"]
