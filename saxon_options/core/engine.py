"""Contract between the option translator and the XML engine.

The translator never talks to a concrete engine class.  It only needs a
configuration object that accepts feature assignments and can instantiate a
class by name, plus a compiler object exposing the relocatable switch.  The
feature keys and native constants below follow the Saxon configuration
surface the option names come from.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Protocol


class Feature(str, Enum):
    """Configuration features touched by the translator."""

    XINCLUDE = "http://saxon.sf.net/feature/xinclude-aware"
    RECOVERY_POLICY = "http://saxon.sf.net/feature/recoveryPolicy"
    SCHEMA_VALIDATION = "http://saxon.sf.net/feature/schema-validation"
    TREE_MODEL = "http://saxon.sf.net/feature/treeModel"
    COLLECTION_FINDER = "http://saxon.sf.net/feature/collection-finder"
    DTD_VALIDATION = "http://saxon.sf.net/feature/validation"
    ENABLE_ASSERTIONS = "http://saxon.sf.net/feature/enableAssertions"
    EXPAND_ATTRIBUTE_DEFAULTS = "http://saxon.sf.net/feature/expandAttributeDefaults"
    ALLOW_EXTERNAL_FUNCTIONS = "http://saxon.sf.net/feature/allow-external-functions"
    LINE_NUMBERING = "http://saxon.sf.net/feature/linenumbering"
    MESSAGE_EMITTER_CLASS = "http://saxon.sf.net/feature/messageEmitterClass"
    OPTIMIZATION_LEVEL = "http://saxon.sf.net/feature/optimizationLevel"
    OUTPUT_URI_RESOLVER = "http://saxon.sf.net/feature/outputURIResolver"
    URI_RESOLVER_CLASS = "http://saxon.sf.net/feature/uriResolverClass"
    VALIDATION_WARNINGS = "http://saxon.sf.net/feature/validation-warnings"
    VALIDATION_COMMENTS = "http://saxon.sf.net/feature/validation-comments"
    STRIP_WHITESPACE = "http://saxon.sf.net/feature/strip-whitespace"
    COMPILE_WITH_TRACING = "http://saxon.sf.net/feature/compile-with-tracing"
    TRACE_EXTERNAL_FUNCTIONS = "http://saxon.sf.net/feature/trace-external-functions"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.value)


class RecoveryPolicy(IntEnum):
    RECOVER_SILENTLY = 0
    RECOVER_WITH_WARNINGS = 1
    DO_NOT_RECOVER = 2


class Validation(IntEnum):
    STRICT = 1
    LAX = 2
    PRESERVE = 3
    SKIP = 4


class TreeModel(IntEnum):
    LINKED_TREE = 0
    TINY_TREE = 1
    TINY_TREE_CONDENSED = 2


class ClassResolver(Protocol):
    def resolve(self, name: str) -> object: ...


class EngineConfiguration(Protocol):
    """Processor-level configuration owned by the engine."""

    def set_property(self, feature: Feature, value: Any) -> None: ...

    def get_instance(self, class_name: str) -> object: ...


class CompilerHandle(Protocol):
    """Compiler-level configuration.

    Only meaningful once the configuration it was created from went through
    :func:`~saxon_options.core.translator.prepare_saxon_configuration`.
    """

    def set_relocatable(self, relocatable: bool) -> None: ...


__all__ = [
    "Feature",
    "RecoveryPolicy",
    "Validation",
    "TreeModel",
    "ClassResolver",
    "EngineConfiguration",
    "CompilerHandle",
]
