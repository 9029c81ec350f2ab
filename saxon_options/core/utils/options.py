from __future__ import annotations

from dataclasses import dataclass, fields as dataclass_fields
from enum import Enum
from typing import Any, Mapping, Optional, Type, TypeVar

from marshmallow import ValidationError, fields, post_load, pre_load, validates_schema

from ...exceptions import ErrorCode, OptionsError
from ...schemas.base import SaxonOptionsBaseSchema
from ...utils import kebab_case

OptionEnumT = TypeVar("OptionEnumT", bound="OptionEnum")


class OptionEnum(str, Enum):
    """Closed set of strings accepted by an option."""

    @classmethod
    def parse(cls: Type[OptionEnumT], value: Optional[str]) -> Optional[OptionEnumT]:
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.value)


class Switch(OptionEnum):
    ON = "on"
    OFF = "off"


class WarningsOption(OptionEnum):
    SILENT = "silent"
    RECOVER = "recover"
    FATAL = "fatal"


class ValidationOption(OptionEnum):
    STRICT = "strict"
    LAX = "lax"


class TreeModelOption(OptionEnum):
    LINKED = "linked"
    TINY = "tiny"
    TINY_CONDENSED = "tinyc"


class DtdOption(OptionEnum):
    ON = "on"
    OFF = "off"
    RECOVER = "recover"


class OutputValidationOption(OptionEnum):
    RECOVER = "recover"
    FATAL = "fatal"
    STRICT = "strict"


@dataclass(frozen=True)
class SaxonOptions:
    # Every field is a raw option string; None means "not specified".
    # // Parsing ==================================================================================
    # Expand XInclude directives ("on" enables).
    xinclude: Optional[str] = None
    # Recovery policy: silent | recover | fatal.
    warnings: Optional[str] = None
    # Schema validation of source documents: strict | lax.
    validation: Optional[str] = None
    # Tree representation: linked | tiny | tinyc.
    tree_model: Optional[str] = None
    # Qualified class name of the collection finder to install.
    collection_finder_class: Optional[str] = None
    # DTD validation: on | off | recover.
    dtd: Optional[str] = None
    # // Compilation ==============================================================================
    assertions_enabled: Optional[str] = None
    expand_attribute_defaults: Optional[str] = None
    allow_external_functions: Optional[str] = None
    line_numbering: Optional[str] = None
    # Emitter class name, stored verbatim.
    message_emitter_class: Optional[str] = None
    # Optimization level, stored verbatim.
    optimization_level: Optional[str] = None
    # Qualified class name of the output URI resolver to install.
    output_uri_resolver_class: Optional[str] = None
    # Resolver class name, stored verbatim.
    uri_resolver_class: Optional[str] = None
    # "recover" turns validation errors on output into warnings and comments.
    output_validation: Optional[str] = None
    strip_whitespace: Optional[str] = None
    # // Tracing ==================================================================================
    # Any value, even "", enables compile-time tracing.
    trace_compilation: Optional[str] = None
    trace_external_functions: Optional[str] = None
    # // Compiler =================================================================================
    relocatable: Optional[str] = None

    def present_fields(self) -> list[str]:
        return [
            item.name
            for item in dataclass_fields(self)
            if getattr(self, item.name) is not None
        ]

    def to_payload(self) -> dict[str, str]:
        payload: dict[str, str] = {}
        for name in self.present_fields():
            payload[kebab_case(name)] = getattr(self, name)
        return payload


# Closed value sets used by strict loading; fields absent here accept any string.
OPTION_CHOICES: Mapping[str, Type[OptionEnum]] = {
    "xinclude": Switch,
    "warnings": WarningsOption,
    "validation": ValidationOption,
    "tree_model": TreeModelOption,
    "dtd": DtdOption,
    "assertions_enabled": Switch,
    "expand_attribute_defaults": Switch,
    "allow_external_functions": Switch,
    "line_numbering": Switch,
    "output_validation": OutputValidationOption,
    "trace_external_functions": Switch,
    "relocatable": Switch,
}

# Short names used by the Saxon command line and the build plugins wrapping it.
SAXON_SHORT_NAMES: Mapping[str, str] = {
    "xi": "xinclude",
    "val": "validation",
    "tree": "tree_model",
    "collectionFinderClass": "collection_finder_class",
    "ea": "assertions_enabled",
    "expand": "expand_attribute_defaults",
    "ext": "allow_external_functions",
    "l": "line_numbering",
    "m": "message_emitter_class",
    "opt": "optimization_level",
    "or": "output_uri_resolver_class",
    "r": "uri_resolver_class",
    "outval": "output_validation",
    "strip": "strip_whitespace",
    "T": "trace_compilation",
    "TJ": "trace_external_functions",
    "relocate": "relocatable",
}


def _build_aliases() -> dict[str, str]:
    aliases: dict[str, str] = {}
    for item in dataclass_fields(SaxonOptions):
        key = kebab_case(item.name)
        aliases[key] = key
        aliases[item.name] = key
    for short, name in SAXON_SHORT_NAMES.items():
        aliases[short] = kebab_case(name)
    return aliases


OPTION_ALIASES: Mapping[str, str] = _build_aliases()


def canonical_option_key(key: Any) -> Optional[str]:
    """Return the kebab-case option name for ``key`` or None when unknown."""
    if not isinstance(key, str):
        return None
    return OPTION_ALIASES.get(key.lstrip("-"))


def _alias_rank(key: str, canonical: str) -> int:
    """Precedence of a spelling: kebab-case, then snake_case, then Saxon short names.

    A null value never replaces a value; equal ranks keep the first key seen.
    """
    name = key.lstrip("-")
    if name == canonical:
        return 0
    if name in SAXON_SHORT_NAMES:
        return 2
    return 1


class OptionValue(fields.Field):
    """Option value coerced to the string form the translator compares against."""

    default_error_messages = {"invalid": "Not a valid option value."}

    def _deserialize(
        self,
        value: Any,
        attr: Optional[str],
        data: Optional[Mapping[str, Any]],
        **kwargs: Any,
    ) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, bool):
            return Switch.ON.value if value else Switch.OFF.value
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            return value
        raise self.make_error("invalid")


class SaxonOptionsSchema(SaxonOptionsBaseSchema):
    xinclude = OptionValue(load_default=None, allow_none=True)
    warnings = OptionValue(load_default=None, allow_none=True)
    validation = OptionValue(load_default=None, allow_none=True)
    tree_model = OptionValue(load_default=None, allow_none=True)
    collection_finder_class = OptionValue(load_default=None, allow_none=True)
    dtd = OptionValue(load_default=None, allow_none=True)
    assertions_enabled = OptionValue(load_default=None, allow_none=True)
    expand_attribute_defaults = OptionValue(load_default=None, allow_none=True)
    allow_external_functions = OptionValue(load_default=None, allow_none=True)
    line_numbering = OptionValue(load_default=None, allow_none=True)
    message_emitter_class = OptionValue(load_default=None, allow_none=True)
    optimization_level = OptionValue(load_default=None, allow_none=True)
    output_uri_resolver_class = OptionValue(load_default=None, allow_none=True)
    uri_resolver_class = OptionValue(load_default=None, allow_none=True)
    output_validation = OptionValue(load_default=None, allow_none=True)
    strip_whitespace = OptionValue(load_default=None, allow_none=True)
    trace_compilation = OptionValue(load_default=None, allow_none=True)
    trace_external_functions = OptionValue(load_default=None, allow_none=True)
    relocatable = OptionValue(load_default=None, allow_none=True)

    def __init__(self, *, strict: bool = False, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.strict = strict

    @pre_load
    def resolve_aliases(self, data: Mapping[str, Any], **_: Any) -> dict[str, Any]:
        ranked: dict[str, tuple[int, Any]] = {}
        for key, value in data.items():
            canonical = canonical_option_key(key)
            if canonical is None:
                continue
            rank = _alias_rank(key, canonical)
            current = ranked.get(canonical)
            if current is not None:
                current_rank, current_value = current
                if value is None:
                    continue
                if current_value is not None and current_rank <= rank:
                    continue
            ranked[canonical] = (rank, value)
        return {key: value for key, (_, value) in ranked.items()}

    @validates_schema
    def check_choices(self, data: Mapping[str, Any], **_: Any) -> None:
        if not self.strict:
            return
        errors: dict[str, list[str]] = {}
        for name, choices in OPTION_CHOICES.items():
            value = data.get(name)
            if value is None or choices.parse(value) is not None:
                continue
            errors[kebab_case(name)] = [
                f"Must be one of: {', '.join(choices.choices())}."
            ]
        if errors:
            raise ValidationError(errors)

    @post_load
    def make(self, data: dict[str, Any], **_: Any) -> SaxonOptions:
        return SaxonOptions(**data)


def _flatten_messages(messages: Any) -> dict[str, list[str]]:
    if isinstance(messages, Mapping):
        flattened: dict[str, list[str]] = {}
        for key, value in messages.items():
            if isinstance(value, (list, tuple)):
                flattened[str(key)] = [str(item) for item in value]
            else:
                flattened[str(key)] = [str(value)]
        return flattened
    if isinstance(messages, (list, tuple)):
        return {"_schema": [str(item) for item in messages]}
    return {"_schema": [str(messages)]}


def build_saxon_options(
    payload: Mapping[str, Any] | None,
    *,
    strict: bool = False,
) -> Optional[SaxonOptions]:
    if payload is None:
        return None
    if not isinstance(payload, Mapping):
        raise OptionsError(
            "Options payload must be a mapping",
            code=ErrorCode.OPTIONS_NOT_OBJECT,
        )
    if not payload:
        return None
    try:
        options = SaxonOptionsSchema(strict=strict).load(dict(payload))
    except ValidationError as exc:
        errors = _flatten_messages(exc.messages)
        raise OptionsError(
            f"Invalid options: {', '.join(sorted(errors))}",
            code=ErrorCode.INVALID_OPTION_VALUE,
            errors=errors,
        ) from exc
    if not options.present_fields():
        return None
    return options


__all__ = [
    "OptionEnum",
    "Switch",
    "WarningsOption",
    "ValidationOption",
    "TreeModelOption",
    "DtdOption",
    "OutputValidationOption",
    "SaxonOptions",
    "SaxonOptionsSchema",
    "OptionValue",
    "OPTION_CHOICES",
    "OPTION_ALIASES",
    "SAXON_SHORT_NAMES",
    "canonical_option_key",
    "build_saxon_options",
]
