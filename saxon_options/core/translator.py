"""Apply a :class:`SaxonOptions` record to an engine configuration.

Every option is translated on its own: an absent option leaves the matching
feature untouched, a present one overwrites it.  Values outside an option's
recognised set are ignored, except for the on/off switches where anything
other than ``"on"`` means off.  The first failure stops processing; features
applied before it stay applied.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

from ..exceptions import ConfigurationError, ErrorCode
from ..log_config import debug_verbose, verbose_log
from .engine import (
    CompilerHandle,
    EngineConfiguration,
    Feature,
    RecoveryPolicy,
    TreeModel,
    Validation,
)
from .utils import (
    DtdOption,
    OptionEnum,
    OutputValidationOption,
    SaxonOptions,
    Switch,
    TreeModelOption,
    ValidationOption,
    WarningsOption,
)

NativeT = TypeVar("NativeT")

_RECOVERY_POLICIES: Mapping[WarningsOption, RecoveryPolicy] = {
    WarningsOption.SILENT: RecoveryPolicy.RECOVER_SILENTLY,
    WarningsOption.RECOVER: RecoveryPolicy.RECOVER_WITH_WARNINGS,
    WarningsOption.FATAL: RecoveryPolicy.DO_NOT_RECOVER,
}

_SCHEMA_VALIDATION: Mapping[ValidationOption, Validation] = {
    ValidationOption.STRICT: Validation.STRICT,
    ValidationOption.LAX: Validation.LAX,
}

_TREE_MODELS: Mapping[TreeModelOption, TreeModel] = {
    TreeModelOption.LINKED: TreeModel.LINKED_TREE,
    TreeModelOption.TINY: TreeModel.TINY_TREE,
    TreeModelOption.TINY_CONDENSED: TreeModel.TINY_TREE_CONDENSED,
}

_DTD_VALIDATION: Mapping[DtdOption, Validation] = {
    DtdOption.ON: Validation.STRICT,
    DtdOption.OFF: Validation.SKIP,
    DtdOption.RECOVER: Validation.LAX,
}


def _is_on(value: str) -> bool:
    return Switch.parse(value) is Switch.ON


def _lookup(
    option: str,
    value: str,
    parsed: Optional[OptionEnum],
    table: Mapping[Any, NativeT],
) -> Optional[NativeT]:
    if parsed is None or parsed not in table:
        verbose_log("ignoring unrecognized value", f"{option}={value!r}")
        return None
    return table[parsed]


def _set_property(
    config: EngineConfiguration, option: str, feature: Feature, value: Any
) -> None:
    try:
        config.set_property(feature, value)
    except ConfigurationError as exc:
        exc.with_option(option)
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"engine rejected {value!r} for {feature.value}: {exc}",
            code=ErrorCode.PROPERTY_REJECTED,
            option=option,
            feature=feature.value,
        ) from exc
    debug_verbose("set property", f"{option} -> {feature.value}={value!r}")


def _get_instance(config: EngineConfiguration, option: str, class_name: str) -> object:
    try:
        instance = config.get_instance(class_name)
    except ConfigurationError as exc:
        exc.with_option(option)
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"cannot instantiate '{class_name}': {exc}",
            code=ErrorCode.CLASS_NOT_INSTANTIABLE,
            option=option,
        ) from exc
    verbose_log("instantiated class", f"{option} -> {class_name}")
    return instance


def prepare_saxon_configuration(
    config: EngineConfiguration,
    options: Optional[SaxonOptions],
) -> None:
    """Apply the processor-level options to ``config``.

    Raises :class:`ConfigurationError` when a named class cannot be
    instantiated or the engine rejects a value.
    """

    if options is None:
        return

    # Parsing
    value = options.xinclude
    if value is not None:
        _set_property(config, "xinclude", Feature.XINCLUDE, _is_on(value))

    value = options.warnings
    if value is not None:
        policy = _lookup(
            "warnings", value, WarningsOption.parse(value), _RECOVERY_POLICIES
        )
        if policy is not None:
            _set_property(config, "warnings", Feature.RECOVERY_POLICY, policy)

    value = options.validation
    if value is not None:
        mode = _lookup(
            "validation", value, ValidationOption.parse(value), _SCHEMA_VALIDATION
        )
        if mode is not None:
            _set_property(config, "validation", Feature.SCHEMA_VALIDATION, mode)

    value = options.tree_model
    if value is not None:
        model = _lookup("tree-model", value, TreeModelOption.parse(value), _TREE_MODELS)
        if model is not None:
            _set_property(config, "tree-model", Feature.TREE_MODEL, model)

    value = options.collection_finder_class
    if value is not None:
        finder = _get_instance(config, "collection-finder-class", value)
        _set_property(
            config, "collection-finder-class", Feature.COLLECTION_FINDER, finder
        )

    value = options.dtd
    if value is not None:
        mode = _lookup("dtd", value, DtdOption.parse(value), _DTD_VALIDATION)
        if mode is not None:
            _set_property(config, "dtd", Feature.DTD_VALIDATION, mode)

    # Compilation
    value = options.assertions_enabled
    if value is not None:
        _set_property(
            config, "assertions-enabled", Feature.ENABLE_ASSERTIONS, _is_on(value)
        )

    value = options.expand_attribute_defaults
    if value is not None:
        _set_property(
            config,
            "expand-attribute-defaults",
            Feature.EXPAND_ATTRIBUTE_DEFAULTS,
            _is_on(value),
        )

    value = options.allow_external_functions
    if value is not None:
        _set_property(
            config,
            "allow-external-functions",
            Feature.ALLOW_EXTERNAL_FUNCTIONS,
            _is_on(value),
        )

    value = options.line_numbering
    if value is not None:
        _set_property(config, "line-numbering", Feature.LINE_NUMBERING, _is_on(value))

    value = options.message_emitter_class
    if value is not None:
        _set_property(
            config, "message-emitter-class", Feature.MESSAGE_EMITTER_CLASS, value
        )

    value = options.optimization_level
    if value is not None:
        _set_property(config, "optimization-level", Feature.OPTIMIZATION_LEVEL, value)

    value = options.output_uri_resolver_class
    if value is not None:
        resolver = _get_instance(config, "output-uri-resolver-class", value)
        _set_property(
            config, "output-uri-resolver-class", Feature.OUTPUT_URI_RESOLVER, resolver
        )

    value = options.uri_resolver_class
    if value is not None:
        _set_property(config, "uri-resolver-class", Feature.URI_RESOLVER_CLASS, value)

    value = options.output_validation
    if value is not None:
        recover = OutputValidationOption.parse(value) is OutputValidationOption.RECOVER
        _set_property(
            config, "output-validation", Feature.VALIDATION_WARNINGS, recover
        )
        _set_property(
            config, "output-validation", Feature.VALIDATION_COMMENTS, recover
        )

    value = options.strip_whitespace
    if value is not None:
        _set_property(config, "strip-whitespace", Feature.STRIP_WHITESPACE, value)

    # Tracing
    if options.trace_compilation is not None:
        _set_property(config, "trace-compilation", Feature.COMPILE_WITH_TRACING, True)

    value = options.trace_external_functions
    if value is not None:
        _set_property(
            config,
            "trace-external-functions",
            Feature.TRACE_EXTERNAL_FUNCTIONS,
            _is_on(value),
        )


def configure_xslt_compiler(
    compiler: CompilerHandle,
    options: Optional[SaxonOptions],
) -> None:
    """Apply the compiler-level options to ``compiler``.

    The compiler must come from a configuration already prepared with
    :func:`prepare_saxon_configuration`; this is not checked.
    """

    if options is None:
        return
    value = options.relocatable
    if value is None:
        return
    relocatable = _is_on(value)
    try:
        compiler.set_relocatable(relocatable)
    except ConfigurationError as exc:
        exc.with_option("relocatable")
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"compiler rejected relocatable={relocatable}: {exc}",
            code=ErrorCode.PROPERTY_REJECTED,
            option="relocatable",
        ) from exc
    debug_verbose("set relocatable", relocatable)


__all__ = ["prepare_saxon_configuration", "configure_xslt_compiler"]
