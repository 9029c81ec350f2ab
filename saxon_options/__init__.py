"""Apply Saxon-style option sets to an XML engine configuration."""

from .core import (  # noqa: F401
    ClassResolver,
    CompilerHandle,
    EngineConfiguration,
    Feature,
    ImportlibClassResolver,
    PropertyConfiguration,
    RecoveryPolicy,
    SaxonOptions,
    TreeModel,
    Validation,
    build_saxon_options,
    configure_xslt_compiler,
    prepare_saxon_configuration,
)
from .exceptions import ConfigurationError, ErrorCode, OptionsError  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "prepare_saxon_configuration",
    "configure_xslt_compiler",
    "build_saxon_options",
    "SaxonOptions",
    "EngineConfiguration",
    "CompilerHandle",
    "ClassResolver",
    "ImportlibClassResolver",
    "PropertyConfiguration",
    "Feature",
    "RecoveryPolicy",
    "TreeModel",
    "Validation",
    "ConfigurationError",
    "OptionsError",
    "ErrorCode",
]
