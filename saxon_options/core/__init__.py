"""Translation of option records into engine configuration calls."""

from .utils import SaxonOptions, build_saxon_options
from .engine import (
    ClassResolver,
    CompilerHandle,
    EngineConfiguration,
    Feature,
    RecoveryPolicy,
    TreeModel,
    Validation,
)
from .resolver import ImportlibClassResolver, PropertyConfiguration
from .translator import configure_xslt_compiler, prepare_saxon_configuration

__all__ = [
    "SaxonOptions",
    "build_saxon_options",
    "ClassResolver",
    "CompilerHandle",
    "EngineConfiguration",
    "Feature",
    "RecoveryPolicy",
    "TreeModel",
    "Validation",
    "ImportlibClassResolver",
    "PropertyConfiguration",
    "prepare_saxon_configuration",
    "configure_xslt_compiler",
]
