"""Option records and their construction from raw payloads."""

from .options import (
    DtdOption,
    OptionEnum,
    OutputValidationOption,
    SaxonOptions,
    SaxonOptionsSchema,
    Switch,
    TreeModelOption,
    ValidationOption,
    WarningsOption,
    build_saxon_options,
)

__all__ = [
    "build_saxon_options",
    "SaxonOptions",
    "SaxonOptionsSchema",
    "OptionEnum",
    "Switch",
    "WarningsOption",
    "ValidationOption",
    "TreeModelOption",
    "DtdOption",
    "OutputValidationOption",
]
