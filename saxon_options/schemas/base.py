"""Base Marshmallow schema for option payloads."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema  # type: ignore[import-not-found]

from ..utils import kebab_case


class SaxonOptionsBaseSchema(Schema):
    """Option schema reading kebab-case keys and dropping names it does not know."""

    class Meta:
        ordered = True
        unknown = EXCLUDE

    def on_bind_field(self, field_name: str, field_obj: Any) -> None:  # type: ignore[override]
        super().on_bind_field(field_name, field_obj)
        # Option files spell names like "tree-model"; attributes stay snake_case.
        if not getattr(field_obj, "data_key", None):
            field_obj.data_key = kebab_case(field_name)


__all__ = ["SaxonOptionsBaseSchema"]
