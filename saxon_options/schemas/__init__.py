from .base import SaxonOptionsBaseSchema

__all__ = ["SaxonOptionsBaseSchema"]
