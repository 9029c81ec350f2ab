from .helpers import kebab_case, now_iso, truncate_string

__all__ = ["kebab_case", "now_iso", "truncate_string"]
