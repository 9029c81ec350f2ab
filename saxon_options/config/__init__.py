"""Runtime settings read from the process environment."""

from .environment import LoggingEnvironmentConfig, get_logging_environment

__all__ = ["LoggingEnvironmentConfig", "get_logging_environment"]
