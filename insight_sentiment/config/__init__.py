"""Configuration package."""

from insight_sentiment.config.config import (
    load_env_variables,
    get_env_variable,
    get_optional_env_variable,
    get_env_int,
    get_env_float,
)

__all__ = [
    "load_env_variables",
    "get_env_variable",
    "get_optional_env_variable",
    "get_env_int",
    "get_env_float",
]
