from .llm_client import (
    BASE_URL,
    DEFAULT_MODEL,
    ConfigurationError,
    InvalidKeyFormatError,
    MissingKeyError,
    OpenRouterEnv,
    chat,
    create_client,
    get_model,
    load_env,
    validate_openrouter_env,
)

__all__ = [
    "BASE_URL",
    "DEFAULT_MODEL",
    "ConfigurationError",
    "InvalidKeyFormatError",
    "MissingKeyError",
    "OpenRouterEnv",
    "chat",
    "create_client",
    "get_model",
    "load_env",
    "validate_openrouter_env",
]
