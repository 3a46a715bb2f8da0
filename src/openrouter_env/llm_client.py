"""OpenRouter credentials from the environment and an OpenAI client pointed at it.

``validate_openrouter_env`` is the single place that reads and checks the
environment; ``create_client`` and ``get_model`` both go through it so a bad
key surfaces the same error whichever entry point is used first.
"""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv
from openai import OpenAI

from .validate import KEY_PREFIX, has_key_prefix, mask_key

logger = logging.getLogger(__name__)

BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "anthropic/claude-3.5-sonnet"
KEYS_URL = "https://openrouter.ai/keys"

API_KEY_VAR = "OPENROUTER_API_KEY"
MODEL_VAR = "OPENROUTER_MODEL"
REFERER_VAR = "OPENROUTER_HTTP_REFERER"
APP_TITLE_VAR = "OPENROUTER_APP_TITLE"


class ConfigurationError(RuntimeError):
    pass


class MissingKeyError(ConfigurationError):
    pass


class InvalidKeyFormatError(ConfigurationError):
    pass


@dataclass(frozen=True)
class OpenRouterEnv:
    api_key: str
    model: str

    def __repr__(self) -> str:
        return f"OpenRouterEnv(api_key={mask_key(self.api_key)!r}, model={self.model!r})"


def validate_openrouter_env() -> OpenRouterEnv:
    """Read and check ``OPENROUTER_API_KEY`` / ``OPENROUTER_MODEL``.

    Raises MissingKeyError when the key is unset or empty and
    InvalidKeyFormatError when it lacks the ``sk-or-v1-`` prefix.
    """
    api_key = os.getenv(API_KEY_VAR)
    model = os.getenv(MODEL_VAR) or DEFAULT_MODEL

    if not api_key:
        raise MissingKeyError(
            f"{API_KEY_VAR} environment variable is required. "
            "Please set it in your .env.local file or environment variables. "
            f"Get your API key from: {KEYS_URL}"
        )

    if not has_key_prefix(api_key):
        raise InvalidKeyFormatError(
            f"Invalid {API_KEY_VAR} format. "
            f'OpenRouter API keys should start with "{KEY_PREFIX}". '
            f"Please check your API key from: {KEYS_URL}"
        )

    return OpenRouterEnv(api_key=api_key, model=model)


def _identification_headers() -> dict:
    headers = {}
    referer = os.getenv(REFERER_VAR)
    title = os.getenv(APP_TITLE_VAR)
    if referer:
        headers["HTTP-Referer"] = referer
    if title:
        headers["X-Title"] = title
    return headers


def create_client(factory=None, **client_kwargs):
    """Build a client for OpenRouter.

    ``factory`` defaults to :class:`openai.OpenAI`; it is called once with
    ``api_key`` and ``base_url`` plus any extra ``client_kwargs``.
    """
    env = validate_openrouter_env()
    if factory is None:
        factory = OpenAI

    headers = _identification_headers()
    if headers:
        existing = client_kwargs.get("default_headers")
        if existing is not None:
            headers = {**dict(existing), **headers}
        client_kwargs["default_headers"] = headers

    # the validated key and the gateway URL always win
    for name in ("api_key", "base_url"):
        if client_kwargs.pop(name, None) is not None:
            logger.debug("Ignoring caller-supplied %s for OpenRouter client", name)

    client = factory(api_key=env.api_key, base_url=BASE_URL, **client_kwargs)
    logger.debug("Created OpenRouter client (key=%s, model=%s)", mask_key(env.api_key), env.model)
    return client


def get_model() -> str:
    return validate_openrouter_env().model


def load_env(path=".env.local") -> bool:
    # existing process variables win over the file
    return load_dotenv(path, override=False)


def chat(messages, *, max_tokens=256, temperature=0.7, client=None):
    if client is None:
        client = create_client()
    model = get_model()
    resp = client.chat.completions.create(
        model=model,
        messages=messages,
        max_tokens=max_tokens,
        temperature=temperature,
    )
    if not resp.choices:
        return ""
    return resp.choices[0].message.content or ""
