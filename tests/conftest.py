import pytest

OPENROUTER_VARS = (
    "OPENROUTER_API_KEY",
    "OPENROUTER_MODEL",
    "OPENROUTER_HTTP_REFERER",
    "OPENROUTER_APP_TITLE",
)


@pytest.fixture(autouse=True)
def clean_openrouter_env(monkeypatch):
    """Start every test without any OPENROUTER_* variables.

    Setting before deleting makes monkeypatch restore the original state,
    including variables a test loads from a dotenv file.
    """
    for name in OPENROUTER_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
