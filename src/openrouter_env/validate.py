KEY_PREFIX = "sk-or-v1-"

# keep at least this many hidden characters when masking
_MIN_HIDDEN = 4
_VISIBLE_TAIL = 4


def has_key_prefix(key) -> bool:
    if not key or not isinstance(key, str):
        return False
    return key.startswith(KEY_PREFIX)


def mask_key(key) -> str:
    """Redact an API key for log lines: keep the prefix and the last 4 chars."""
    if not key:
        return ""
    head = KEY_PREFIX if has_key_prefix(key) else ""
    body = key[len(head):]
    if len(body) < _VISIBLE_TAIL + _MIN_HIDDEN:
        return "***"
    return f"{head}...{body[-_VISIBLE_TAIL:]}"
