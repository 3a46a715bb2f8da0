from openrouter_env.validate import KEY_PREFIX, has_key_prefix, mask_key


def test_has_key_prefix():
    assert has_key_prefix("sk-or-v1-abc123")
    assert has_key_prefix(KEY_PREFIX)
    assert not has_key_prefix("sk-abc123")
    assert not has_key_prefix("SK-OR-V1-abc123")
    assert not has_key_prefix(" sk-or-v1-abc123")
    assert not has_key_prefix("")
    assert not has_key_prefix(None)


def test_mask_key_keeps_prefix_and_tail():
    key = "sk-or-v1-0123456789abcdef"
    masked = mask_key(key)
    assert masked == "sk-or-v1-...cdef"
    assert "0123456789" not in masked


def test_mask_key_short_or_empty():
    assert mask_key("sk-or-v1-abc123") == "***"
    assert mask_key("short") == "***"
    assert mask_key("") == ""
    assert mask_key(None) == ""


def test_mask_key_without_prefix():
    assert mask_key("plainsecretvalue") == "...alue"


def test_has_key_prefix_is_literal():
    assert not has_key_prefix("sk-or-v1")
    assert not has_key_prefix("sk.or.v1.abc123")
    assert not has_key_prefix("xsk-or-v1-abc123")
