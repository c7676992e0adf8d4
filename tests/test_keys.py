from __future__ import annotations

import re
from pathlib import Path

import pytest

from persistence import MAX_USER_KEY_LENGTH, InvalidUserKey, sanitize_user, user_key
from persistence.keys import user_file

SAFE_RE = re.compile(r"^[A-Za-z0-9_-]*$")

RAW_IDENTIFIERS = [
    "alice",
    "Bob_the-Builder42",
    "../../etc/passwd",
    "..\\..\\windows\\system32",
    "a/b/c",
    "user name with spaces",
    "ünïcødé-名前-😀",
    "line\nbreak\x00nul\ttab",
    ".hidden",
    "",
    "x" * 500,
    "-" * 70 + "tail",
]


@pytest.mark.parametrize("raw", RAW_IDENTIFIERS)
def test_sanitize_only_keeps_safe_characters(raw):
    key = sanitize_user(raw)
    assert SAFE_RE.match(key)
    assert len(key) <= MAX_USER_KEY_LENGTH


@pytest.mark.parametrize("raw", RAW_IDENTIFIERS)
def test_sanitize_is_idempotent(raw):
    once = sanitize_user(raw)
    assert sanitize_user(once) == once


def test_sanitize_examples():
    assert sanitize_user("../../etc/passwd") == "etcpasswd"
    assert sanitize_user("ünïcødé-名前") == "ncd-"
    assert sanitize_user("x" * 100) == "x" * 64
    # distinct identifiers may collide
    assert sanitize_user("a.b") == sanitize_user("ab")


def test_sanitize_stringifies_non_strings():
    assert sanitize_user(12345) == "12345"


def test_user_key_rejects_identifiers_with_no_safe_characters():
    with pytest.raises(InvalidUserKey):
        user_key("!!!///...")
    with pytest.raises(InvalidUserKey):
        user_key("")
    assert user_key("al!ce") == "alce"


def test_user_file_stays_inside_base_dir(tmp_path: Path):
    p = user_file(tmp_path, sanitize_user("../../escape"))
    assert p.parent == tmp_path
    assert p.name == "escape.json"


@pytest.mark.parametrize("bad", ["", "../x", "a/b", "x" * 65, "with space"])
def test_user_file_rejects_unsanitized_keys(tmp_path: Path, bad):
    with pytest.raises(InvalidUserKey):
        user_file(tmp_path, bad)
