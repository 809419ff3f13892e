# tests/conftest.py
# Isolate tests from any PATHSTR_* settings in the developer's environment.

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def clean_pathstr_env(monkeypatch):
    """Drop PATHSTR_* variables so settings start from their defaults."""
    for k in list(os.environ.keys()):
        if k.startswith("PATHSTR_"):
            monkeypatch.delenv(k, raising=False)
    yield


@pytest.fixture
def undecodable_bytes() -> bytes:
    """Bytes that are not valid UTF-8: lone continuation, invalid lead, truncated sequence."""
    return b"dir\x80/na\xffme\xe6\x97"
