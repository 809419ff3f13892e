"""Tests for the six conversions between text, native paths and env strings."""

from __future__ import annotations

import logging
import os

import pytest

from pathstr import (
    REPLACEMENT_CHARACTER,
    EnvString,
    NativePath,
    env_string_to_native_path,
    env_string_to_text,
    native_path_to_env_string,
    native_path_to_text,
    text_to_env_string,
    text_to_native_path,
    to_text_exact,
)

SAMPLE_TEXTS = [
    "",
    "a",
    "a PathBuf",
    "relative/dir/file.txt",
    "café",
    "日本語/パス",
    "emoji 🐍 path",
    "tab\tand\nnewline",
    "nul\x00inside",
    REPLACEMENT_CHARACTER,
]


class TestConcreteScenarios:
    """The original demo's six conversion checks."""

    def test_native_path_to_text(self):
        pb = NativePath.new().joinpath("a PathBuf")
        assert native_path_to_text(pb) == "a PathBuf"

    def test_text_to_native_path(self):
        pb1 = text_to_native_path("test2 string")
        pb2 = NativePath.new().joinpath("test2 string")
        assert pb1 == pb2

    def test_native_path_to_env_string(self):
        pb = NativePath.new().joinpath("test3 string")
        oss1 = native_path_to_env_string(pb)
        oss2 = EnvString.new().append("test3 string")
        assert oss1 == oss2

    def test_env_string_to_native_path(self):
        oss = EnvString.new().append("test4 string")
        pb1 = env_string_to_native_path(oss)
        pb2 = NativePath.new().joinpath("test4 string")
        assert pb1 == pb2

    def test_env_string_to_text(self):
        oss = EnvString.new().append("test5 string")
        assert env_string_to_text(oss) == "test5 string"

    def test_text_to_env_string(self):
        oss1 = text_to_env_string("test6 string")
        oss2 = EnvString.new().append("test6 string")
        assert oss1 == oss2


class TestRoundTrips:
    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_text_through_native_path(self, text):
        assert native_path_to_text(text_to_native_path(text)) == text

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_text_through_env_string(self, text):
        assert env_string_to_text(text_to_env_string(text)) == text

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_valid_native_path_through_text(self, text):
        p = NativePath(text.encode("utf-8"))
        assert text_to_native_path(native_path_to_text(p)) == p

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_path_env_reinterpretation_is_inverse(self, text):
        p = NativePath(text.encode("utf-8"))
        e = EnvString(text.encode("utf-8"))
        assert env_string_to_native_path(native_path_to_env_string(p)) == p
        assert native_path_to_env_string(env_string_to_native_path(e)) == e

    def test_round_trip_is_idempotent(self):
        text = "déjà vu/again"
        once = native_path_to_text(text_to_native_path(text))
        twice = native_path_to_text(text_to_native_path(once))
        assert once == twice == text


class TestEmptyInputs:
    def test_empty_outputs_have_target_type(self):
        assert native_path_to_text(NativePath()) == ""
        assert env_string_to_text(EnvString()) == ""

        p = text_to_native_path("")
        assert isinstance(p, NativePath) and len(p) == 0

        e = text_to_env_string("")
        assert isinstance(e, EnvString) and not e

        assert native_path_to_env_string(NativePath()) == EnvString()
        assert env_string_to_native_path(EnvString()) == NativePath()


class TestLossySubstitution:
    def test_invalid_bytes_are_replaced(self):
        assert native_path_to_text(NativePath(b"abc\x80def")) == f"abc{REPLACEMENT_CHARACTER}def"
        assert env_string_to_text(EnvString(b"\xff\xfe")) == REPLACEMENT_CHARACTER * 2

    def test_only_invalid_bytes_do_not_raise(self, undecodable_bytes):
        junk = bytes(range(0x80, 0x100))
        text = native_path_to_text(NativePath(junk))
        assert text and set(text) == {REPLACEMENT_CHARACTER}

        mixed = env_string_to_text(EnvString(undecodable_bytes))
        assert mixed.startswith("dir" + REPLACEMENT_CHARACTER)
        assert REPLACEMENT_CHARACTER in mixed

    def test_valid_parts_survive(self, undecodable_bytes):
        text = native_path_to_text(NativePath(undecodable_bytes))
        assert "/na" in text
        assert "me" in text

    def test_lossy_decode_logs_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="pathstr.convert")
        native_path_to_text(NativePath(b"ok"))
        assert "lossy" not in caplog.text

        native_path_to_text(NativePath(b"bad\xff"))
        assert "lossy path decode" in caplog.text

    def test_lossy_decode_logs_substitution_count(self, caplog):
        caplog.set_level(logging.DEBUG, logger="pathstr.convert")
        env_string_to_text(EnvString(b"\xff\xff\xffabc"))
        assert "lossy env string decode: 3 replacement character(s)" in caplog.text

    def test_existing_sentinels_not_counted(self, caplog):
        caplog.set_level(logging.DEBUG, logger="pathstr.convert")
        native_path_to_text(NativePath(REPLACEMENT_CHARACTER.encode("utf-8") + b"\xff"))
        assert "lossy path decode: 1 replacement character(s)" in caplog.text


class TestLosslessDirection:
    def test_native_bytes_are_utf8(self):
        assert text_to_native_path("café").raw == "café".encode("utf-8")
        assert text_to_env_string("日本").raw == "日本".encode("utf-8")

    def test_lone_surrogate_does_not_raise(self):
        p = text_to_native_path("a\ud800b")
        assert p.raw == b"a\xed\xa0\x80b"
        back = native_path_to_text(p)
        assert back.startswith("a") and back.endswith("b")
        assert REPLACEMENT_CHARACTER in back

    def test_reinterpretation_keeps_bytes(self, undecodable_bytes):
        p = NativePath(undecodable_bytes)
        assert native_path_to_env_string(p).raw == undecodable_bytes
        assert env_string_to_native_path(EnvString(undecodable_bytes)).raw == undecodable_bytes


class TestExactText:
    def test_valid_text(self):
        assert to_text_exact(NativePath(b"plain")) == "plain"
        assert to_text_exact(EnvString("ü".encode("utf-8"))) == "ü"

    def test_invalid_text_returns_none(self, undecodable_bytes):
        assert to_text_exact(NativePath(undecodable_bytes)) is None
        assert to_text_exact(text_to_env_string("\udcff")) is None


class TestRoleDistinction:
    def test_path_and_env_string_never_equal(self):
        p = text_to_native_path("same")
        e = text_to_env_string("same")
        assert p.raw == e.raw
        assert p != e

    def test_env_string_is_not_path_like(self):
        with pytest.raises(TypeError):
            os.fspath(text_to_env_string("not a path"))

    def test_native_path_is_path_like(self):
        assert os.fspath(text_to_native_path("some/file")) == "some/file"
