from __future__ import annotations

import pytest

from jsurl import CodecOptions, DepthLimitExceeded, codec_options_scope, deserialize
from jsurl.options import (
    DEFAULT_MAX_DEPTH,
    MAX_DEPTH_ENV,
    codec_options_override,
    env_codec_options,
    resolve_codec_options,
)


def test_codec_options_defaults() -> None:
    assert CodecOptions().max_depth == DEFAULT_MAX_DEPTH


@pytest.mark.parametrize("max_depth", [0, -1, True, "3", 2.0])
def test_codec_options_rejects_invalid_depth(max_depth: object) -> None:
    with pytest.raises(ValueError):
        CodecOptions(max_depth=max_depth)  # type: ignore[arg-type]


def test_resolve_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(MAX_DEPTH_ENV, raising=False)
    assert resolve_codec_options() == CodecOptions()


def test_env_codec_options(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_DEPTH_ENV, " 12 ")
    assert env_codec_options() == CodecOptions(max_depth=12)
    monkeypatch.setenv(MAX_DEPTH_ENV, "")
    assert env_codec_options() is None


@pytest.mark.parametrize("raw", ["deep", "0", "-3"])
def test_env_codec_options_rejects_bad_values(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv(MAX_DEPTH_ENV, raw)
    with pytest.raises(ValueError):
        env_codec_options()


def test_resolution_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_DEPTH_ENV, "5")
    assert resolve_codec_options() == CodecOptions(max_depth=5)
    with codec_options_scope(CodecOptions(max_depth=7)):
        assert resolve_codec_options() == CodecOptions(max_depth=7)
        assert resolve_codec_options(CodecOptions(max_depth=9)) == CodecOptions(
            max_depth=9
        )
    assert codec_options_override() is None
    assert resolve_codec_options() == CodecOptions(max_depth=5)


def test_scope_applies_to_deserialize(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(MAX_DEPTH_ENV, raising=False)
    text = "~(~(~1))"
    with codec_options_scope(CodecOptions(max_depth=1)):
        with pytest.raises(DepthLimitExceeded):
            deserialize(text)
    assert deserialize(text) == [[1]]


def test_env_applies_to_deserialize(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_DEPTH_ENV, "1")
    with pytest.raises(DepthLimitExceeded):
        deserialize("~(~(~1))")
