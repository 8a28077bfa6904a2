from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
import os
from typing import Iterator

DEFAULT_MAX_DEPTH = 256
MAX_DEPTH_ENV = "JSURL_MAX_DEPTH"


@dataclass(frozen=True)
class CodecOptions:
    """Parser limits.

    ``max_depth`` bounds how many containers may be nested inside one
    another; the parser recurses once per level.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")


_CODEC_OPTIONS_OVERRIDE: ContextVar[CodecOptions | None] = ContextVar(
    "jsurl_codec_options_override",
    default=None,
)


def codec_options_override() -> CodecOptions | None:
    return _CODEC_OPTIONS_OVERRIDE.get()


def set_codec_options_override(
    options: CodecOptions | None,
) -> Token[CodecOptions | None]:
    return _CODEC_OPTIONS_OVERRIDE.set(options)


def reset_codec_options_override(token: Token[CodecOptions | None]) -> None:
    _CODEC_OPTIONS_OVERRIDE.reset(token)


@contextmanager
def codec_options_scope(options: CodecOptions | None) -> Iterator[None]:
    token = set_codec_options_override(options)
    try:
        yield
    finally:
        reset_codec_options_override(token)


def env_codec_options() -> CodecOptions | None:
    raw = os.getenv(MAX_DEPTH_ENV, "").strip()
    if not raw:
        return None
    try:
        max_depth = int(raw)
    except ValueError:
        raise ValueError(f"{MAX_DEPTH_ENV} must be an integer, got {raw!r}") from None
    return CodecOptions(max_depth=max_depth)


def resolve_codec_options(explicit: CodecOptions | None = None) -> CodecOptions:
    """Pick the options for one codec call.

    Precedence: explicit argument, then ``codec_options_scope(...)``, then
    ``JSURL_MAX_DEPTH``, then defaults.
    """
    if explicit is not None:
        return explicit
    override = codec_options_override()
    if override is not None:
        return override
    from_env = env_codec_options()
    if from_env is not None:
        return from_env
    return CodecOptions()
