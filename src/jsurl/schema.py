from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from jsurl.options import DEFAULT_MAX_DEPTH, CodecOptions


class CodecConfigDTO(BaseModel):
    """The ``[codec]`` table of ``jsurl.toml``."""

    model_config = ConfigDict(extra="forbid")

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, gt=0)

    def to_options(self) -> CodecOptions:
        return CodecOptions(max_depth=self.max_depth)
