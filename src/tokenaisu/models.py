"""Shared data models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from tokenaisu.core.options import TokenizerOptions, compile_patterns


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class TokenizeRequest(BaseModel):
    """Tokenization request payload used by both CLI and API."""

    lines: list[str]
    language: str = Field(default="en", min_length=2)
    aggressive_dash_splits: bool = False
    escape: bool = False
    protected_patterns: list[str] = Field(default_factory=list)

    @field_validator("protected_patterns")
    @classmethod
    def _patterns_compile(cls, value: list[str]) -> list[str]:
        compile_patterns(tuple(value))
        return value

    def options(self) -> TokenizerOptions:
        return TokenizerOptions(
            aggressive_dash_splits=self.aggressive_dash_splits,
            escape=self.escape,
            protected_patterns=tuple(self.protected_patterns),
        )


class TokenizeResponse(BaseModel):
    """Tokenized document, one entry per input line."""

    language: str
    lines: list[str]
    line_count: int = Field(ge=0)
    token_count: int = Field(ge=0)

    @classmethod
    def from_lines(cls, language: str, lines: list[str]) -> TokenizeResponse:
        return cls(
            language=language,
            lines=lines,
            line_count=len(lines),
            token_count=sum(len(line.split()) for line in lines),
        )
