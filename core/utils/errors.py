"""Custom exceptions for core logic."""

from __future__ import annotations


class UnknownBreakpointError(Exception):
    """Raised when a breakpoint group has no media-query template."""

    def __init__(self, message: str, *, breakpoint: str) -> None:
        super().__init__(message)
        self.breakpoint = breakpoint


class CssParseError(Exception):
    """Raised when assembled CSS text cannot be parsed back into rules."""

    def __init__(self, message: str, *, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
