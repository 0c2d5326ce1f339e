"""Errors raised while generating native module headers."""

from __future__ import annotations


class CodegenError(Exception):
    """Base error for header generation."""


class UnsupportedTypeError(CodegenError):
    """Raised when a type annotation has no Objective-C counterpart in the position it is used."""


class SchemaShapeError(CodegenError):
    """Raised when the input schema is structurally malformed (duplicate names, missing keys)."""
