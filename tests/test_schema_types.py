"""Tests for schema flattening."""

from __future__ import annotations

import pytest

from native_module_codegen.errors import SchemaShapeError
from native_module_codegen.schema_types import Module, PromiseTypeAnnotation, Schema
from tests.conftest import new_method


def test_native_modules_flattens_groups():
    schema = Schema(
        {
            "B": {"Second": Module("Second")},
            "View": None,
            "A": {"First": Module("First"), "Third": Module("Third")},
        }
    )

    assert sorted(schema.native_modules()) == ["First", "Second", "Third"]


def test_duplicate_module_names_are_rejected():
    schema = Schema({"A": {"Shared": Module("Shared")}, "B": {"Shared": Module("Shared")}})

    with pytest.raises(SchemaShapeError, match='"Shared" is declared by both "A" and "B"'):
        schema.native_modules()


def test_returns_promise():
    assert new_method("load", returns=PromiseTypeAnnotation()).returns_promise
    assert not new_method("load").returns_promise
