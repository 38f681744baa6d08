"""Shared fixtures for sanctifier tests."""

from __future__ import annotations

from typing import Callable, Sequence

import pytest

from sanctifier.core.analyzer import Analyzer

StructBuilder = Callable[..., str]


def build_struct_source(
    name: str,
    field_types: Sequence[str],
    *,
    tagged: bool = True,
    tuple_struct: bool = False,
) -> str:
    """Render a Rust struct declaration with one field per type."""
    header = "#[contracttype]\n" if tagged else ""
    if tuple_struct:
        body = ", ".join(f"pub {ty}" for ty in field_types)
        return f"{header}pub struct {name}({body});\n"
    lines = "".join(f"    pub f{i}: {ty},\n" for i, ty in enumerate(field_types))
    return f"{header}pub struct {name} {{\n{lines}}}\n"


@pytest.fixture
def struct_source() -> StructBuilder:
    """Return a builder for ``#[contracttype]`` struct declarations."""
    return build_struct_source


@pytest.fixture
def analyzer() -> Analyzer:
    """A non-strict analyzer with the default 64000 byte limit."""
    return Analyzer(strict_mode=False)


@pytest.fixture
def strict_analyzer() -> Analyzer:
    """A strict analyzer with the default 64000 byte limit."""
    return Analyzer(strict_mode=True)
