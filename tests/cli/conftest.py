"""Shared fixtures for CLI tests.

Provides temporary contract crates with clean sources, sources with
abort-prone calls, and sources with oversized ``#[contracttype]`` structs.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

CLEAN_SOURCE = """\
use soroban_sdk::{contract, contractimpl, contracttype, Address, Env};

#[contracttype]
pub struct Balance {
    pub owner: Address,
    pub amount: i128,
}

#[contract]
pub struct Token;

#[contractimpl]
impl Token {
    pub fn add(a: u32, b: u32) -> u32 {
        a + b
    }
}
"""

UNSAFE_SOURCE = """\
use soroban_sdk::{Env, Symbol};

pub fn read(env: Env, key: Symbol) -> u32 {
    let value: Option<u32> = env.storage().instance().get(&key);
    if value.is_none() {
        panic!("missing");
    }
    value.unwrap()
}
"""


def _oversized_source() -> str:
    fields = "".join(f"    pub history_{i}: Vec<u64>,\n" for i in range(300))
    return f"#[contracttype]\npub struct Ledger {{\n{fields}}}\n"


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def clean_crate(tmp_path: Path) -> Path:
    """A crate whose only source has no findings."""
    src = tmp_path / "clean" / "src"
    src.mkdir(parents=True)
    (src / "lib.rs").write_text(CLEAN_SOURCE)
    return tmp_path / "clean"


@pytest.fixture
def unsafe_crate(tmp_path: Path) -> Path:
    """A crate with one ``panic!`` and one ``.unwrap()``."""
    src = tmp_path / "unsafe" / "src"
    src.mkdir(parents=True)
    (src / "lib.rs").write_text(UNSAFE_SOURCE)
    return tmp_path / "unsafe"


@pytest.fixture
def oversized_crate(tmp_path: Path) -> Path:
    """A crate with a 38400 byte tagged struct (over the strict threshold only)."""
    src = tmp_path / "oversized" / "src"
    src.mkdir(parents=True)
    (src / "lib.rs").write_text(_oversized_source())
    return tmp_path / "oversized"


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """A directory with no Rust sources."""
    path = tmp_path / "empty"
    path.mkdir()
    (path / "README.md").write_text("# nothing here\n")
    return path
