"""Sanctifier: Static analysis for Soroban smart-contract sources."""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Sanctifier contributors"
__license__ = "MIT"
