"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_program() -> str:
    """Generate a large sc program (~200KB)."""
    blocks = []
    for i in range(2000):
        blocks.append(f"""
// block {i}
var n{i} int
n{i} = {i} * 3 + 1
for n{i} != 1 {{
    if n{i} / 2 * 2 == n{i} {{ n{i} = n{i} / 2 }} else {{ n{i} = 3 * n{i} + 1 }}
}}
/* done with
   block {i} */
""")
    return "".join(blocks)


@pytest.fixture
def error_heavy_program() -> str:
    """Program where every other lexeme is an error."""
    return "x ? y & z } " * 5000
