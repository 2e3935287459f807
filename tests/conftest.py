"""
Shared fixtures. The rank table is built into data/ on first use (takes a
while once), then loaded a single time for the whole session.
"""

import pytest

from poker_equity.lookup import load_rank_index
from poker_equity.table_build import default_table_path


@pytest.fixture(scope="session")
def rank_index():
    return load_rank_index()


@pytest.fixture(scope="session")
def table_bytes(rank_index):
    with open(default_table_path(), "rb") as f:
        return f.read()
