from __future__ import annotations

import pytest

from cnfchart import GrammarLoader, Logger, Solver

@pytest.fixture(scope="session")
def palindromes():
    return GrammarLoader.run_resource("palindromes.txt")

@pytest.fixture(scope="session")
def balanced():
    return GrammarLoader.run_resource("balanced.txt")

@pytest.fixture
def logger(tmp_path):
    return Logger("cnfchart", "test", log_level="debug", log_dir=str(tmp_path))

@pytest.fixture
def solver(palindromes):
    return Solver(palindromes)
