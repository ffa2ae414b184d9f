# tests/conftest.py
# This file is part of the CNF Normalizer - Propositional Formula Rewriting
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the CNF normalizer tests.

This module puts the project root on the import path and provides the atoms
and sample formulas that most test modules build on.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from cnf import Atom, And, Iff, Implies, Not, Or  # noqa: E402
from utils.logger import LogLevel, set_log_level  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep the global logger at its default level around every test."""
    set_log_level(LogLevel.WARNING)
    yield
    set_log_level(LogLevel.WARNING)


@pytest.fixture
def sample_formulas():
    """Provide a mix of formulas touching every connective.

    Returns:
        List of formulas over the atoms P, Q, R and S
    """
    p, q, r, s = Atom("P"), Atom("Q"), Atom("R"), Atom("S")
    return [
        p,
        Not(Not(p)),
        Implies(p, q),
        Not(And(p, q)),
        Implies(And(p, Not(q)), r),
        Iff(Or(p, q), r),
        Or(And(p, q), And(r, s)),
        Not(Iff(p, Implies(q, Not(r)))),
        And(Or(p, Not(Or(q, r))), Implies(s, And(p, Not(s)))),
        Iff(Iff(p, q), Iff(r, s)),
    ]
