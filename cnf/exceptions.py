# cnf/exceptions.py
# This file is part of the CNF Normalizer - Propositional Formula Rewriting
#
# Custom exceptions for formula normalization and evaluation

"""Domain-specific exceptions for propositional formula processing.

This module defines exceptions that can be raised while normalizing or
evaluating formulas. Normalization is a total function over well-formed input,
so every exception here signals either a violated pass precondition or an
exhausted resource budget. They are reported to the caller, never recovered
from internally.
"""


class FormulaError(RuntimeError):
    """Base class for every error raised by the normalizer."""

    pass


class UnsupportedFormulaError(FormulaError):
    """Exception raised when a pass receives a node shape it does not accept.

    Negation normalization refuses ``Implies``/``Iff`` nodes, distribution
    additionally refuses a ``Not`` wrapping anything but an atom. Running the
    passes out of order is a programming error and surfaces here instead of
    yielding a silently wrong formula.

    Attributes:
        node: The offending sub-formula
        stage: Name of the pass that rejected it
    """

    def __init__(self, node, stage: str):
        self.node = node
        self.stage = stage
        super().__init__(
            f"{stage} cannot handle {type(node).__name__} node: {node}"
        )


class ResourceExhaustedError(FormulaError):
    """Exception raised when distribution would exceed its clause budget.

    Attributes:
        requested: Number of clauses the expansion step would have built
        limit: The configured budget
    """

    def __init__(self, requested: int, limit: int):
        self.requested = requested
        self.limit = limit
        super().__init__(
            f"Distribution requires {requested} clauses, budget is {limit}"
        )


class UnassignedAtomError(FormulaError):
    """Exception raised when evaluation meets an atom without a truth value."""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"No truth value assigned to atom {symbol!r}")
