# cnf/__init__.py
# This file is part of the CNF Normalizer - Propositional Formula Rewriting
#
# Formula construction, normalization and rendering for propositional logic

"""Propositional formula normalization into Conjunctive Normal Form.

Formulas are built programmatically from Atom, Not, Implies, Iff, And and Or
nodes and rewritten by a fixed pipeline of three pure passes:

    1. Connective elimination: Implies and Iff become Not/And/Or
    2. Negation normalization: double negation and De Morgan's laws push
       every Not onto an atom
    3. Distribution: Or is distributed over And until the tree is an And of
       clauses

Each pass builds a fresh tree, so the input and every intermediate result stay
valid and can be inspected independently.

Core Functions:
    normalize: Complete pipeline into CNF
    normalize_dnf: The dual pipeline into Disjunctive Normal Form
    render: Human-readable rendering of a formula

Example:
    >>> from cnf import Atom, And, Not, Implies, normalize, render
    >>> render(normalize(Implies(And(Atom("P"), Not(Atom("Q"))), Atom("R"))))
    '(~(P) OR Q OR R)'
"""

from typing import Optional

from .ast_nodes import Formula, Atom, Not, Implies, Iff, And, Or, is_literal
from .exceptions import (
    FormulaError,
    UnsupportedFormulaError,
    ResourceExhaustedError,
    UnassignedAtomError,
)
from .eliminator import ConnectiveEliminator, eliminate_connectives
from .nnf_transformer import NegationNormalizer, push_negation
from .distributor import ClauseDistributor, NormalForm, distribute, wrap_root
from .semantics import evaluate, atoms, equivalent, is_nnf, is_cnf, clause_set
from utils.logger import get_logger


def render(formula: Formula) -> str:
    """Render a formula as text.

    Atoms render as their symbol, negation as ``~(x)``, implication and
    biconditional as parenthesized infix ``->``/``<->``, and And/Or as their
    children joined by `` AND ``/`` OR `` inside one pair of parentheses.
    """
    return str(formula)


def _run_pipeline(
    formula: Formula,
    form: NormalForm,
    max_clauses: Optional[int],
    strict_root: bool,
) -> Formula:
    logger = get_logger()
    debug = logger.is_debug_enabled()
    if debug:
        logger.debug(f"Normalizing to {form.name}: {render(formula)}")

    try:
        result = eliminate_connectives(formula)
        result = push_negation(result)
        result = distribute(result, form, max_clauses)
    except FormulaError as exc:
        logger.debug(f"{form.name} normalization failed: {type(exc).__name__}: {exc}")
        raise

    if strict_root:
        result = wrap_root(result, form)

    if debug:
        logger.normalization_result(render(formula), render(result))
    return result


def normalize(
    formula: Formula,
    *,
    max_clauses: Optional[int] = None,
    wrap_root: bool = False,
) -> Formula:
    """Normalize a formula into Conjunctive Normal Form.

    Runs connective elimination, negation normalization and CNF distribution
    in sequence. The result contains no Implies/Iff, every Not wraps an Atom,
    and the tree is an And of clauses. When no top-level conjunction arises the
    root is left as a bare literal or a bare clause unless ``wrap_root`` is set.

    Args:
        formula: Any formula
        max_clauses: Optional limit on the clauses a single distribution step
            may create
        wrap_root: Always return an And whose children are all Or clauses

    Returns:
        Equivalent formula in CNF, built from fresh nodes

    Raises:
        ResourceExhaustedError: Distribution exceeded ``max_clauses``

    Example:
        >>> normalize(Not(Not(Atom("A"))))
        Atom(symbol='A')
    """
    return _run_pipeline(formula, NormalForm.CNF, max_clauses, wrap_root)


def normalize_dnf(
    formula: Formula,
    *,
    max_clauses: Optional[int] = None,
    wrap_root: bool = False,
) -> Formula:
    """Normalize a formula into Disjunctive Normal Form.

    Same pipeline as ``normalize`` with And distributed over Or instead, so the
    result is an Or of conjunctive terms.
    """
    return _run_pipeline(formula, NormalForm.DNF, max_clauses, wrap_root)


__all__ = [
    "Formula",
    "Atom",
    "Not",
    "Implies",
    "Iff",
    "And",
    "Or",
    "is_literal",
    "FormulaError",
    "UnsupportedFormulaError",
    "ResourceExhaustedError",
    "UnassignedAtomError",
    "ConnectiveEliminator",
    "NegationNormalizer",
    "ClauseDistributor",
    "NormalForm",
    "eliminate_connectives",
    "push_negation",
    "distribute",
    "evaluate",
    "atoms",
    "equivalent",
    "is_nnf",
    "is_cnf",
    "clause_set",
    "normalize",
    "normalize_dnf",
    "render",
]

__version__ = "1.0.0"
__description__ = "Propositional formula normalization into CNF"
