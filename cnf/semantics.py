# cnf/semantics.py
# This file is part of the CNF Normalizer - Propositional Formula Rewriting
#
# Truth evaluation and shape inspection for formula trees

"""Truth-value semantics and structural checks for formula trees.

Evaluation gives every node its classical meaning, with the empty And read as
``true`` and the empty Or read as ``false``. On top of it, ``equivalent``
compares two formulas by enumerating their truth table, which is what the test
suite uses as the oracle for the rewrite passes.

The shape helpers check the invariants the pipeline establishes: ``is_nnf``
for negation normal form, ``is_cnf`` for an And of clauses, and
``clause_set`` to compare CNF results without depending on clause or literal
order.
"""

from __future__ import annotations
import itertools
from typing import FrozenSet, Hashable, List, Mapping

from . import ast_nodes as ast
from .exceptions import UnassignedAtomError, UnsupportedFormulaError


class Evaluator(ast.Visitor):
    """Computes the truth value of a formula under a fixed assignment.

    Attributes:
        assignment: Mapping from atom symbol to truth value
    """

    def __init__(self, assignment: Mapping[Hashable, bool]):
        self.assignment = assignment

    def visit_atom(self, n: ast.Atom) -> bool:
        try:
            return bool(self.assignment[n.symbol])
        except KeyError as exc:
            raise UnassignedAtomError(n.symbol) from exc

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_implies(self, n: ast.Implies) -> bool:
        return (not n.left.accept(self)) or n.right.accept(self)

    def visit_iff(self, n: ast.Iff) -> bool:
        return n.left.accept(self) == n.right.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        return all(c.accept(self) for c in n.children)

    def visit_or(self, n: ast.Or) -> bool:
        return any(c.accept(self) for c in n.children)


def evaluate(formula: ast.Formula, assignment: Mapping[Hashable, bool]) -> bool:
    """Evaluate ``formula`` with the given atom values.

    Raises:
        UnassignedAtomError: An atom of the formula has no value
    """
    return formula.accept(Evaluator(assignment))


def atoms(formula: ast.Formula) -> List[Hashable]:
    """Return the distinct atom symbols of ``formula`` in first-occurrence order."""
    seen: List[Hashable] = []
    stack = [formula]
    while stack:
        node = stack.pop()
        if isinstance(node, ast.Atom):
            if node.symbol not in seen:
                seen.append(node.symbol)
        elif isinstance(node, ast.Not):
            stack.append(node.operand)
        elif isinstance(node, (ast.Implies, ast.Iff)):
            stack.extend((node.right, node.left))
        else:
            stack.extend(reversed(node.children))
    return seen


def equivalent(left: ast.Formula, right: ast.Formula) -> bool:
    """Check semantic equivalence by enumerating the full truth table."""
    symbols = atoms(left)
    symbols.extend(s for s in atoms(right) if s not in symbols)

    for values in itertools.product([False, True], repeat=len(symbols)):
        env = dict(zip(symbols, values))
        if evaluate(left, env) != evaluate(right, env):
            return False
    return True


def is_nnf(formula: ast.Formula) -> bool:
    """Return True if the tree has no Implies/Iff and every Not wraps an Atom."""
    if isinstance(formula, ast.Atom):
        return True
    if isinstance(formula, ast.Not):
        return isinstance(formula.operand, ast.Atom)
    if isinstance(formula, (ast.And, ast.Or)):
        return all(is_nnf(c) for c in formula.children)
    return False


def _is_clause(node: ast.Formula) -> bool:
    if ast.is_literal(node):
        return True
    return isinstance(node, ast.Or) and all(ast.is_literal(c) for c in node.children)


def is_cnf(formula: ast.Formula) -> bool:
    """Return True for a literal, a clause, or an And whose children are clauses."""
    if isinstance(formula, ast.And):
        return all(_is_clause(c) for c in formula.children)
    return _is_clause(formula)


def clause_set(formula: ast.Formula) -> FrozenSet[FrozenSet[ast.Formula]]:
    """Return the clauses of a CNF formula as sets of literals.

    Duplicate literals within a clause and duplicate clauses collapse, which is
    sound for comparing results but not a substitute for the tree itself.

    Raises:
        UnsupportedFormulaError: The formula is not in CNF
    """
    if not is_cnf(formula):
        raise UnsupportedFormulaError(formula, "clause extraction")

    clauses = formula.children if isinstance(formula, ast.And) else (formula,)
    return frozenset(
        frozenset(c.children) if isinstance(c, ast.Or) else frozenset((c,))
        for c in clauses
    )
