# cnf/distributor.py
# This file is part of the CNF Normalizer - Propositional Formula Rewriting
#
# Third rewrite pass: distribution into conjunctive or disjunctive normal form

"""Distributes one connective over the other to reach CNF or DNF.

Expects a tree in Negation Normal Form. The target form decides which
connective ends up on top:

    CNF: And of clauses, each clause an Or of literals
    DNF: Or of terms, each term an And of literals

The inner connective is the expansion site. For CNF, an Or node whose children
include And nodes is rewritten with P | (Q & S) == (P | Q) & (P | S),
generalized to n-ary children: non-And children are the singles, every And
child contributes its children as one choice set, and each combination of one
pick per choice set yields one clause ``Or(singles + picks)``. The clauses are
enumerated like a mixed-radix counter whose first digit (the first choice set)
varies fastest. DNF is the same procedure with And and Or exchanged.

Nested nodes of the same connective are flattened and single-child nodes
collapse to their child. Every clause owns clones of the sub-formulas it picks,
so no two clauses share nodes.

The number of clauses grows with the product of the choice set sizes, which is
exponential in the worst case. ``max_clauses`` bounds a single expansion and
raises ResourceExhaustedError when exceeded.
"""

from __future__ import annotations
import math
from enum import Enum
from itertools import product
from typing import List, Optional, Sequence, Type

from . import ast_nodes as ast
from .exceptions import ResourceExhaustedError, UnsupportedFormulaError
from utils.logger import get_logger


class NormalForm(Enum):
    """Target shape of the distribution pass."""

    CNF = "cnf"
    DNF = "dnf"

    @property
    def outer(self) -> Type[ast.Formula]:
        """Connective that ends up at the root."""
        return ast.And if self is NormalForm.CNF else ast.Or

    @property
    def inner(self) -> Type[ast.Formula]:
        """Connective that groups the literals of a clause or term."""
        return ast.Or if self is NormalForm.CNF else ast.And


class ClauseDistributor(ast.Visitor):
    """Transforms a Negation Normal Form tree into CNF or DNF.

    Attributes:
        form: Target normal form
        max_clauses: Optional budget for the clauses of one expansion step
    """

    def __init__(self, form: NormalForm = NormalForm.CNF, max_clauses: Optional[int] = None):
        self.form = form
        self.max_clauses = max_clauses

    @property
    def stage(self) -> str:
        return f"{self.form.name} distribution"

    def transform(self, root: ast.Formula) -> ast.Formula:
        """Distribute ``root`` into the configured normal form.

        Args:
            root: Formula in Negation Normal Form

        Returns:
            Freshly built formula in the target normal form

        Raises:
            UnsupportedFormulaError: The input is not in Negation Normal Form
            ResourceExhaustedError: An expansion exceeded ``max_clauses``
        """
        logger = get_logger()
        logger.pass_start(self.stage)

        result = root.accept(self)

        logger.pass_complete(self.stage, type(result).__name__)
        return result

    def visit_atom(self, n: ast.Atom) -> ast.Atom:
        return n.clone()

    def visit_not(self, n: ast.Not) -> ast.Not:
        if not isinstance(n.operand, ast.Atom):
            raise UnsupportedFormulaError(n, self.stage)
        return n.clone()

    def visit_implies(self, n: ast.Implies):
        raise UnsupportedFormulaError(n, self.stage)

    def visit_iff(self, n: ast.Iff):
        raise UnsupportedFormulaError(n, self.stage)

    def visit_and(self, n: ast.And) -> ast.Formula:
        if self.form is NormalForm.CNF:
            return self._collect(n.children)
        return self._expand(n.children)

    def visit_or(self, n: ast.Or) -> ast.Formula:
        if self.form is NormalForm.CNF:
            return self._expand(n.children)
        return self._collect(n.children)

    def _collect(self, children: Sequence[ast.Formula]) -> ast.Formula:
        """Distribute the children of an outer node and flatten them."""
        outer = self.form.outer
        flat: List[ast.Formula] = []
        for child in children:
            result = child.accept(self)
            if isinstance(result, outer):
                flat.extend(result.children)
            else:
                flat.append(result)

        if len(flat) == 1:
            return flat[0]
        return outer(*flat)

    def _expand(self, children: Sequence[ast.Formula]) -> ast.Formula:
        """Distribute the children of an inner node over its outer children."""
        logger = get_logger()
        outer, inner = self.form.outer, self.form.inner

        singles: List[ast.Formula] = []
        choice_sets: List[Sequence[ast.Formula]] = []
        for child in children:
            result = child.accept(self)
            if isinstance(result, inner):
                singles.extend(result.children)
            elif isinstance(result, outer):
                choice_sets.append(result.children)
            else:
                singles.append(result)

        if not choice_sets:
            return self._build_inner(singles)

        count = math.prod(len(choices) for choices in choice_sets)
        logger.expansion(inner.__name__, len(singles), len(choice_sets), count)

        if self.max_clauses is not None and count > self.max_clauses:
            logger.budget_exceeded(count, self.max_clauses)
            raise ResourceExhaustedError(count, self.max_clauses)

        clauses = []
        # product() varies its last argument fastest, so feed the choice sets
        # reversed to make the first one the fastest digit.
        for combination in product(*reversed(choice_sets)):
            parts = [single.clone() for single in singles]
            for pick in reversed(combination):
                if isinstance(pick, inner):
                    parts.extend(literal.clone() for literal in pick.children)
                else:
                    parts.append(pick.clone())
            clauses.append(self._build_inner(parts))

        if len(clauses) == 1:
            return clauses[0]
        return outer(*clauses)

    def _build_inner(self, parts: List[ast.Formula]) -> ast.Formula:
        if len(parts) == 1:
            return parts[0]
        return self.form.inner(*parts)


def distribute(
    formula: ast.Formula,
    form: NormalForm = NormalForm.CNF,
    max_clauses: Optional[int] = None,
) -> ast.Formula:
    """Run the distribution pass on a formula in Negation Normal Form."""
    return ClauseDistributor(form, max_clauses).transform(formula)


def wrap_root(formula: ast.Formula, form: NormalForm = NormalForm.CNF) -> ast.Formula:
    """Wrap a distributed formula into the strict outer-of-inner shape.

    Distribution leaves a bare literal or a bare clause at the root when no
    outer node was produced, and literals directly under the outer root. This
    wraps each of them in singleton nodes, so that for CNF the result is always
    an And whose children are all Or nodes of literals.

    Args:
        formula: Output of ``distribute`` for the same ``form``

    Returns:
        Equivalent formula with the strict normal form shape
    """
    outer, inner = form.outer, form.inner

    def as_clause(node: ast.Formula) -> ast.Formula:
        return node if isinstance(node, inner) else inner(node)

    if isinstance(formula, outer):
        return outer(*(as_clause(c) for c in formula.children))
    return outer(as_clause(formula))
