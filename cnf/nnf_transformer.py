# cnf/nnf_transformer.py
# This file is part of the CNF Normalizer - Propositional Formula Rewriting
#
# Second rewrite pass: negation normal form

"""Pushes negations down to the atoms (Negation Normal Form).

Expects a tree produced by the connective elimination pass. Rewrites, applied
top-down:

    ~~A       becomes  A
    ~(A & B)  becomes  ~A | ~B
    ~(A | B)  becomes  ~A & ~B

A rewrite can expose a new redex (``~~(A & B)`` unwraps to a conjunction whose
children may themselves be negated connectives), so every rewritten subtree is
normalized again before it is returned. Each step moves a negation strictly
closer to the leaves, which bounds the recursion by the depth of the tree.

Implies and Iff are rejected with UnsupportedFormulaError.
"""

from __future__ import annotations
from . import ast_nodes as ast
from .exceptions import UnsupportedFormulaError
from utils.logger import get_logger


class NegationNormalizer(ast.Visitor):
    """Transforms a Not/And/Or formula into Negation Normal Form."""

    STAGE = "negation normalization"

    def transform(self, root: ast.Formula) -> ast.Formula:
        """Return an equivalent formula in which every Not wraps an Atom.

        Args:
            root: Formula over Atom, Not, And and Or

        Returns:
            Freshly built formula in Negation Normal Form

        Raises:
            UnsupportedFormulaError: The input still contains Implies or Iff
        """
        logger = get_logger()
        logger.pass_start(self.STAGE)

        result = root.accept(self)

        logger.pass_complete(self.STAGE, type(result).__name__)
        return result

    def visit_atom(self, n: ast.Atom) -> ast.Atom:
        return n.clone()

    def visit_not(self, n: ast.Not) -> ast.Formula:
        """Apply double negation elimination or De Morgan's laws.

        Args:
            n: Negation node

        Returns:
            A literal, or a connective whose negations sit on atoms
        """
        inner = n.operand

        if isinstance(inner, ast.Atom):
            return ast.Not(inner.clone())

        # Double negation: ~~A -> A, then keep normalizing
        if isinstance(inner, ast.Not):
            return inner.operand.accept(self)

        # De Morgan: ~(A & B) -> ~A | ~B
        if isinstance(inner, ast.And):
            return ast.Or(*(self._negate(c) for c in inner.children))

        # De Morgan: ~(A | B) -> ~A & ~B
        if isinstance(inner, ast.Or):
            return ast.And(*(self._negate(c) for c in inner.children))

        raise UnsupportedFormulaError(inner, self.STAGE)

    def visit_implies(self, n: ast.Implies):
        raise UnsupportedFormulaError(n, self.STAGE)

    def visit_iff(self, n: ast.Iff):
        raise UnsupportedFormulaError(n, self.STAGE)

    def visit_and(self, n: ast.And) -> ast.And:
        return ast.And(*(c.accept(self) for c in n.children))

    def visit_or(self, n: ast.Or) -> ast.Or:
        return ast.Or(*(c.accept(self) for c in n.children))

    def _negate(self, node: ast.Formula) -> ast.Formula:
        return self.visit_not(ast.Not(node))


def push_negation(formula: ast.Formula) -> ast.Formula:
    """Run the negation normalization pass on ``formula``."""
    return NegationNormalizer().transform(formula)
