# cnf/eliminator.py
# This file is part of the CNF Normalizer - Propositional Formula Rewriting
#
# First rewrite pass: implication and biconditional elimination

"""Rewrites implications and biconditionals into Not/And/Or.

This is the first pass of the normalization pipeline. After it runs, the tree
only contains Atom, Not, And and Or nodes:

    A -> B    becomes  ~A | B
    A <-> B   becomes  (~A | B) & (~B | A)

The pass is applied bottom-up on every sub-formula, including the children of
n-ary And/Or nodes. It is total and builds a fresh tree; the input is left
untouched.
"""

from __future__ import annotations
from . import ast_nodes as ast
from utils.logger import get_logger


class ConnectiveEliminator(ast.Visitor):
    """Removes Implies and Iff nodes from a formula tree."""

    STAGE = "connective elimination"

    def transform(self, root: ast.Formula) -> ast.Formula:
        """Return an equivalent formula over Atom, Not, And and Or only.

        Args:
            root: Any formula

        Returns:
            Freshly built formula without Implies/Iff nodes
        """
        logger = get_logger()
        logger.pass_start(self.STAGE)

        result = root.accept(self)

        logger.pass_complete(self.STAGE, type(result).__name__)
        return result

    def visit_atom(self, n: ast.Atom) -> ast.Atom:
        return n.clone()

    def visit_not(self, n: ast.Not) -> ast.Not:
        return ast.Not(n.operand.accept(self))

    def visit_implies(self, n: ast.Implies) -> ast.Or:
        return ast.Or(ast.Not(n.left.accept(self)), n.right.accept(self))

    def visit_iff(self, n: ast.Iff) -> ast.And:
        """Expand ``l <-> r`` into ``(~l | r) & (~r | l)``.

        Each side is rewritten once; the second direction receives clones so
        the two conjuncts share no nodes.
        """
        left = n.left.accept(self)
        right = n.right.accept(self)
        forward = ast.Or(ast.Not(left.clone()), right.clone())
        backward = ast.Or(ast.Not(right), left)
        return ast.And(forward, backward)

    def visit_and(self, n: ast.And) -> ast.And:
        return ast.And(*(c.accept(self) for c in n.children))

    def visit_or(self, n: ast.Or) -> ast.Or:
        return ast.Or(*(c.accept(self) for c in n.children))


def eliminate_connectives(formula: ast.Formula) -> ast.Formula:
    """Run the connective elimination pass on ``formula``."""
    return ConnectiveEliminator().transform(formula)
