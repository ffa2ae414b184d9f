# cnf/ast_nodes.py
# This file is part of the CNF Normalizer - Propositional Formula Rewriting
#
# Tree node classes for propositional formula representation

"""Tree node classes for representing propositional logic formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas. The tree supports atoms, negation,
implication, biconditional and n-ary conjunction and disjunction, which is the
full input language of the normalization pipeline.

Node Types:
    Atom: Propositional variable identified by an opaque symbol
    Not: Negation of exactly one sub-formula
    Implies, Iff: Binary implication and biconditional
    And, Or: N-ary conjunction and disjunction (children keep insertion order)

All nodes support the visitor design pattern for traversal and transformation,
and ``clone`` for building an independent copy of a subtree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Hashable, Protocol, Tuple


class Visitor(Protocol):
    """Interface for formula visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_atom(self, n: Atom): ...

    def visit_not(self, n: Not): ...

    def visit_implies(self, n: Implies): ...

    def visit_iff(self, n: Iff): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


@dataclass(frozen=True, slots=True)
class Formula:
    """Base class for all nodes of a propositional formula tree.

    Provides the foundation for immutable formula trees with visitor pattern
    support. All concrete node types inherit from this class and implement
    ``accept`` for visitor dispatch, ``clone`` for deep copying and ``__str__``
    for rendering.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def clone(self) -> Formula:
        """Return a structurally equal tree built from fresh node objects.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Atom(Formula):
    """Propositional variable, the leaf of every formula tree.

    Attributes:
        symbol: Opaque, hashable identifier of the variable (e.g. ``"P"``)
    """

    symbol: Hashable

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def clone(self) -> Atom:
        return Atom(self.symbol)

    def __str__(self) -> str:
        return str(self.symbol)


@dataclass(frozen=True, slots=True)
class Not(Formula):
    """Logical negation of a single sub-formula.

    Attributes:
        operand: The formula being negated
    """

    operand: Formula

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def clone(self) -> Not:
        return Not(self.operand.clone())

    def __str__(self) -> str:
        return f"~({self.operand})"


@dataclass(frozen=True, slots=True)
class Implies(Formula):
    """Material implication, ``left -> right``.

    Attributes:
        left: Antecedent of the implication
        right: Consequent of the implication
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        return v.visit_implies(self)

    def clone(self) -> Implies:
        return Implies(self.left.clone(), self.right.clone())

    def __str__(self) -> str:
        return f"({self.left} -> {self.right})"


@dataclass(frozen=True, slots=True)
class Iff(Formula):
    """Biconditional, ``left <-> right``.

    Attributes:
        left: Left side of the biconditional
        right: Right side of the biconditional
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        return v.visit_iff(self)

    def clone(self) -> Iff:
        return Iff(self.left.clone(), self.right.clone())

    def __str__(self) -> str:
        return f"({self.left} <-> {self.right})"


@dataclass(frozen=True, slots=True, init=False)
class And(Formula):
    """N-ary conjunction.

    An ``And`` without children is the identity element and stands for
    ``true``.

    Attributes:
        children: Conjuncts in insertion order
    """

    children: Tuple[Formula, ...]

    def __init__(self, *children: Formula):
        object.__setattr__(self, "children", tuple(children))

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def clone(self) -> And:
        return And(*(c.clone() for c in self.children))

    def __str__(self) -> str:
        if not self.children:
            return "TRUE"
        return "(" + " AND ".join(str(c) for c in self.children) + ")"


@dataclass(frozen=True, slots=True, init=False)
class Or(Formula):
    """N-ary disjunction.

    An ``Or`` without children is the identity element and stands for
    ``false``.

    Attributes:
        children: Disjuncts in insertion order
    """

    children: Tuple[Formula, ...]

    def __init__(self, *children: Formula):
        object.__setattr__(self, "children", tuple(children))

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def clone(self) -> Or:
        return Or(*(c.clone() for c in self.children))

    def __str__(self) -> str:
        if not self.children:
            return "FALSE"
        return "(" + " OR ".join(str(c) for c in self.children) + ")"


def is_literal(node: Formula) -> bool:
    """Return True for an atom or the direct negation of an atom."""
    if isinstance(node, Atom):
        return True
    return isinstance(node, Not) and isinstance(node.operand, Atom)
