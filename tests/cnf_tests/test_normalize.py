# tests/cnf_tests/test_normalize.py
# This file is part of the CNF Normalizer - Propositional Formula Rewriting
#
# End-to-end test suite for the normalization pipeline

"""Normalization pipeline – worked examples, root convention and idempotence."""

import logging
import pytest
from cnf import (
    And,
    Atom,
    Iff,
    Implies,
    Not,
    Or,
    ResourceExhaustedError,
    clause_set,
    distribute,
    eliminate_connectives,
    equivalent,
    is_cnf,
    normalize,
    normalize_dnf,
    push_negation,
    render,
)
from utils.logger import LogLevel, get_logger, set_log_level

P, Q, R, S = Atom("P"), Atom("Q"), Atom("R"), Atom("S")


class TestWorkedExamples:
    """Hand-derived results for small formulas."""

    def test_double_negation(self):
        result = normalize(Not(Not(Atom("A"))))
        assert result == Atom("A")
        assert render(result) == "A"

    def test_implication(self):
        assert normalize(Implies(P, Q)) == Or(Not(P), Q)

    def test_de_morgan_over_conjunction(self):
        assert normalize(Not(And(P, Q))) == Or(Not(P), Not(Q))

    def test_de_morgan_over_disjunction(self):
        assert normalize(Not(Or(P, Q))) == And(Not(P), Not(Q))

    def test_implication_with_conjunctive_antecedent(self):
        result = normalize(Implies(And(P, Not(Q)), R))
        assert result == Or(Not(P), Q, R)
        assert render(result) == "(~(P) OR Q OR R)"

    def test_biconditional_over_disjunction(self):
        result = normalize(Iff(Or(P, Q), R))
        assert result == And(Or(R, Not(P)), Or(R, Not(Q)), Or(Not(R), P, Q))
        assert clause_set(result) == frozenset(
            {
                frozenset({Not(P), R}),
                frozenset({Not(Q), R}),
                frozenset({Not(R), P, Q}),
            }
        )
        hand_derived = And(Or(Not(P), R), Or(Not(Q), R), Or(P, Q, Not(R)))
        assert equivalent(result, hand_derived)
        assert equivalent(result, Iff(Or(P, Q), R))

    def test_plain_biconditional(self):
        result = normalize(Iff(P, Q))
        assert result == And(Or(Not(P), Q), Or(Not(Q), P))

    def test_negated_biconditional(self):
        # ~((~P | Q) & (~Q | P)) = (P & ~Q) | (Q & ~P)
        result = normalize(Not(Iff(P, Q)))
        assert result == And(Or(P, Q), Or(Not(Q), Q), Or(P, Not(P)), Or(Not(Q), Not(P)))
        assert equivalent(result, Not(Iff(P, Q)))

    def test_conjunction_of_clauses_unchanged(self):
        formula = And(Or(P, Not(Q)), Or(R, S), Not(P))
        assert normalize(formula) == formula

    def test_dnf_of_biconditional(self):
        result = normalize_dnf(Iff(P, Q))
        assert result == Or(
            And(Not(P), Not(Q)),
            And(Q, Not(Q)),
            And(Not(P), P),
            And(Q, P),
        )
        assert equivalent(result, Iff(P, Q))


class TestRootConvention:
    """Bare roots by default, strict And-of-Or with wrap_root."""

    @pytest.mark.parametrize(
        "formula, expected",
        [
            (Not(Not(P)), And(Or(P))),
            (Implies(P, Q), And(Or(Not(P), Q))),
            (And(P, Implies(Q, R)), And(Or(P), Or(Not(Q), R))),
        ],
    )
    def test_wrap_root(self, formula, expected):
        assert normalize(formula, wrap_root=True) == expected

    def test_default_leaves_bare_root(self):
        assert normalize(P) == P
        assert normalize(Or(P, Q)) == Or(P, Q)

    def test_dnf_wrap_root(self):
        assert normalize_dnf(P, wrap_root=True) == Or(And(P))


class TestPipelineProperties:
    """Properties that hold for every input."""

    def test_results_are_cnf_and_equivalent(self, sample_formulas):
        for f in sample_formulas:
            result = normalize(f)
            assert is_cnf(result), render(result)
            assert equivalent(f, result)

    def test_idempotence(self, sample_formulas):
        for f in sample_formulas:
            once = normalize(f)
            assert normalize(once) == once
            strict = normalize(f, wrap_root=True)
            assert normalize(strict, wrap_root=True) == strict

    def test_intermediate_trees_coexist(self):
        source = Iff(Or(P, Q), Not(And(R, S)))
        snapshot = source.clone()

        stage1 = eliminate_connectives(source)
        stage1_copy = stage1.clone()
        stage2 = push_negation(stage1)
        stage2_copy = stage2.clone()
        stage3 = distribute(stage2)

        assert source == snapshot
        assert stage1 == stage1_copy
        assert stage2 == stage2_copy
        assert stage3 == normalize(source)
        for earlier in (source, stage1, stage2):
            assert equivalent(earlier, stage3)

    def test_max_clauses_is_enforced(self):
        formula = Or(*(And(Atom(f"A{i}"), Atom(f"B{i}")) for i in range(6)))
        with pytest.raises(ResourceExhaustedError):
            normalize(formula, max_clauses=32)
        assert len(normalize(formula, max_clauses=64).children) == 64


class TestPipelineLogging:
    """Debug logging reports each pass."""

    class _Collect(logging.Handler):
        def __init__(self):
            super().__init__(logging.DEBUG)
            self.messages = []

        def emit(self, record):
            self.messages.append(record.getMessage())

    def test_debug_messages_cover_every_pass(self):
        handler = self._Collect()
        logger = get_logger()
        logger.logger.addHandler(handler)
        try:
            set_log_level(LogLevel.DEBUG)
            normalize(Iff(Or(P, Q), R))
        finally:
            logger.logger.removeHandler(handler)

        text = "\n".join(handler.messages)
        assert "connective elimination: start" in text
        assert "negation normalization: complete" in text
        assert "CNF distribution: complete, root is And" in text
        assert "Expanding Or" in text
        assert "((P OR Q) <-> R) =>" in text

    def test_silent_by_default(self):
        handler = self._Collect()
        logger = get_logger()
        logger.logger.addHandler(handler)
        try:
            normalize(Implies(P, Q))
        finally:
            logger.logger.removeHandler(handler)
        assert handler.messages == []
