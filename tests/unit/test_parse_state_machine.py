"""Тесты для state machine парсера.

Coverage:
- Классификация символов относительно основания
- Переходы из каждого состояния
- Допустимые конечные состояния
"""

import pytest

from src.fracnum.parser import (
    ACCEPTING_STEPS,
    TRANSITIONS,
    CharClass,
    ParseStep,
    classify_char,
    next_step,
)


class TestClassifyChar:
    """Тесты classify_char."""

    def test_signs(self):
        assert classify_char("+", 10) == CharClass.SIGN
        assert classify_char("-", 10) == CharClass.SIGN

    def test_dot(self):
        assert classify_char(".", 10) == CharClass.DOT

    def test_digit_depends_on_radix(self):
        """'a' является цифрой для hex, но не для dec."""
        assert classify_char("a", 16) == CharClass.DIGIT
        assert classify_char("A", 16) == CharClass.DIGIT
        assert classify_char("a", 10) == CharClass.OTHER

    @pytest.mark.parametrize("char", [" ", ",", "e", "_"])
    def test_other(self, char):
        assert classify_char(char, 10) == CharClass.OTHER


class TestTransitions:
    """Тесты функции перехода по состояниям."""

    def test_sign_state(self):
        assert next_step(ParseStep.SIGN, CharClass.SIGN) == ParseStep.MANT_START
        assert next_step(ParseStep.SIGN, CharClass.DIGIT) == ParseStep.MANT
        assert next_step(ParseStep.SIGN, CharClass.DOT) is None
        assert next_step(ParseStep.SIGN, CharClass.OTHER) is None

    def test_mant_start_state(self):
        """После знака допустима только цифра."""
        assert next_step(ParseStep.MANT_START, CharClass.DIGIT) == ParseStep.MANT
        assert next_step(ParseStep.MANT_START, CharClass.SIGN) is None
        assert next_step(ParseStep.MANT_START, CharClass.DOT) is None
        assert next_step(ParseStep.MANT_START, CharClass.OTHER) is None

    def test_mant_state(self):
        assert next_step(ParseStep.MANT, CharClass.DIGIT) == ParseStep.MANT
        assert next_step(ParseStep.MANT, CharClass.DOT) == ParseStep.FRAC_START
        assert next_step(ParseStep.MANT, CharClass.SIGN) is None
        assert next_step(ParseStep.MANT, CharClass.OTHER) is None

    def test_frac_start_state(self):
        assert next_step(ParseStep.FRAC_START, CharClass.DIGIT) == ParseStep.FRAC
        assert next_step(ParseStep.FRAC_START, CharClass.DOT) is None
        assert next_step(ParseStep.FRAC_START, CharClass.SIGN) is None

    def test_frac_state(self):
        """Вторая точка недопустима."""
        assert next_step(ParseStep.FRAC, CharClass.DIGIT) == ParseStep.FRAC
        assert next_step(ParseStep.FRAC, CharClass.DOT) is None
        assert next_step(ParseStep.FRAC, CharClass.OTHER) is None

    def test_other_never_transitions(self):
        for step in ParseStep:
            assert next_step(step, CharClass.OTHER) is None

    def test_table_targets_are_steps(self):
        for (step, char_class), target in TRANSITIONS.items():
            assert isinstance(step, ParseStep)
            assert isinstance(char_class, CharClass)
            assert isinstance(target, ParseStep)


class TestAcceptingSteps:
    """Конечные состояния."""

    def test_only_mant_and_frac_accept(self):
        assert ACCEPTING_STEPS == {ParseStep.MANT, ParseStep.FRAC}
        assert ParseStep.SIGN not in ACCEPTING_STEPS
        assert ParseStep.MANT_START not in ACCEPTING_STEPS
        assert ParseStep.FRAC_START not in ACCEPTING_STEPS
