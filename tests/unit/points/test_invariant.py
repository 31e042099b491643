"""
Invariant Tests

Equality/hash use the expression only; the falsified flag can be marked and
reset without changing identity.
"""

import pytest

from ppmodel.invariant import Invariant


class TestInvariant:
    def test_starts_not_falsified(self):
        inv = Invariant("x > 0")

        assert inv.expression == "x > 0"
        assert inv.falsified is False

    def test_mark_and_reset(self):
        inv = Invariant("x > 0")

        inv.mark_falsified()
        assert inv.falsified is True

        inv.reset_falsified()
        assert inv.falsified is False

    def test_mark_is_idempotent(self):
        inv = Invariant("x > 0")
        inv.mark_falsified()
        inv.mark_falsified()

        assert inv.falsified is True

    def test_equality_ignores_falsified(self):
        a = Invariant("x > 0")
        b = Invariant("x > 0")
        b.mark_falsified()

        assert a == b
        assert hash(a) == hash(b)
        assert a != Invariant("x >= 0")

    def test_hash_stable_across_falsification(self):
        inv = Invariant("size >= 0")
        seen = {inv}
        before = hash(inv)

        inv.mark_falsified()

        assert hash(inv) == before
        assert inv in seen

    def test_expression_is_read_only(self):
        inv = Invariant("x > 0")

        with pytest.raises(AttributeError):
            inv.expression = "y > 0"

        assert inv.expression == "x > 0"

    def test_str(self):
        inv = Invariant("x != null")
        assert str(inv) == "x != null"

        inv.mark_falsified()
        assert str(inv) == "x != null  [FALSIFIED]"
