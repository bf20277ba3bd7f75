from decimal import Decimal

from homebills.engine.money import distribute_pennies

THIRD = Decimal("100") / 3


class TestDistributePennies:
    def test_even_split_with_leftover(self):
        """$1.00 three ways: the lowest key gets the extra cent."""
        result = distribute_pennies(100, [("a", THIRD), ("b", THIRD), ("c", THIRD)])
        assert result == [("a", 34), ("b", 33), ("c", 33)]

    def test_sum_is_exact(self):
        result = distribute_pennies(100, [("a", THIRD), ("b", THIRD), ("c", THIRD)])
        assert sum(amount for _, amount in result) == 100

    def test_largest_remainder_wins(self):
        result = distribute_pennies(10, [("a", Decimal("3.2")), ("b", Decimal("6.8"))])
        assert dict(result) == {"a": 3, "b": 7}

    def test_no_shortfall(self):
        result = distribute_pennies(100, [("a", Decimal("50")), ("b", Decimal("50"))])
        assert result == [("a", 50), ("b", 50)]

    def test_preserves_input_order(self):
        result = distribute_pennies(10, [("b", Decimal("6.8")), ("a", Decimal("3.2"))])
        assert [key for key, _ in result] == ["b", "a"]

    def test_order_independent(self):
        shares = [("c", THIRD), ("a", THIRD), ("b", THIRD)]
        forward = dict(distribute_pennies(100, shares))
        backward = dict(distribute_pennies(100, list(reversed(shares))))
        assert forward == backward
        assert forward["a"] == 34

    def test_each_amount_within_one_cent(self):
        raw = [("a", Decimal("1234.56")), ("b", Decimal("2345.67")), ("c", Decimal("6419.77"))]
        result = dict(distribute_pennies(10000, raw))
        for key, share in raw:
            assert abs(result[key] - share) < 1

    def test_repeated_key_keeps_every_entry(self):
        shares = [("a", Decimal("33.5")), ("a", Decimal("33.5")), ("b", Decimal("33"))]
        result = distribute_pennies(100, shares)
        assert result == [("a", 34), ("a", 33), ("b", 33)]
        assert sum(amount for _, amount in result) == 100

    def test_empty(self):
        assert distribute_pennies(100, []) == []
