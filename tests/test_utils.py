from decimal import Decimal

from tripsplit.core.utils import qround, simplify_debts, to_decimal


def test_qround_half_up():
    assert qround(Decimal("2.345")) == Decimal("2.35")
    assert qround(Decimal("-2.345")) == Decimal("-2.35")


def test_to_decimal_keeps_float_digits():
    assert to_decimal(33.33) == Decimal("33.33")
    assert to_decimal(Decimal("1.005")) == Decimal("1.005")
    assert to_decimal(7) == Decimal("7")


class TestSimplifyDebts:

    def test_single_pair(self):
        transfers = simplify_debts({"a": Decimal("30"), "b": Decimal("0"), "c": Decimal("-30")})

        assert transfers == [("c", "a", Decimal("30.00"))]

    def test_chain_collapses(self):
        # a owes b 10, b owes c 10 -> a pays c directly
        net = {"a": Decimal("-10"), "b": Decimal("0"), "c": Decimal("10")}

        assert simplify_debts(net) == [("a", "c", Decimal("10.00"))]

    def test_largest_amounts_matched_first(self):
        net = {
            "a": Decimal("50"),
            "b": Decimal("10"),
            "c": Decimal("-45"),
            "d": Decimal("-15"),
        }

        transfers = simplify_debts(net)

        assert transfers == [
            ("c", "a", Decimal("45.00")),
            ("d", "a", Decimal("5.00")),
            ("d", "b", Decimal("10.00")),
        ]
        assert sum(t[2] for t in transfers) == Decimal("60")

    def test_rounding_noise_ignored(self):
        assert simplify_debts({"a": Decimal("0.004"), "b": Decimal("-0.004")}) == []

    def test_empty(self):
        assert simplify_debts({}) == []
