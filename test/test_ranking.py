import math
from decimal import Decimal
from fractions import Fraction
from unittest.mock import Mock

import pytest

from sales_report.errors import InvalidInputError
from sales_report.model import SellerStats, TopProduct
from sales_report.ranking import build_report_rows, round_money, top_products
from sales_report.strategies import calculate_bonus_by_profit


def make_index(*stats):
    return {s.id: s for s in stats}


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.675, 2.68),
        (1.005, 1.01),
        (0.125, 0.13),
        (-0.125, -0.13),
        (10, 10.0),
        (3.0000000000000004, 3.0),
    ],
)
def test_round_money_half_away_from_zero(value, expected):
    assert round_money(value) == expected


def test_round_money_has_no_negative_zero():
    assert math.copysign(1.0, round_money(-0.001)) == 1.0


def test_top_products_limited_and_ordered():
    sold = {f"sku{i}": i for i in range(1, 13)}
    top = top_products(sold)

    assert len(top) == 10
    assert top[0] == TopProduct(sku="sku12", quantity=12)
    assert top[-1] == TopProduct(sku="sku3", quantity=3)


def test_top_products_ties_keep_discovery_order():
    top = top_products({"x": 5, "y": 7, "z": 5, "w": 1}, limit=3)
    assert [p.sku for p in top] == ["y", "x", "z"]


def test_report_rows_rank_and_round():
    index = make_index(
        SellerStats(id="a", name="A A", revenue=10.004, profit=1.0),
        SellerStats(id="b", name="B B", revenue=99.999, profit=33.335, sales_count=3),
        SellerStats(id="c", name="C C", revenue=5.0, profit=1.0),
    )

    rows = build_report_rows(index, calculate_bonus_by_profit)

    assert [r.seller_id for r in rows] == ["b", "a", "c"]
    assert rows[0].revenue == 100.0
    assert rows[0].profit == 33.34
    assert rows[0].bonus == 5.0  # 15% of unrounded 33.335
    assert rows[1].revenue == 10.0
    assert rows[1].bonus == 0.1
    assert rows[2].bonus == 0.1  # Index 2 is podium even though last


def test_bonus_strategy_receives_rank_and_total():
    bonus = Mock(return_value=0)
    index = make_index(
        SellerStats(id="low", name="L", profit=1.0),
        SellerStats(id="high", name="H", profit=2.0),
    )

    build_report_rows(index, bonus)

    assert bonus.call_args_list[0].args == (0, 2, index["high"])
    assert bonus.call_args_list[1].args == (1, 2, index["low"])


def test_non_callable_bonus_rejected():
    index = make_index(SellerStats(id="a", name="A"))
    with pytest.raises(InvalidInputError):
        build_report_rows(index, 0.15)


class Money(float):
    """Float subclass with its own repr, like numpy.float64."""

    def __repr__(self):
        return f"Money({float(self)!r})"


@pytest.mark.parametrize(
    "value, expected",
    [
        (Fraction(3, 2), 1.5),
        (Fraction(1, 3), 0.33),
        (Decimal("1.50"), 1.5),
        (Decimal("1.005"), 1.01),
        (Decimal("-2.675"), -2.68),
        (Money(200.0), 200.0),
        (Money(2.675), 2.68),
    ],
)
def test_round_money_accepts_any_real_number(value, expected):
    assert round_money(value) == expected
    assert type(round_money(value)) is float


def test_report_rows_with_non_float_strategy_results():
    index = make_index(
        SellerStats(id="a", name="A A", revenue=Money(200.0), profit=Money(100.0)),
        SellerStats(id="b", name="B B", revenue=10.0, profit=1.0),
    )

    def exact_bonus(rank, total, seller):
        return Fraction(3, 2) if rank == 0 else Decimal("0.255")

    rows = build_report_rows(index, exact_bonus)

    assert [r.bonus for r in rows] == [1.5, 0.26]
    assert rows[0].revenue == 200.0
