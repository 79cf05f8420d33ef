import math
from decimal import Decimal

import pytest

from bracketeer import FinancialConfig, PrizeDistribution
from bracketeer.exceptions import ValidationError
from bracketeer.finance import (
    calculate_net_revenue,
    calculate_organizer_residual,
    calculate_platform_fee,
    calculate_prize_splits,
    summarize,
)


def _split(*percentages):
    return [
        {"position": str(i), "percentage": p}
        for i, p in enumerate(percentages, start=1)
    ]


@pytest.mark.parametrize(
    "gross, fee",
    [(55.55, 5.56), (99.99, 10.0), (0, 0.0), (1600, 160.0), (0.05, 0.01)],
)
def test_platform_fee_rounds_half_up(gross, fee):
    assert calculate_platform_fee(gross) == fee


def test_platform_fee_with_custom_rate():
    assert calculate_platform_fee(200, 5) == 10.0
    assert calculate_platform_fee(Decimal("55.55"), 10) == 5.56


def test_net_revenue():
    assert calculate_net_revenue(1600) == 1440.0
    assert calculate_net_revenue(55.55) == pytest.approx(49.99)
    assert calculate_net_revenue(1000, 0) == 1000.0


def test_prize_splits_in_input_order():
    prizes = calculate_prize_splits(1440, _split(60, 30, 10))

    assert [p.amount for p in prizes] == [864.0, 432.0, 144.0]
    assert [p.position for p in prizes] == ["1", "2", "3"]


def test_prize_splits_round_each_amount():
    prizes = calculate_prize_splits(100, _split(33.33, 33.33, 33.34))

    assert [p.amount for p in prizes] == [33.33, 33.33, 33.34]
    assert sum(p.amount for p in prizes) == pytest.approx(100.0)


def test_prize_splits_accept_distribution_objects():
    prizes = calculate_prize_splits(
        1000, [PrizeDistribution(position=1, percentage=12.5, label="1er Lugar")]
    )

    assert prizes[0].amount == 125.0
    assert prizes[0].label == "1er Lugar"


def test_empty_distribution():
    assert calculate_prize_splits(1440, []) == []


def test_incomplete_distribution_is_rejected():
    with pytest.raises(ValidationError):
        calculate_prize_splits(100, [{"position": "1"}])


def test_organizer_keeps_the_remainder():
    prizes = calculate_prize_splits(1440, _split(50))

    assert prizes[0].amount == 720.0
    assert calculate_organizer_residual(1440, prizes) == 720.0


def test_permissive_inputs():
    assert calculate_platform_fee(-100) == -10.0
    assert calculate_platform_fee(100, 150) == 150.0
    prizes = calculate_prize_splits(100, _split(80, 40))
    assert [p.amount for p in prizes] == [80.0, 40.0]
    assert calculate_organizer_residual(100, prizes) == -20.0


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "100", None, True])
def test_non_finite_amounts_are_rejected(bad):
    with pytest.raises(ValidationError):
        calculate_platform_fee(bad)
    with pytest.raises(ValidationError):
        calculate_prize_splits(bad, _split(100))


def test_non_finite_percentages_are_rejected():
    with pytest.raises(ValidationError):
        calculate_platform_fee(100, math.nan)
    with pytest.raises(ValidationError):
        calculate_prize_splits(100, _split(math.inf))


def test_calculations_are_idempotent():
    first = summarize(1234.56, _split(50, 30, 20))
    second = summarize(1234.56, _split(50, 30, 20))

    assert first == second
    assert calculate_platform_fee(55.55) == calculate_platform_fee(55.55)


def test_summarize_full_pipeline():
    summary = summarize(1600, _split(60, 30, 10))

    assert summary.platform_fee == 160.0
    assert summary.net_revenue == 1440.0
    assert [p.amount for p in summary.prizes] == [864.0, 432.0, 144.0]
    assert summary.organizer_residual == 0.0
    assert summary.total_prizes == 1440.0
    assert summary.currency == "MXN"


def test_summarize_uses_injected_config():
    summary = summarize(
        1600, config=FinancialConfig(platform_fee_percent=5, currency="USD")
    )

    assert summary.platform_fee == 80.0
    assert summary.net_revenue == 1520.0
    assert summary.prizes == []
    assert summary.organizer_residual == 1520.0
    assert summary.to_dict()["currency"] == "USD"


@pytest.mark.parametrize("gross", [0, 0.01, 19.99, 55.55, 1600, 123456.78])
def test_net_is_gross_minus_fee(gross):
    assert calculate_net_revenue(gross) == gross - calculate_platform_fee(gross)


def test_very_large_gross_amounts():
    assert calculate_platform_fee(1e30) == 1e29
    prizes = calculate_prize_splits(1e30, [{"position": "1", "percentage": 50}])
    assert prizes[0].amount == 5e29
    assert summarize(1e30, _split(100)).platform_fee == 1e29
