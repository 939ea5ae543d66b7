from __future__ import annotations

from math import isclose

import pytest

from firecalc.core.compounding import future_value_annual
from firecalc.core.traditional_fire import compute, time_to_fire
from firecalc.domain.validation import InputValidationError
from firecalc.schemas.traditional_fire import TraditionalFireInputs


def make_inputs(**overrides) -> TraditionalFireInputs:
    values = {
        "yearlySpending": 40000,
        "monthlyInvestments": 5000,
        "currentInvestedAssets": 0,
        "expectedReturnRate": 0.07,
        "inflationRate": 0.02,
        "safeWithdrawalRate": 0.04,
    }
    values.update(overrides)
    return TraditionalFireInputs(**values)


def whole_years_to_target(current: float, annual: float, target: float, rate: float) -> int:
    years = 0
    while current < target:
        current = current * (1 + rate) + annual
        years += 1
    return years


def test_time_to_fire_refines_the_last_year_monthly():
    inputs = make_inputs()
    result = compute(inputs)
    timeline = result.timeToFire

    whole = whole_years_to_target(0, 60000, result.fireNumber, 0.07 - 0.02)
    assert timeline.achievable
    assert whole - 1 < timeline.years <= whole
    assert timeline.totalMonths == (whole - 1) * 12 + timeline.months
    assert isclose(timeline.years, timeline.totalMonths / 12)
    assert 1 <= timeline.months <= 12


def test_summary_figures_when_achievable():
    result = compute(make_inputs())

    assert isclose(result.fireNumber, 1_000_000)
    assert result.projectedPortfolioValue == result.fireNumber
    assert result.totalContributions == 5000 * result.timeToFire.totalMonths
    assert isclose(
        result.investmentGrowth,
        max(0.0, result.fireNumber - result.totalContributions),
    )
    assert isclose(result.monthlyRetirementIncome, 40000 / 12)
    assert result.currentProgress == 0


def test_projection_runs_five_years_past_fire():
    result = compute(make_inputs())

    years = [point.year for point in result.projectionData]
    assert years == list(range(int(result.timeToFire.years + 5) + 1))
    assert result.projectionData[0].portfolioValue == 0
    assert isclose(result.projectionData[1].portfolioValue, 60000)


def test_already_at_fire():
    result = compute(make_inputs(currentInvestedAssets=2_000_000))

    assert result.timeToFire.years == 0
    assert result.timeToFire.totalMonths == 0
    assert result.timeToFire.achievable
    assert result.totalContributions == 0
    assert result.investmentGrowth == 0
    assert len(result.projectionData) == 6
    assert result.currentProgress == pytest.approx(200)


def test_unreachable_goal_caps_at_fifty_years():
    inputs = make_inputs(
        yearlySpending=500000,
        monthlyInvestments=100,
        expectedReturnRate=0.03,
        safeWithdrawalRate=0.02,
    )
    result = compute(inputs)

    assert not result.timeToFire.achievable
    assert result.timeToFire.years == 50
    assert result.timeToFire.totalMonths == 600
    assert result.totalContributions == 100 * 600
    expected_value = future_value_annual(0, 1200, 0.03 - 0.02, 50)
    assert isclose(result.projectedPortfolioValue, expected_value)
    assert isclose(result.investmentGrowth, expected_value - 60000)
    assert len(result.projectionData) == 51


def test_custom_horizon():
    timeline = time_to_fire(0, 100, 10_000_000, 0.01, max_years=10)
    assert not timeline.achievable
    assert timeline.years == 10
    assert timeline.totalMonths == 120


def test_return_equal_to_inflation_is_rejected():
    with pytest.raises(InputValidationError) as excinfo:
        compute(make_inputs(expectedReturnRate=0.03, inflationRate=0.03))

    assert excinfo.value.fields == ["expectedReturnRate"]


def test_bounds_are_all_reported():
    with pytest.raises(InputValidationError) as excinfo:
        compute(
            make_inputs(
                yearlySpending=1000,
                monthlyInvestments=60000,
                currentInvestedAssets=-1,
                safeWithdrawalRate=0,
            )
        )

    assert set(excinfo.value.fields) == {
        "yearlySpending",
        "monthlyInvestments",
        "currentInvestedAssets",
        "safeWithdrawalRate",
    }
    assert "between $15,000 and $500,000" in str(excinfo.value)


def test_compute_is_idempotent():
    assert compute(make_inputs()) == compute(make_inputs())


def test_deflation_raises_the_real_return():
    deflation = compute(make_inputs(inflationRate=-0.01))
    baseline = compute(make_inputs())

    assert deflation.timeToFire.totalMonths <= baseline.timeToFire.totalMonths
