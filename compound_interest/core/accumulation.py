"""Compound interest accumulation engine.

The account always compounds monthly. Monthly contributions form an ordinary
annuity at the account's monthly rate. Annual contributions are evaluated as
an annual annuity at the plain annual rate, which is not reconciled with the
monthly compounding of the principal.

Growth that exceeds the float range saturates to infinity instead of raising.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import List

from compound_interest.domain.accumulation import (
    AccumulationBreakdown,
    CalculationInput,
    CalculationResult,
    ContributionFrequency,
)
from compound_interest.schemas.accumulation import AccumulationPoint

MONTHS_PER_YEAR = 12


def _annual_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100


def _growth_factor(rate: float, periods: int) -> float:
    """``(1 + rate) ** periods``, saturating to infinity on overflow."""
    try:
        return (1 + rate) ** periods
    except OverflowError:
        return math.inf


def _annuity_future_value(payment: float, rate: float, periods: int) -> float:
    """Future value of an ordinary annuity, linear when the rate is not positive."""
    if not payment:
        return 0.0
    if rate > 0:
        return payment * ((_growth_factor(rate, periods) - 1) / rate)
    return payment * periods


def future_value_of_principal(principal: float, annual_rate_percent: float, years: int) -> float:
    """Grow the principal at the monthly account rate for ``years * 12`` months."""
    if not principal:
        return 0.0
    monthly_rate = _annual_rate(annual_rate_percent) / MONTHS_PER_YEAR
    return principal * _growth_factor(monthly_rate, years * MONTHS_PER_YEAR)


def future_value_of_contributions(
    contribution_amount: float,
    annual_rate_percent: float,
    years: int,
    frequency: ContributionFrequency,
) -> float:
    annual_rate = _annual_rate(annual_rate_percent)
    if frequency is ContributionFrequency.MONTHLY:
        return _annuity_future_value(
            contribution_amount,
            annual_rate / MONTHS_PER_YEAR,
            years * MONTHS_PER_YEAR,
        )
    return _annuity_future_value(contribution_amount, annual_rate, years)


def number_of_contributions(years: int, frequency: ContributionFrequency) -> int:
    if frequency is ContributionFrequency.MONTHLY:
        return years * MONTHS_PER_YEAR
    return years


def compute(calculation: CalculationInput) -> CalculationResult:
    """Return the total future value of principal plus contributions."""
    principal_value = future_value_of_principal(
        calculation.principal,
        calculation.annual_rate_percent,
        calculation.years,
    )
    contributions_value = future_value_of_contributions(
        calculation.contribution_amount,
        calculation.annual_rate_percent,
        calculation.years,
        calculation.contribution_frequency,
    )
    return CalculationResult(total_future_value=principal_value + contributions_value)


def calculate_breakdown(calculation: CalculationInput) -> AccumulationBreakdown:
    """Split the projected total into its principal and contribution parts."""
    principal_value = future_value_of_principal(
        calculation.principal,
        calculation.annual_rate_percent,
        calculation.years,
    )
    contributions_value = future_value_of_contributions(
        calculation.contribution_amount,
        calculation.annual_rate_percent,
        calculation.years,
        calculation.contribution_frequency,
    )
    total = principal_value + contributions_value
    contributed = calculation.contribution_amount * number_of_contributions(
        calculation.years, calculation.contribution_frequency
    )

    return AccumulationBreakdown(
        future_value_of_principal=principal_value,
        future_value_of_contributions=contributions_value,
        total_contributed=contributed,
        interest_earned=total - calculation.principal - contributed,
        total_future_value=total,
    )


def calculate_schedule(calculation: CalculationInput) -> List[AccumulationPoint]:
    """Year-end balances from year 0 through ``calculation.years``."""
    schedule: List[AccumulationPoint] = []
    for year in range(0, calculation.years + 1):
        result = compute(replace(calculation, years=year))
        schedule.append(AccumulationPoint(year=year, balance=result.total_future_value))
    return schedule
