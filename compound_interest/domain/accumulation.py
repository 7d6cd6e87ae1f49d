from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ContributionFrequency(str, Enum):
    MONTHLY = "monthly"
    ANNUALLY = "annually"


@dataclass(frozen=True)
class CalculationInput:
    principal: float
    annual_rate_percent: float
    years: int
    contribution_amount: float
    contribution_frequency: ContributionFrequency = ContributionFrequency.MONTHLY


@dataclass(frozen=True)
class CalculationResult:
    total_future_value: float


@dataclass(frozen=True)
class AccumulationBreakdown:
    future_value_of_principal: float
    future_value_of_contributions: float
    total_contributed: float
    interest_earned: float
    total_future_value: float
