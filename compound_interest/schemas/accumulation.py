"""Data contracts for compound interest calculations."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from compound_interest.domain.accumulation import CalculationInput, ContributionFrequency

REQUIRED_FIELDS_MESSAGE = "All fields are required."
OUT_OF_RANGE_MESSAGE = "The projected value is too large to represent."

MAX_YEARS = 1000


class CalculationRequest(BaseModel):
    """Inputs collected by a form or API client before calling the engine."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    principal: float = Field(..., ge=0, description="Initial amount invested at period 0.")
    annual_rate_percent: float = Field(
        ...,
        description="Annual interest rate expressed in percent (e.g. 5 for 5%).",
    )
    years: int = Field(..., ge=0, le=MAX_YEARS, description="Number of whole years to project.")
    contribution_amount: float = Field(
        ...,
        ge=0,
        description="Amount contributed at the end of each contribution period.",
    )
    contribution_frequency: ContributionFrequency = Field(
        ContributionFrequency.MONTHLY,
        description="How often the contribution is made.",
    )

    @field_validator("principal", "annual_rate_percent", "years", "contribution_amount", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise PydanticCustomError("bool_not_number", "Input should be a number, not a boolean")
        return value

    def to_input(self) -> CalculationInput:
        return CalculationInput(
            principal=self.principal,
            annual_rate_percent=self.annual_rate_percent,
            years=self.years,
            contribution_amount=self.contribution_amount,
            contribution_frequency=self.contribution_frequency,
        )


class AccumulationPoint(BaseModel):
    """Single row of a year-by-year schedule."""

    year: int = Field(..., ge=0)
    balance: float


class CalculationResponse(BaseModel):
    """Projected total together with how it splits between principal and contributions."""

    total_future_value: float
    future_value_of_principal: float
    future_value_of_contributions: float
    total_contributed: float
    interest_earned: float


class ScheduleResponse(BaseModel):
    """Projected year-end balances."""

    schedule: List[AccumulationPoint]
    final_balance: float


class FrequencyOption(BaseModel):
    value: ContributionFrequency
    label: str
