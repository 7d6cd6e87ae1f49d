"""Command line access to the calculator through ``flask calculate``."""

import logging
from typing import Optional

import click
from pydantic import ValidationError

from compound_interest.core.accumulation import calculate_schedule, compute
from compound_interest.schemas.accumulation import REQUIRED_FIELDS_MESSAGE, CalculationRequest

logger = logging.getLogger(__name__)


@click.command("calculate")
@click.option("--principal", help="Initial amount invested.")
@click.option("--rate", "annual_rate_percent", help="Annual interest rate in percent.")
@click.option("--years", help="Number of whole years.")
@click.option("--contribution", "contribution_amount", help="Amount contributed each period.")
@click.option(
    "--frequency",
    "contribution_frequency",
    default="monthly",
    show_default=True,
    help="Contribution frequency: monthly or annually.",
)
@click.option("--schedule", is_flag=True, help="Also print the balance at the end of each year.")
def calculate_command(
    principal: Optional[str],
    annual_rate_percent: Optional[str],
    years: Optional[str],
    contribution_amount: Optional[str],
    contribution_frequency: str,
    schedule: bool,
) -> None:
    """Print the projected future value of an investment."""
    try:
        request = CalculationRequest.model_validate(
            {
                "principal": principal,
                "annual_rate_percent": annual_rate_percent,
                "years": years,
                "contribution_amount": contribution_amount,
                "contribution_frequency": contribution_frequency,
            }
        )
    except ValidationError as exc:
        logger.warning("Rejected calculation input: %d error(s)", exc.error_count())
        raise click.ClickException(REQUIRED_FIELDS_MESSAGE) from exc

    calculation = request.to_input()
    if schedule:
        for point in calculate_schedule(calculation):
            click.echo(f"{point.year}\t{point.balance!r}")

    result = compute(calculation)
    click.echo(f"Total future value: {result.total_future_value!r}")
