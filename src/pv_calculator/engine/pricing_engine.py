"""
PV Pricing Engine - rent-to-own pricing rows with traceability.

For every candidate down payment (PV) the engine derives:
- Total buyout over the contract term
- Daily rates for >15 and <15 day rentals, rounded up to 50
- Market check (half of the buyout) and percent of the car price
- Check status against the reference car price

The buyout is the primary quantity. The daily rate is derived backward
from it, so the order of the steps in calculate_row must not change.
"""
import logging
import math
from typing import Optional

from .models import (
    CalculationRow,
    CheckStatus,
    PVRow,
    PricingParameters,
    QuoteRequest,
    QuoteResult,
)
from .quote_text import build_quote_text
from .rounding import RATE_STEP, round_half_up, round_up_to_step

logger = logging.getLogger(__name__)

# Every unit of down payment reduces the buyout by this factor
PV_MULTIPLIER = 1.8

GOOD_RANGE = (90.0, 110.0)
WARNING_RANGE = (80.0, 120.0)


def _divide(numerator: float, denominator: float) -> float:
    # IEEE semantics: x/0 -> ±inf, 0/0 -> nan
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _floor_at_zero(value: float) -> float:
    if math.isnan(value):
        return value
    return max(0, value)


def get_check_status(percent: float) -> CheckStatus:
    """
    Classify a buyout by its percent of the car price.

    good:    90 <= percent <= 110
    warning: 80 <= percent < 90 or 110 < percent <= 120
    bad:     everything else (including NaN)
    """
    good_low, good_high = GOOD_RANGE
    warn_low, warn_high = WARNING_RANGE

    if good_low <= percent <= good_high:
        return CheckStatus.GOOD
    if warn_low <= percent < good_low or good_high < percent <= warn_high:
        return CheckStatus.WARNING
    return CheckStatus.BAD


def calculate_row(
    pv: float,
    rate_at_zero: float,
    diff_under_15: float,
    days_in_month: float,
    months: float,
    car_price: float,
    row_id: Optional[int] = None,
) -> CalculationRow:
    """
    Calculate all figures for a single PV amount.

    Args:
        pv: Down payment amount
        rate_at_zero: >15 day rate per day when PV is zero
        diff_under_15: Surcharge per day for rentals under 15 days
        days_in_month: Days per month used for the term
        months: Contract term in months
        car_price: Reference market price of the car
        row_id: Caller id of the PV row, copied to the result

    Returns:
        CalculationRow with rates, buyout, check figures and trace
    """
    # 1. Buyout without PV: rate × days × months
    base_buyout = round_half_up(rate_at_zero * days_in_month * months)

    # 2. Buyout with PV, never below zero
    total_buyout = _floor_at_zero(round_half_up(base_buyout - pv * PV_MULTIPLIER))

    # 3. Daily rate derived backward from the buyout
    rate_over_15 = _divide(_divide(total_buyout, days_in_month), months)
    rate_over_15_rounded = round_up_to_step(rate_over_15)

    rate_under_15 = rate_over_15_rounded + diff_under_15
    rate_under_15_rounded = round_up_to_step(rate_under_15)

    market_check = round_half_up(total_buyout / 2)

    percent_from_car_price = total_buyout / car_price * 100 if car_price > 0 else 0

    row = CalculationRow(
        id=row_id,
        pv=pv,
        rate_over_15=rate_over_15,
        rate_over_15_rounded=rate_over_15_rounded,
        rate_under_15=rate_under_15,
        rate_under_15_rounded=rate_under_15_rounded,
        total_buyout=total_buyout,
        market_check=market_check,
        percent_from_car_price=percent_from_car_price,
        check_status=get_check_status(percent_from_car_price),
    )

    row.add_trace("Base Buyout", f"{rate_at_zero} × {days_in_month} × {months}", f"{base_buyout:,}")
    row.add_trace("PV Reduction", f"{base_buyout:,} − {pv:,} × {PV_MULTIPLIER}", f"{total_buyout:,}")
    row.add_trace("Rate >15", f"{total_buyout:,} / {days_in_month} / {months}", f"{rate_over_15:,.2f}")
    row.add_trace("Rate >15 Rounded", f"Up to {RATE_STEP}", f"{rate_over_15_rounded:,}")
    row.add_trace("Rate <15", f"{rate_over_15_rounded:,} + {diff_under_15:,}, up to {RATE_STEP}", f"{rate_under_15_rounded:,}")
    row.add_trace("Market Check", "Buyout / 2", f"{market_check:,}")
    row.add_trace("Check Status", f"{percent_from_car_price:.2f}% of car price", row.check_status.value)

    return row


def calculate_rows(params: PricingParameters, rows: list[PVRow]) -> list[CalculationRow]:
    """Calculate one CalculationRow per PV row, in input order."""
    return [
        calculate_row(
            row.pv,
            params.rate_at_zero,
            params.diff_under_15,
            params.days_in_month,
            params.months,
            params.car_price,
            row_id=row.id,
        )
        for row in rows
    ]


def _is_finite_row(row: CalculationRow) -> bool:
    figures = (
        row.rate_over_15,
        row.rate_over_15_rounded,
        row.rate_under_15_rounded,
        row.total_buyout,
        row.market_check,
        row.percent_from_car_price,
    )
    return all(math.isfinite(v) for v in figures)


class PricingEngine:
    """
    Stateless pricing engine for a calculation session.

    Each call is fully determined by its request, so the caller may
    recompute on every edit without coordination.
    """

    def calculate(self, request: QuoteRequest) -> QuoteResult:
        """
        Calculate all PV rows with warnings and trace.

        Args:
            request: QuoteRequest with parameters and PV rows

        Returns:
            QuoteResult with rows in the order of request.rows
        """
        params = request.params
        result = QuoteResult(params=params, rows=calculate_rows(params, request.rows))

        result.add_trace("Parameters", "Rate at PV=0", f"{params.rate_at_zero:,}")
        result.add_trace("Parameters", "Term", f"{params.months} × {params.days_in_month} days")
        result.add_trace("Rows", "PV rows calculated", str(len(result.rows)))

        for row in result.rows:
            if not _is_finite_row(row):
                result.add_warning(f"PV row {row.id}: invalid figures, check the parameters")
            elif row.check_status == CheckStatus.BAD:
                result.add_warning(
                    f"PV row {row.id}: buyout is {row.percent_from_car_price:.1f}% of the car price"
                )

        logger.debug(
            f"Calculated {len(result.rows)} PV rows ({len(result.warnings)} warnings)"
        )
        return result

    def build_quote(self, request: QuoteRequest) -> str:
        """Calculate the rows and render the client quote text."""
        result = self.calculate(request)
        return build_quote_text(
            request.client_name,
            request.car_model,
            request.params.deposit,
            request.params.months,
            result.rows,
        )
