"""
Data models for the PV pricing engine.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class CheckStatus(str, Enum):
    """Market check band of a buyout relative to the car price."""
    GOOD = "good"
    WARNING = "warning"
    BAD = "bad"


@dataclass
class TraceStep:
    """A single step in the calculation trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class PricingParameters:
    """Pricing inputs shared by every PV row of a calculation session."""
    car_price: float  # reference market price of the car
    deposit: float
    rate_at_zero: float  # >15 day rate per day at PV = 0
    diff_under_15: float  # surcharge per day for rentals under 15 days
    days_in_month: float = 30.5
    months: int = 55


@dataclass(frozen=True)
class PVRow:
    """A candidate down payment (PV) entered by the caller."""
    id: int
    pv: float


@dataclass
class CalculationRow:
    """All figures derived for a single PV amount."""
    pv: float
    rate_over_15: float
    rate_over_15_rounded: float
    rate_under_15: float
    rate_under_15_rounded: float
    total_buyout: float
    market_check: float  # total_buyout / 2
    percent_from_car_price: float  # total_buyout / car_price * 100
    check_status: CheckStatus
    id: Optional[int] = None
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace for this row."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)


@dataclass
class QuoteRequest:
    """A pricing request: session parameters plus the PV rows to price."""
    params: PricingParameters
    rows: list[PVRow]

    # Only used by the quote text
    client_name: str = ""
    car_model: str = ""


@dataclass
class QuoteResult:
    """Complete result of a pricing calculation."""
    params: PricingParameters
    rows: list[CalculationRow]
    warnings: list[str] = field(default_factory=list)
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the result-level trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def add_warning(self, warning: str):
        """Add a result-level warning."""
        self.warnings.append(warning)

    def get_trace_text(self) -> str:
        """Get human-readable result trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)
