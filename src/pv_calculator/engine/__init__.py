"""Engine subpackage - PV pricing rows, check status and quote text."""
from .pricing_engine import PricingEngine, calculate_row, calculate_rows, get_check_status
from .quote_text import build_quote_text, format_amount
from .models import (
    CalculationRow,
    CheckStatus,
    PVRow,
    PricingParameters,
    QuoteRequest,
    QuoteResult,
)

__all__ = [
    'PricingEngine', 'calculate_row', 'calculate_rows', 'get_check_status',
    'build_quote_text', 'format_amount',
    'CalculationRow', 'CheckStatus', 'PVRow', 'PricingParameters',
    'QuoteRequest', 'QuoteResult',
]
