"""
Export of calculated PV rows to tabular formats.
"""
import pandas as pd

from ..engine.models import CalculationRow

EXPORT_COLUMNS = [
    'ID', 'PV', 'Rate >15', 'Rate >15 Rounded', 'Rate <15', 'Rate <15 Rounded',
    'Total Buyout', 'Market Check', '% of Car Price', 'Status',
]


def rows_to_frame(rows: list[CalculationRow]) -> pd.DataFrame:
    """Build a DataFrame with one line per PV row, in row order."""
    frame = pd.DataFrame([{
        'ID': row.id,
        'PV': row.pv,
        'Rate >15': row.rate_over_15,
        'Rate >15 Rounded': row.rate_over_15_rounded,
        'Rate <15': row.rate_under_15,
        'Rate <15 Rounded': row.rate_under_15_rounded,
        'Total Buyout': row.total_buyout,
        'Market Check': row.market_check,
        '% of Car Price': row.percent_from_car_price,
        'Status': row.check_status.value,
    } for row in rows], columns=EXPORT_COLUMNS)
    return frame


def rows_to_csv(rows: list[CalculationRow]) -> str:
    """CSV text of rows_to_frame, percent rounded to two decimals."""
    frame = rows_to_frame(rows)
    frame['% of Car Price'] = frame['% of Car Price'].round(2)
    return frame.to_csv(index=False)
