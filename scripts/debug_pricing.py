import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from pv_calculator.config.settings import get_settings
from pv_calculator.engine import PricingEngine, QuoteRequest
from pv_calculator.services import PVRowList, rows_to_frame


def debug():
    settings = get_settings()
    engine = PricingEngine()

    params = settings.default_parameters()
    rows = PVRowList(settings.pv_values)

    print("Parameters:")
    print(params)

    request = QuoteRequest(
        params=params,
        rows=rows.rows,
        client_name=settings.client_name,
        car_model=settings.car_model,
    )
    result = engine.calculate(request)

    print("\n--- PV Table ---")
    print(rows_to_frame(result.rows).to_string(index=False))

    print("\n--- Trace ---")
    print(result.get_trace_text())
    for row in result.rows:
        print(f"\nPV row {row.id}:")
        print(row.get_trace_text())

    if result.warnings:
        print("\n--- Warnings ---")
        for warning in result.warnings:
            print(f"  {warning}")

    print("\n--- Quote Text ---")
    print(engine.build_quote(request))


if __name__ == "__main__":
    debug()
