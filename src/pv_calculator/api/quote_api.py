"""
Quote API - FastAPI router for client quote text and CSV export.
"""
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ..services.export import rows_to_csv
from .schemas import QuoteTextRequest, QuoteTextResponse
from .state import engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/quote", tags=["quote"])


@router.post("", response_model=QuoteTextResponse)
async def build_quote(req: QuoteTextRequest):
    """Render the message for the client."""
    try:
        request = req.to_request(client_name=req.client_name, car_model=req.car_model)
        text = engine.build_quote(request)
        logger.info(f"Quote built for {req.client_name} ({len(req.rows)} PV rows)")
        return QuoteTextResponse(text=text)
    except Exception as e:
        logger.error(f"Quote error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/export")
async def export_quote(req: QuoteTextRequest):
    """Download the calculated rows as CSV."""
    try:
        result = engine.calculate(req.to_request())
        csv_text = rows_to_csv(result.rows)
    except Exception as e:
        logger.error(f"Export error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="pv_quote.csv"'},
    )
