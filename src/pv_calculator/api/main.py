import logging
import math

from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware

from pv_calculator.config.settings import get_settings
from pv_calculator.api.quote_api import router as quote_router
from pv_calculator.api.schemas import CalcRequest
from pv_calculator.api.state import engine

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PV Calculator API",
    description="Rent-to-own pricing: buyout, daily rates and market check per down payment",
    version="1.0.0"
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include quote text / export API
app.include_router(quote_router)


def _finite_or_none(value):
    """JSON has no NaN or infinity; send invalid figures as null."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite_or_none(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite_or_none(v) for v in value]
    return value


@app.get("/")
async def root():
    return {"status": "online", "message": "PV Calculator API Active"}


@app.get("/defaults")
async def get_defaults():
    """Form defaults: parameters, PV values, client and car."""
    current = get_settings()
    return {
        "client_name": current.client_name,
        "car_model": current.car_model,
        "params": jsonable_encoder(current.default_parameters()),
        "pv_values": list(current.pv_values),
    }


@app.post("/calculate")
async def calculate(req: CalcRequest):
    try:
        result = engine.calculate(req.to_request())
        logger.info(f"Calculated {len(result.rows)} PV rows")
        return _finite_or_none(
            jsonable_encoder({"rows": result.rows, "warnings": result.warnings})
        )
    except Exception as e:
        logger.error(f"Calculation error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
