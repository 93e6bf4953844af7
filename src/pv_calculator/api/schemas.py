"""
Pydantic request models for the PV calculator API.

Field constraints enforce the caller contract of the engine, which
itself performs no validation.
"""
from pydantic import BaseModel, Field

from ..engine.models import PricingParameters, PVRow, QuoteRequest


class ParamsModel(BaseModel):
    """Pricing parameters of a calculation session."""
    car_price: float = Field(ge=0)
    deposit: float = 0
    rate_at_zero: float = Field(gt=0)
    diff_under_15: float = 0
    days_in_month: float = Field(30.5, gt=0)
    months: int = Field(55, ge=1)

    def to_parameters(self) -> PricingParameters:
        return PricingParameters(**self.model_dump())


class PVRowModel(BaseModel):
    id: int
    pv: float


class CalcRequest(BaseModel):
    """Request model for calculating PV rows."""
    params: ParamsModel
    rows: list[PVRowModel]

    def to_request(self, client_name: str = "", car_model: str = "") -> QuoteRequest:
        return QuoteRequest(
            params=self.params.to_parameters(),
            rows=[PVRow(id=r.id, pv=r.pv) for r in self.rows],
            client_name=client_name,
            car_model=car_model,
        )


class QuoteTextRequest(CalcRequest):
    """Request model for the client quote text."""
    client_name: str
    car_model: str


class QuoteTextResponse(BaseModel):
    text: str
