from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.api.schemas.applications import ApplicationResponse, LeaseSummary, PositiveMoney


class OpenLeaseRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    application_id: int = Field(gt=0)
    start_date: date
    monthly_amount: PositiveMoney
    end_date: date | None = None


class LeaseResponse(LeaseSummary):
    model_config = ConfigDict(json_encoders={Decimal: lambda v: format(v, ".2f")})

    application: ApplicationResponse | None = None
