from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, condecimal

from app.domain.entities.application import ApplicationState

Money = condecimal(max_digits=14, decimal_places=2)
PositiveMoney = condecimal(gt=0, max_digits=14, decimal_places=2)


class CreateApplicationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    user_id: int = Field(gt=0)
    property_id: int = Field(gt=0)


class LeaseTermsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    start_date: date
    monthly_amount: PositiveMoney
    end_date: date | None = None


class AcceptApplicationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    actor_id: int = Field(gt=0)
    lease: LeaseTermsRequest | None = None


class RejectApplicationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    actor_id: int = Field(gt=0)


class UserSummary(BaseModel):
    id: int
    name: str | None = None
    email: str | None = None
    role: str


class PropertySummary(BaseModel):
    model_config = ConfigDict(json_encoders={Decimal: lambda v: format(v, ".2f")})

    id: int
    title: str | None = None
    monthly_price: Money | None = None
    available: bool
    owner_id: int | None = None


class ApplicationResponse(BaseModel):
    id: int
    user_id: int
    property_id: int
    state: ApplicationState
    created_at: datetime | None = None
    user: UserSummary | None = None
    property: PropertySummary | None = None


class LeaseSummary(BaseModel):
    model_config = ConfigDict(json_encoders={Decimal: lambda v: format(v, ".2f")})

    id: int
    application_id: int
    start_date: date
    end_date: date | None = None
    monthly_amount: Money
    active: bool


class TransitionApplicationResponse(ApplicationResponse):
    lease: LeaseSummary | None = None
