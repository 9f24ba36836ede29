"""Conversión de entidades de dominio a los modelos de respuesta de la API."""

from app.api.schemas.applications import (
    ApplicationResponse,
    LeaseSummary,
    PropertySummary,
    UserSummary,
)
from app.api.schemas.leases import LeaseResponse
from app.domain.entities.application import Application
from app.domain.entities.lease import LeaseRecord
from app.domain.entities.profiles import PropertyProfile, UserProfile


def user_summary(user: UserProfile | None) -> UserSummary | None:
    if user is None:
        return None
    return UserSummary(id=user.id, name=user.name, email=user.email, role=user.role.value)


def property_summary(prop: PropertyProfile | None) -> PropertySummary | None:
    if prop is None:
        return None
    return PropertySummary(
        id=prop.id,
        title=prop.title,
        monthly_price=prop.monthly_price,
        available=prop.available,
        owner_id=prop.owner_id,
    )


def application_response(
    application: Application,
    user: UserProfile | None = None,
    prop: PropertyProfile | None = None,
) -> ApplicationResponse:
    return ApplicationResponse(
        id=application.id,
        user_id=application.user_id,
        property_id=application.property_id,
        state=application.state,
        created_at=application.created_at,
        user=user_summary(user),
        property=property_summary(prop),
    )


def lease_summary(lease: LeaseRecord) -> LeaseSummary:
    return LeaseSummary(
        id=lease.id,
        application_id=lease.application_id,
        start_date=lease.start_date,
        end_date=lease.end_date,
        monthly_amount=lease.monthly_amount,
        active=lease.active,
    )


def lease_response(
    lease: LeaseRecord,
    application: ApplicationResponse | None = None,
) -> LeaseResponse:
    return LeaseResponse(**lease_summary(lease).model_dump(), application=application)
