from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_use_cases
from app.api.schemas.applications import (
    AcceptApplicationRequest,
    ApplicationResponse,
    CreateApplicationRequest,
    RejectApplicationRequest,
    TransitionApplicationResponse,
)

router = APIRouter()


@router.post(
    "/applications",
    response_model=ApplicationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_application(
    payload: CreateApplicationRequest,
    use_cases=Depends(get_use_cases),
) -> ApplicationResponse:
    return await use_cases["create_application"].execute(request=payload)


@router.get("/applications", response_model=list[ApplicationResponse])
async def list_applications(
    include_details: bool = Query(default=False),
    use_cases=Depends(get_use_cases),
) -> list[ApplicationResponse]:
    return await use_cases["get_applications"].list_all(include_details=include_details)


@router.get("/applications/user/{user_id}", response_model=list[ApplicationResponse])
async def list_applications_by_user(
    user_id: int,
    use_cases=Depends(get_use_cases),
) -> list[ApplicationResponse]:
    return await use_cases["get_applications"].list_by_user(user_id)


@router.get("/applications/property/{property_id}", response_model=list[ApplicationResponse])
async def list_applications_by_property(
    property_id: int,
    use_cases=Depends(get_use_cases),
) -> list[ApplicationResponse]:
    return await use_cases["get_applications"].list_by_property(property_id)


@router.get("/applications/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: int,
    include_details: bool = Query(default=True),
    use_cases=Depends(get_use_cases),
) -> ApplicationResponse:
    return await use_cases["get_applications"].get(application_id, include_details=include_details)


@router.post(
    "/applications/{application_id}/accept",
    response_model=TransitionApplicationResponse,
)
async def accept_application(
    application_id: int,
    payload: AcceptApplicationRequest,
    use_cases=Depends(get_use_cases),
) -> TransitionApplicationResponse:
    return await use_cases["transition_application"].accept(
        application_id=application_id,
        actor_id=payload.actor_id,
        lease=payload.lease,
    )


@router.post(
    "/applications/{application_id}/reject",
    response_model=TransitionApplicationResponse,
)
async def reject_application(
    application_id: int,
    payload: RejectApplicationRequest,
    use_cases=Depends(get_use_cases),
) -> TransitionApplicationResponse:
    return await use_cases["transition_application"].reject(
        application_id=application_id,
        actor_id=payload.actor_id,
    )
