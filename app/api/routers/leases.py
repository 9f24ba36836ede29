from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_use_cases
from app.api.schemas.leases import LeaseResponse, OpenLeaseRequest

router = APIRouter()


@router.post("/leases", response_model=LeaseResponse, status_code=status.HTTP_201_CREATED)
async def open_lease(
    payload: OpenLeaseRequest,
    use_cases=Depends(get_use_cases),
) -> LeaseResponse:
    return await use_cases["open_lease"].execute(
        application_id=payload.application_id,
        start_date=payload.start_date,
        monthly_amount=payload.monthly_amount,
        end_date=payload.end_date,
    )


@router.get("/leases", response_model=list[LeaseResponse])
async def list_leases(
    include_details: bool = Query(default=False),
    use_cases=Depends(get_use_cases),
) -> list[LeaseResponse]:
    return await use_cases["get_leases"].list_all(include_details=include_details)


@router.get("/leases/application/{application_id}", response_model=list[LeaseResponse])
async def list_leases_by_application(
    application_id: int,
    use_cases=Depends(get_use_cases),
) -> list[LeaseResponse]:
    return await use_cases["get_leases"].list_by_application(application_id)


@router.get("/leases/{lease_id}", response_model=LeaseResponse)
async def get_lease(
    lease_id: int,
    include_details: bool = Query(default=True),
    use_cases=Depends(get_use_cases),
) -> LeaseResponse:
    return await use_cases["get_leases"].get(lease_id, include_details=include_details)


@router.patch("/leases/{lease_id}/close", response_model=LeaseResponse)
async def close_lease(
    lease_id: int,
    use_cases=Depends(get_use_cases),
) -> LeaseResponse:
    return await use_cases["close_lease"].execute(lease_id)
