# barbershop/routers/services_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from barbershop.backend import BackendError, QueryClient
from barbershop.core import SERVICE_NOT_FOUND, format_duration, format_price
from barbershop.deps import backend_failure, get_client
from barbershop.schemas import ServicePublic

router = APIRouter(
    prefix="/services",
    tags=["services"],
)

LOAD_ERROR = "Não foi possível carregar os serviços"


def to_public(s: dict) -> dict:
    return {
        "id": s["id"],
        "name": s["name"],
        "description": s["description"],
        "price": s["price"],
        "duration": s["duration"],
        "price_display": format_price(s["price"]),
        "duration_display": format_duration(s["duration"]),
    }


@router.get("", response_model=List[ServicePublic])
def list_services(client: QueryClient = Depends(get_client)):
    try:
        services = client.select("services", filters={"is_active": True}, order_by="name")
    except BackendError as e:
        raise backend_failure(e, LOAD_ERROR)
    return [to_public(s) for s in services]


@router.get("/{service_id}", response_model=ServicePublic)
def get_service(service_id: int, client: QueryClient = Depends(get_client)):
    try:
        found = client.select("services", filters={"id": service_id, "is_active": True})
    except BackendError as e:
        raise backend_failure(e, LOAD_ERROR)
    if not found:
        raise HTTPException(status_code=404, detail=SERVICE_NOT_FOUND)
    return to_public(found[0])
