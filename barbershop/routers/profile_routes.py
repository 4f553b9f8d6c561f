# barbershop/routers/profile_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException

from barbershop.auth import get_current_user
from barbershop.backend import BackendError, QueryClient
from barbershop.deps import backend_failure, get_client
from barbershop.schemas import ProfilePublic, ProfileUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/profile",
    tags=["profile"],
)

PROFILE_NOT_FOUND = "Perfil não encontrado"


def to_public(p: dict, email: str) -> dict:
    return {
        "id": p["id"],
        "user_id": p["user_id"],
        "email": email,
        "full_name": p.get("full_name") or "",
        "phone": p.get("phone"),
        "avatar_url": p.get("avatar_url"),
    }


@router.get("", response_model=ProfilePublic)
def get_profile(
    client: QueryClient = Depends(get_client),
    current_user: dict = Depends(get_current_user),
):
    try:
        found = client.select("profiles", filters={"user_id": current_user["id"]})
    except BackendError as e:
        raise backend_failure(e, "Não foi possível carregar o perfil")
    if not found:
        raise HTTPException(status_code=404, detail=PROFILE_NOT_FOUND)
    return to_public(found[0], current_user["email"])


@router.put("", response_model=ProfilePublic)
def update_profile(
    data: ProfileUpdate,
    client: QueryClient = Depends(get_client),
    current_user: dict = Depends(get_current_user),
):
    full_name = data.full_name.strip()
    if not full_name:
        raise HTTPException(status_code=422, detail="O nome completo é obrigatório")
    phone = data.phone.strip() if data.phone else ""

    # Only name and phone are editable; email belongs to the account
    try:
        updated = client.update(
            "profiles",
            {"full_name": full_name, "phone": phone or None},
            filters={"user_id": current_user["id"]},
        )
    except BackendError as e:
        raise backend_failure(e, "Não foi possível salvar as alterações")
    if not updated:
        raise HTTPException(status_code=404, detail=PROFILE_NOT_FOUND)

    logger.info(f"Profile updated for user {current_user['id']}")
    return to_public(updated[0], current_user["email"])
