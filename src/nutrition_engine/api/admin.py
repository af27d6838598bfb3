"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from nutrition_engine.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.delete("/cache/tags/{tag}", dependencies=[Depends(require_admin)])
async def clear_cache_tag(tag: str, request: Request) -> dict[str, object]:
    """Delete cached results carrying a tag."""
    container: AppContainer = request.app.state.container
    return {"tag": tag, "deleted": await container.result_cache.clear_by_tag(tag)}


@router.delete("/cache/owners/{owner_id}", dependencies=[Depends(require_admin)])
async def clear_cache_owner(owner_id: str, request: Request) -> dict[str, object]:
    """Delete cached results owned by one caller."""
    container: AppContainer = request.app.state.container
    deleted = await container.result_cache.clear_owner(owner_id)
    return {"owner_id": owner_id, "deleted": deleted}


@router.post("/cache/purge", dependencies=[Depends(require_admin)])
async def purge_expired_cache(request: Request) -> dict[str, object]:
    """Delete every expired cached result."""
    container: AppContainer = request.app.state.container
    return {"deleted": await container.result_cache.purge_expired()}
