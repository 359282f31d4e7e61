# src/api/routes/health_router.py
from fastapi import APIRouter, Depends
from dependency_injector.wiring import Provide, inject

from core.config.settings import AppSettings
from core.containers.app_containers import AppContainer

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("/")
@inject
async def health_check(
    client=Depends(Provide[AppContainer.mongo_client]),
    config: AppSettings = Depends(Provide[AppContainer.config]),
):
    # 실제 MongoDB ping 테스트
    try:
        await client.admin.command("ping")
        mongo_status = "connected"
    except Exception:
        mongo_status = "disconnected"

    return {
        "status": "ok",
        "mongo": mongo_status,
        "webhook_secret": "set" if config.WEBHOOK_SECRET else "missing",
    }
