# src/api/routes/webhook_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import PlainTextResponse
from dependency_injector.wiring import Provide, inject

from core.config.settings import AppSettings
from core.containers.app_containers import AppContainer
from core.logging.logger import get_logger
from sync.github.event_dispatcher import EventDispatcher
from sync.github.signature import verify_signature

router = APIRouter(tags=["Webhook"])
logger = get_logger(__name__)


@router.post("/webhook", response_class=PlainTextResponse)
@inject
async def receive_webhook(
    request: Request,
    x_hub_signature_256: Optional[str] = Header(default=None),
    config: AppSettings = Depends(Provide[AppContainer.config]),
    dispatcher: EventDispatcher = Depends(Provide[AppContainer.event_dispatcher]),
):
    if not config.WEBHOOK_SECRET:
        logger.error("WEBHOOK_SECRET is not set, rejecting webhook")
        return PlainTextResponse("Webhook secret not set", status_code=500)

    # 서명은 raw body 기준. 검증 전에는 절대 파싱하지 않음
    raw_body = await request.body()
    if not verify_signature(raw_body, x_hub_signature_256, config.WEBHOOK_SECRET):
        client_host = request.client.host if request.client else "unknown"
        logger.warning(f"Invalid signature from {client_host}")
        return PlainTextResponse("Invalid signature", status_code=401)

    outcome = await dispatcher.dispatch(raw_body)
    return PlainTextResponse(outcome.message, status_code=outcome.status_code)
