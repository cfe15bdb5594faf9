"""
History route: the pastes created from the caller's network address.
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from pistebin.client_ip import get_client_ip
from pistebin.database import PasteDatabase
from pistebin.dependencies import get_db
from pistebin.rendering import render_empty_history_page, render_history_page

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/history", response_class=HTMLResponse)
async def history(request: Request, db: PasteDatabase = Depends(get_db)):
    """
    List the caller's pastes.

    Keyed by the raw client address, not by the identity cookie, so clients
    sharing an address share a history.
    """
    client_ip = get_client_ip(request)
    pastes = await run_in_threadpool(db.list_by_creator_address, client_ip)

    if pastes is None:
        return PlainTextResponse("Error retrieving history", status_code=500)

    logger.info(f"History for {client_ip}: {len(pastes)} pastes")

    if not pastes:
        return HTMLResponse(render_empty_history_page())

    return HTMLResponse(render_history_page(pastes))
