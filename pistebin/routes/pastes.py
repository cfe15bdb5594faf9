"""
Paste routes.
Handles create (API), rendered view (HTML) and raw view (plain text).
"""
import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from pistebin.client_ip import get_client_ip
from pistebin.config import Settings
from pistebin.database import PasteDatabase
from pistebin.dependencies import get_db, get_settings
from pistebin.identity import resolve_identity
from pistebin.models import ErrorResponse, PasteCreate, PasteSaved
from pistebin.rendering import NOT_FOUND_HTML, render_paste_page
from pistebin.utils import generate_paste_id, is_blank

router = APIRouter()
logger = logging.getLogger(__name__)

EMPTY_CONTENT_MESSAGE = "Content cannot be empty"
SAVE_FAILED_MESSAGE = "Failed to save paste"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON failure envelope used by the API."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


@router.post(
    "/api/save",
    response_model=PasteSaved,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def save_paste(
    paste: PasteCreate,
    request: Request,
    response: Response,
    db: PasteDatabase = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Create a new paste.

    Args:
        paste: Paste data (content)
        request: HTTP request context, source of the client address and cookie
        response: Receives the identity cookie when one is issued

    Returns:
        Paths of the rendered and raw views plus the client identity
    """
    if paste.content is None or is_blank(paste.content):
        return error_response(400, EMPTY_CONTENT_MESSAGE)

    client_ip = get_client_ip(request)
    user_id = resolve_identity(request, response, settings)

    paste_id = generate_paste_id()
    success = await run_in_threadpool(db.insert, paste_id, paste.content, client_ip)

    if not success:
        failure = error_response(500, SAVE_FAILED_MESSAGE)
        # keep the identity cookie issued above
        for cookie in response.headers.getlist("set-cookie"):
            failure.headers.append("set-cookie", cookie)
        return failure

    return PasteSaved(
        url=f"/paste/{paste_id}",
        rawUrl=f"/raw/{paste_id}",
        userId=user_id,
    )


@router.get("/paste/{paste_id}", response_class=HTMLResponse)
async def view_paste(
    paste_id: str,
    request: Request,
    db: PasteDatabase = Depends(get_db),
):
    """
    View a paste as HTML, with a raw link and a copy button.
    Anyone holding the id may view it.
    """
    paste = await run_in_threadpool(db.get_by_id, paste_id)

    if paste is None:
        return HTMLResponse(NOT_FOUND_HTML, status_code=404)

    raw_url = str(request.url_for("raw_paste", paste_id=paste_id))
    return HTMLResponse(render_paste_page(paste.content, raw_url))


@router.get("/raw/{paste_id}", response_class=PlainTextResponse)
async def raw_paste(paste_id: str, db: PasteDatabase = Depends(get_db)):
    """Return the paste content verbatim as text/plain."""
    paste = await run_in_threadpool(db.get_by_id, paste_id)

    if paste is None:
        return PlainTextResponse("Paste not found", status_code=404)

    return PlainTextResponse(paste.content)
