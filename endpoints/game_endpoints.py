# game_endpoints.py
from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from persistence import (
    AsyncSaveRepository,
    InvalidSaveData,
    InvalidUserKey,
    SaveIOError,
    SaveNotFound,
    user_key,
)
from settings import DEFAULT_MAX_BODY_BYTES

router = APIRouter(prefix="/api/game", tags=["game"])
logger = logging.getLogger(__name__)

MISSING_USER = "Missing user"
INVALID_DATA = "Missing or invalid data"
DIR_READ_FAILED = "Failed to read save directory"


class InvalidJsonBody(ValueError):
    pass


def _repo(request: Request) -> AsyncSaveRepository:
    return request.app.state.save_repo


def _max_body_bytes(request: Request) -> int:
    settings = getattr(request.app.state, "settings", None)
    return settings.max_body_bytes if settings is not None else DEFAULT_MAX_BODY_BYTES


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise InvalidJsonBody(f"invalid JSON constant: {name}")


async def _read_json_body(request: Request) -> Any:
    """
    Decode the request body as JSON.

    An empty body decodes to None. Oversized bodies are rejected with 413.
    """
    limit = _max_body_bytes(request)
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise HTTPException(status_code=413, detail="request entity too large")
    # chunked bodies carry no content-length; stop reading once over the limit
    raw = bytearray()
    async for chunk in request.stream():
        raw += chunk
        if len(raw) > limit:
            raise HTTPException(status_code=413, detail="request entity too large")
    if not raw.strip():
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidJsonBody(str(e)) from e


def _text_error(message: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


def _json_error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _json_document(data: str) -> Response:
    # Stored bytes are returned verbatim.
    return Response(content=data, media_type="application/json")


# -------------------------------------------------------------------
# Game auto-save / auto-load
# -------------------------------------------------------------------
@router.post("/save")
async def save_game(request: Request, user: str | None = None) -> Response:
    if not user:
        return _text_error(MISSING_USER, 400)
    try:
        key = user_key(user)
    except InvalidUserKey as e:
        return _text_error(str(e), 400)

    try:
        payload = await _read_json_body(request)
    except InvalidJsonBody:
        return _text_error("Invalid JSON body", 400)

    try:
        await _repo(request).save(key, payload)
    except InvalidSaveData:
        return _text_error("Invalid JSON body", 400)
    except SaveIOError:
        logger.exception("save error: user=%s", key)
        return _text_error("Save failed", 500)
    return PlainTextResponse("OK")


@router.get("/load")
async def load_game(request: Request, user: str | None = None) -> Response:
    if not user:
        return _text_error(MISSING_USER, 400)
    try:
        key = user_key(user)
    except InvalidUserKey as e:
        return _text_error(str(e), 400)

    try:
        data = await _repo(request).load(key)
    except SaveIOError:
        logger.exception("load error: user=%s", key)
        return _text_error("Read failed", 500)
    if data is None:
        return JSONResponse(None)
    return _json_document(data)


# -------------------------------------------------------------------
# Admin: raw read / write / delete
# -------------------------------------------------------------------
@router.get("/rawsave")
async def read_raw_save(request: Request, user: str | None = None) -> Response:
    if not user:
        return _json_error(MISSING_USER, 400)
    try:
        key = user_key(user)
    except InvalidUserKey as e:
        return _json_error(str(e), 400)

    try:
        data = await _repo(request).raw_read(key)
    except SaveNotFound:
        return _json_error("Save not found", 404)
    except SaveIOError as e:
        logger.exception("rawsave read error: user=%s", key)
        return _json_error(str(e), 500)
    return _json_document(data)


@router.put("/rawsave")
async def write_raw_save(request: Request, user: str | None = None) -> Response:
    if not user:
        return _json_error(MISSING_USER, 400)
    try:
        key = user_key(user)
    except InvalidUserKey as e:
        return _json_error(str(e), 400)

    try:
        payload = await _read_json_body(request)
    except InvalidJsonBody:
        return _json_error(INVALID_DATA, 400)

    try:
        await _repo(request).raw_write(key, payload)
    except InvalidSaveData:
        return _json_error(INVALID_DATA, 400)
    except SaveIOError as e:
        logger.exception("rawsave write error: user=%s", key)
        return _json_error(str(e), 500)
    return JSONResponse({"ok": True, "message": "Save file updated."})


@router.delete("/rawsave")
async def delete_raw_save(request: Request, user: str | None = None) -> Response:
    if not user:
        return _json_error(MISSING_USER, 400)
    try:
        key = user_key(user)
    except InvalidUserKey as e:
        return _json_error(str(e), 400)

    try:
        await _repo(request).delete(key)
    except SaveNotFound:
        return _json_error("Save file not found", 404)
    except SaveIOError as e:
        logger.exception("delete error: user=%s", key)
        return _json_error(str(e), 500)
    return JSONResponse({"ok": True, "message": "Save file deleted."})


# -------------------------------------------------------------------
# Directory listing / disk info
# -------------------------------------------------------------------
@router.get("/list")
async def list_users(request: Request) -> Response:
    try:
        keys = await _repo(request).list_keys()
    except SaveIOError:
        logger.exception("list error")
        return _json_error(DIR_READ_FAILED, 500)
    return JSONResponse(keys)


@router.get("/files")
async def list_files(request: Request) -> Response:
    try:
        files = await _repo(request).list_files()
    except SaveIOError:
        logger.exception("files list error")
        return _json_error(DIR_READ_FAILED, 500)
    return JSONResponse([f.model_dump(mode="json") for f in files])


@router.get("/disk-info")
async def disk_info(request: Request) -> Response:
    info = await _repo(request).disk_info()
    return JSONResponse(info.to_response_doc())
