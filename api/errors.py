"""
Room 異常 -> HTTP 錯誤

Room 不處理錯誤轉換，所有異常都直接拋給呼叫者。
這裡提供給外部 dispatcher 使用的統一轉換：
- to_http_exception：單一異常轉成 HTTPException
- register_exception_handlers：在 FastAPI app 上註冊全域 handler
"""
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
import logging

from core.exceptions import (
    CloudRoomException,
    DuplicateClient,
    ClientNotFound,
    InvalidName,
    InvalidValue,
    VariableExists,
    VariableNotFound,
    CapacityExceeded
)

logger = logging.getLogger(__name__)

STATUS_CODES = {
    DuplicateClient: 409,
    ClientNotFound: 404,
    InvalidName: 422,
    InvalidValue: 422,
    VariableExists: 409,
    VariableNotFound: 404,
    CapacityExceeded: 409,
}


def status_code_for(exc: CloudRoomException) -> int:
    """
    取得異常對應的 HTTP status code

    沒有列在 STATUS_CODES 的 CloudRoomException（例如直接拋出基類）回傳 400
    """
    for exc_type, status_code in STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return status_code
    return 400


def to_http_exception(exc: CloudRoomException) -> HTTPException:
    """
    將 Room 異常轉成 HTTPException

    範例：
        try:
            room.set(name, value)
        except CloudRoomException as e:
            raise to_http_exception(e)
    """
    return HTTPException(
        status_code=status_code_for(exc),
        detail={"code": type(exc).__name__, "message": str(exc)}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """註冊全域 handler，讓未被攔截的 Room 異常回傳一致的 JSON 錯誤"""

    @app.exception_handler(CloudRoomException)
    async def handle_room_exception(request: Request, exc: CloudRoomException):
        status_code = status_code_for(exc)
        logger.info(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "code": type(exc).__name__}
        )
