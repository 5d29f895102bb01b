"""
异常处理模块

业务异常按 HTTP 状态码分类，统一由全局处理器转换为错误信封：
    {"success": false, "code": <状态码>, "message": <说明>, "data": <附加信息>}
"""
from typing import Any, Optional
from fastapi import FastAPI, Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from loguru import logger

from .response import error_response


class AppException(Exception):
    """应用基础异常，子类只需声明 code 与默认说明"""

    code: int = 500
    default_message: str = "服务器内部错误"

    def __init__(self, message: Optional[str] = None, data: Any = None):
        self.message = message or self.default_message
        self.data = data
        super().__init__(self.message)

    @property
    def headers(self) -> Optional[dict]:
        return None


class BadRequestException(AppException):
    """请求参数不满足业务规则（区间、时间窗口、状态值等）"""
    code = 400
    default_message = "请求参数错误"


class UnauthorizedException(AppException):
    """令牌缺失、无效或过期；登录凭据错误"""
    code = 401
    default_message = "未认证或令牌无效"

    @property
    def headers(self) -> Optional[dict]:
        return {"WWW-Authenticate": "Bearer"}


class ForbiddenException(AppException):
    """角色不符、账号停用或非资源所有者"""
    code = 403
    default_message = "无权执行此操作"


class NotFoundException(AppException):
    """记录不存在或已被软删除，或不在调用者的可见范围内"""
    code = 404
    default_message = "资源不存在"


class ConflictException(AppException):
    """唯一性冲突、仍被引用或状态不允许"""
    code = 409
    default_message = "资源冲突"


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.warning(f"{type(exc).__name__}({exc.code}): {exc.message} | {request.method} {request.url.path}")
    return JSONResponse(
        status_code=exc.code,
        content=error_response(message=exc.message, code=exc.code, data=exc.data),
        headers=exc.headers,
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """框架层 HTTP 异常（未匹配路由、方法不允许等）"""
    logger.warning(f"HTTPException({exc.status_code}): {exc.detail} | {request.method} {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(message=str(exc.detail), code=exc.status_code),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """请求体 / 路径 / 查询参数校验失败 -> 422，data.errors 为逐字段明细"""
    errors = jsonable_encoder(exc.errors())
    summary = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in errors
    )
    logger.warning(f"ValidationError: {summary} | {request.method} {request.url.path}")
    return JSONResponse(
        status_code=422,
        content=error_response(message="请求参数验证失败", code=422, data={"errors": errors}),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled Exception: {exc} | {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=error_response(message=AppException.default_message, code=500),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """注册全局异常处理器"""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
