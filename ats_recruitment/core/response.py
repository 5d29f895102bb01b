"""
统一响应模块

列表接口统一返回分页信封:
    {
        "pagination": {"current": 1, "limit": 20, "records": 42, "pages": 3},
        "data": [...]
    }
错误响应沿用统一错误格式
"""
import math
from typing import Any, Generic, Optional, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class ResponseModel(BaseModel, Generic[T]):
    """
    统一响应模型（系统接口使用）

    示例:
        {
            "success": true,
            "code": 200,
            "message": "操作成功",
            "data": {...}
        }
    """
    success: bool = True
    code: int = 200
    message: str = "操作成功"
    data: Optional[T] = None


DictResponse = ResponseModel[dict]


class Pagination(BaseModel):
    """分页元信息"""
    current: int = Field(..., description="当前页码")
    limit: int = Field(..., description="每页数量")
    records: int = Field(..., description="总记录数")
    pages: int = Field(..., description="总页数")


class Page(BaseModel, Generic[T]):
    """分页数据模型"""
    pagination: Pagination
    data: list[T]


def page_count(records: int, limit: int) -> int:
    """总页数 = ceil(records / limit)"""
    return math.ceil(records / limit) if limit > 0 else 0


def build_page(data: list, records: int, current: int, limit: int) -> dict:
    """组装分页信封"""
    return {
        "pagination": {
            "current": current,
            "limit": limit,
            "records": records,
            "pages": page_count(records, limit),
        },
        "data": data,
    }


def success_response(
    data: Any = None,
    message: str = "操作成功",
    code: int = 200
) -> dict:
    """成功响应"""
    return {
        "success": True,
        "code": code,
        "message": message,
        "data": data
    }


def error_response(
    message: str = "操作失败",
    code: int = 400,
    data: Any = None
) -> dict:
    """错误响应"""
    return {
        "success": False,
        "code": code,
        "message": message,
        "data": data
    }
