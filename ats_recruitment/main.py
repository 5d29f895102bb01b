"""
FastAPI 主应用入口

ATS 招聘管理系统后端：
    /auth/{role}/...              注册、登录、刷新令牌
    /atsRecruitment/...           公开的岗位与枚举查询
    /atsRecruitment/{role}/...    各角色的资源接口
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.routing import APIRoute
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ats_recruitment.api import api_router
from ats_recruitment.core.config import settings
from ats_recruitment.core.database import init_db, close_db
from ats_recruitment.core.exceptions import register_exception_handlers
from ats_recruitment.core.response import success_response, DictResponse

API_VERSION = "1.0.0"


def route_name_as_operation_id(route: APIRoute) -> str:
    # 路由名形如 hr_recruiter_job_postings_search，全局唯一
    return route.name


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"启动 {settings.app_name} v{API_VERSION} (env={settings.app_env}, debug={settings.debug})")
    await init_db()
    logger.info("数据库表已就绪")

    yield

    await close_db()
    logger.info("数据库连接已释放，应用退出")


def create_app() -> FastAPI:
    """
    创建 FastAPI 应用实例

    仅在 debug 模式下开放 /docs、/redoc 与 /openapi.json
    """
    docs_enabled = settings.debug
    app = FastAPI(
        title=settings.app_name,
        description="ATS 招聘管理系统 API：岗位、申请、面试、笔试、通知、导出与合规日志",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        generate_unique_id_function=route_name_as_operation_id,
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health", tags=["系统"], response_model=DictResponse, name="health_check")
    async def health_check():
        return success_response(data={"status": "healthy"})

    @app.get("/", tags=["系统"], response_model=DictResponse, name="root")
    async def root():
        return success_response(data={
            "name": settings.app_name,
            "version": API_VERSION,
            "docs": "/docs" if docs_enabled else None,
        })

    # 中间件后添加先执行，CORS 需包住异常响应
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


app = create_app()
