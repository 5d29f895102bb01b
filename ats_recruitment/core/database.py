"""
数据库配置模块

使用 SQLAlchemy 2.0 异步模式，表模型统一注册在 SQLModel.metadata 上
"""
from pathlib import Path
from typing import AsyncGenerator
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlmodel import SQLModel

from .config import settings


# 创建异步引擎
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug and settings.is_development,
    future=True,
)

# 创建异步会话工厂
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    数据库会话依赖注入

    每个请求一个事务：成功提交，异常回滚。
    业务写入与审计写入共享同一事务。

    使用方式:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db():
    """初始化数据库（创建所有表）"""
    # 导入模型以注册表结构
    from ats_recruitment import models  # noqa: F401

    # SQLite 文件库需要先建目录
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def close_db():
    """关闭数据库连接"""
    await engine.dispose()
