"""
测试配置文件

提供测试用的 fixtures：内存数据库、测试客户端、测试数据工厂等
"""
import os

# 必须在导入应用前设置，配置在导入时加载
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DEBUG", "false")

from dataclasses import dataclass, field
from typing import AsyncGenerator, Optional

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from ats_recruitment.core.database import get_db
from ats_recruitment.main import create_app

ADMIN = "/atsRecruitment/systemAdmin"
HR = "/atsRecruitment/hrRecruiter"
REVIEWER = "/atsRecruitment/techReviewer"
APPLICANT = "/atsRecruitment/applicant"
PUBLIC = "/atsRecruitment"

PASSWORD = "password123"


# ========== 测试数据工厂 ==========

@dataclass
class DataFactory:
    """
    测试数据工厂类

    集中管理测试数据创建，避免各测试文件重复代码
    参与者返回注册响应（含 token），可直接传给 headers()
    """
    client: AsyncClient
    _counter: int = field(default=0, repr=False)
    _admin: Optional[dict] = field(default=None, repr=False)

    def _next_id(self) -> str:
        """生成唯一后缀，避免数据冲突"""
        self._counter += 1
        return str(self._counter)

    @staticmethod
    def headers(actor: dict) -> dict:
        return {"Authorization": f"Bearer {actor['token']['access']}"}

    # ---------- 参与者 ----------

    async def join(self, role: str, **overrides) -> dict:
        """注册指定角色的参与者"""
        suffix = self._next_id()
        data = {
            "email": f"{role.lower()}{suffix}@example.com",
            "name": f"测试{role}{suffix}",
            "password": PASSWORD,
            **overrides
        }
        resp = await self.client.post(f"/auth/{role}/join", json=data)
        assert resp.status_code == 201, f"注册 {role} 失败: {resp.text}"
        return resp.json()

    async def admin(self) -> dict:
        """共享的系统管理员（首次调用时注册）"""
        if self._admin is None:
            self._admin = await self.join("systemAdmin")
        return self._admin

    async def hr(self, **overrides) -> dict:
        return await self.join("hrRecruiter", **overrides)

    async def reviewer(self, **overrides) -> dict:
        return await self.join("techReviewer", **overrides)

    async def applicant(self, **overrides) -> dict:
        return await self.join("applicant", **{"phone": "13800138000", **overrides})

    # ---------- 岗位 ----------

    async def create_employment_type(self, **overrides) -> dict:
        suffix = self._next_id()
        data = {"name": f"全职{suffix}", "description": "测试雇佣类型", **overrides}
        resp = await self.client.post(
            f"{ADMIN}/jobEmploymentTypes", json=data, headers=self.headers(await self.admin())
        )
        assert resp.status_code == 201, f"创建雇佣类型失败: {resp.text}"
        return resp.json()

    async def create_posting_state(self, **overrides) -> dict:
        suffix = self._next_id()
        data = {"state_code": f"open{suffix}", "label": "招聘中", **overrides}
        resp = await self.client.post(
            f"{ADMIN}/jobPostingStates", json=data, headers=self.headers(await self.admin())
        )
        assert resp.status_code == 201, f"创建岗位状态失败: {resp.text}"
        return resp.json()

    async def create_posting(
        self,
        hr: dict,
        employment_type_id: Optional[str] = None,
        state_id: Optional[str] = None,
        **overrides
    ) -> dict:
        """HR 创建岗位，自动创建依赖的雇佣类型和岗位状态"""
        if employment_type_id is None:
            employment_type_id = (await self.create_employment_type())["id"]
        if state_id is None:
            state_id = (await self.create_posting_state())["id"]

        suffix = self._next_id()
        data = {
            "hr_recruiter_id": hr["id"],
            "job_employment_type_id": employment_type_id,
            "job_posting_state_id": state_id,
            "title": f"后端工程师{suffix}",
            "description": "负责招聘系统后端开发",
            "location": "上海",
            "salary_range_min": 10000,
            "salary_range_max": 20000,
            **overrides
        }
        resp = await self.client.post(f"{HR}/jobPostings", json=data, headers=self.headers(hr))
        assert resp.status_code == 201, f"创建岗位失败: {resp.text}"
        return resp.json()

    # ---------- 应聘 ----------

    async def create_resume(self, applicant: dict, **overrides) -> dict:
        data = {"title": "我的简历", "skills_summary": "Python, FastAPI", **overrides}
        resp = await self.client.post(f"{APPLICANT}/resumes", json=data, headers=self.headers(applicant))
        assert resp.status_code == 201, f"创建简历失败: {resp.text}"
        return resp.json()

    async def create_application(self, applicant: dict, posting_id: str, **overrides) -> dict:
        data = {"job_posting_id": posting_id, **overrides}
        resp = await self.client.post(
            f"{APPLICANT}/applications", json=data, headers=self.headers(applicant)
        )
        assert resp.status_code == 201, f"创建申请失败: {resp.text}"
        return resp.json()

    async def application_setup(self) -> dict:
        """HR + 岗位 + 应聘者 + 申请"""
        hr = await self.hr()
        posting = await self.create_posting(hr)
        applicant = await self.applicant()
        application = await self.create_application(applicant, posting["id"])
        return {"hr": hr, "posting": posting, "applicant": applicant, "application": application}


# ========== 数据库与客户端 ==========

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    每个测试函数独立的内存数据库

    StaticPool 保证同一测试内所有会话共享同一个内存库
    """
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """直接操作 CRUD 层时使用的会话"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncClient, None]:
    """
    提供测试用的 HTTP 客户端

    覆盖 get_db 依赖：每个请求一个会话、一个事务，与生产一致
    """
    app = create_app()

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def factory(client: AsyncClient) -> DataFactory:
    """提供测试数据工厂实例"""
    return DataFactory(client=client)
