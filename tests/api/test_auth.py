"""
认证与角色授权测试
"""
import pytest
from httpx import AsyncClient
from tests.conftest import ADMIN, APPLICANT, HR, PASSWORD, DataFactory


@pytest.mark.asyncio
async def test_join_returns_actor_and_tokens(factory: DataFactory):
    """注册返回参与者信息与令牌，不暴露密码哈希"""
    applicant = await factory.applicant(name="张三")

    assert applicant["name"] == "张三"
    assert applicant["is_active"] is True
    assert applicant["deleted_at"] is None
    assert "password_hash" not in applicant
    assert applicant["token"]["access"]
    assert applicant["token"]["refresh"]


@pytest.mark.asyncio
async def test_join_duplicate_email(client: AsyncClient, factory: DataFactory):
    """同一角色邮箱重复注册返回 409"""
    await factory.hr(email="dup@example.com")

    response = await client.post("/auth/hrRecruiter/join", json={
        "email": "dup@example.com",
        "name": "重复",
        "password": PASSWORD,
    })
    assert response.status_code == 409
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_email_is_validated_and_case_insensitive(client: AsyncClient, factory: DataFactory):
    """邮箱格式错误返回 422；大小写不同视为同一邮箱"""
    applicant = await factory.applicant(email="Mixed.Case@Example.com")
    assert applicant["email"] == "mixed.case@example.com"

    response = await client.post("/auth/applicant/join", json={
        "email": "MIXED.CASE@example.com",
        "name": "重复",
        "password": PASSWORD,
    })
    assert response.status_code == 409

    response = await client.post("/auth/applicant/join", json={
        "email": "not-an-email",
        "name": "格式错误",
        "password": PASSWORD,
    })
    assert response.status_code == 422

    response = await client.post("/auth/applicant/login", json={
        "email": "MIXED.case@EXAMPLE.com",
        "password": PASSWORD,
    })
    assert response.status_code == 200
    assert response.json()["id"] == applicant["id"]


@pytest.mark.asyncio
async def test_login_and_refresh(client: AsyncClient, factory: DataFactory):
    """登录成功签发令牌，刷新令牌可换取新令牌"""
    await factory.reviewer(email="reviewer@example.com")

    response = await client.post("/auth/techReviewer/login", json={
        "email": "reviewer@example.com",
        "password": PASSWORD,
    })
    assert response.status_code == 200
    refresh_token = response.json()["token"]["refresh"]

    response = await client.post("/auth/techReviewer/refresh", json={"refresh_token": refresh_token})
    assert response.status_code == 200
    assert response.json()["email"] == "reviewer@example.com"


@pytest.mark.asyncio
async def test_refresh_rejects_access_token(client: AsyncClient, factory: DataFactory):
    """访问令牌不能当作刷新令牌使用"""
    applicant = await factory.applicant()

    response = await client.post(
        "/auth/applicant/refresh", json={"refresh_token": applicant["token"]["access"]}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_failed_login_is_recorded(client: AsyncClient, factory: DataFactory):
    """登录失败返回 401，并留下认证失败记录"""
    admin = await factory.admin()
    await factory.applicant(email="someone@example.com")

    response = await client.post("/auth/applicant/login", json={
        "email": "someone@example.com",
        "password": "wrong-password",
    })
    assert response.status_code == 401

    response = await client.patch(
        f"{ADMIN}/authenticationFailures", json={}, headers=factory.headers(admin)
    )
    assert response.status_code == 200
    body = response.json()
    assert body["pagination"]["records"] == 1
    failure = body["data"][0]
    assert failure["attempted_email"] == "someone@example.com"
    assert failure["actor_role"] == "applicant"
    assert failure["failure_reason"] == "invalid_credentials"


@pytest.mark.asyncio
async def test_missing_and_invalid_token(client: AsyncClient):
    """缺少令牌或令牌无效返回 401"""
    response = await client.patch(f"{APPLICANT}/resumes", json={})
    assert response.status_code == 401

    response = await client.patch(
        f"{APPLICANT}/resumes", json={}, headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_role_mismatch_is_forbidden(client: AsyncClient, factory: DataFactory):
    """其他角色的令牌访问返回 403"""
    applicant = await factory.applicant()

    response = await client.patch(f"{ADMIN}/applicants", json={}, headers=factory.headers(applicant))
    assert response.status_code == 403

    response = await client.patch(f"{HR}/jobPostings", json={}, headers=factory.headers(applicant))
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_inactive_actor_is_forbidden(client: AsyncClient, factory: DataFactory):
    """停用账号的令牌与登录均返回 403"""
    admin = await factory.admin()
    hr = await factory.hr(email="inactive@example.com")

    response = await client.put(
        f"{ADMIN}/hrRecruiters/{hr['id']}", json={"is_active": False}, headers=factory.headers(admin)
    )
    assert response.status_code == 200
    assert response.json()["is_active"] is False

    response = await client.patch(f"{HR}/jobPostings", json={}, headers=factory.headers(hr))
    assert response.status_code == 403

    response = await client.post("/auth/hrRecruiter/login", json={
        "email": "inactive@example.com",
        "password": PASSWORD,
    })
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "healthy"
