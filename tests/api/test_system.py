"""
系统配置 API 测试
"""
import pytest
from httpx import AsyncClient
from tests.conftest import ADMIN, APPLICANT, PUBLIC, DataFactory


@pytest.mark.asyncio
async def test_setting_name_is_unique(client: AsyncClient, factory: DataFactory):
    headers = factory.headers(await factory.admin())
    data = {"setting_name": "max_upload_mb", "setting_value": "10", "setting_type": "int"}

    response = await client.post(f"{ADMIN}/systemSettings", json=data, headers=headers)
    assert response.status_code == 201
    setting = response.json()

    response = await client.post(f"{ADMIN}/systemSettings", json=data, headers=headers)
    assert response.status_code == 409

    # 改名冲突同样检查
    response = await client.post(
        f"{ADMIN}/systemSettings", json={**data, "setting_name": "other"}, headers=headers
    )
    other = response.json()
    response = await client.put(
        f"{ADMIN}/systemSettings/{other['id']}", json={"setting_name": "max_upload_mb"}, headers=headers
    )
    assert response.status_code == 409

    response = await client.put(
        f"{ADMIN}/systemSettings/{setting['id']}", json={"setting_value": "20"}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["setting_value"] == "20"


@pytest.mark.asyncio
async def test_enum_type_and_code_pair_is_unique(client: AsyncClient, factory: DataFactory):
    headers = factory.headers(await factory.admin())
    data = {"enum_type": "interview_stage", "enum_code": "first_phase", "label": "一面"}

    response = await client.post(f"{ADMIN}/enums", json=data, headers=headers)
    assert response.status_code == 201

    response = await client.post(f"{ADMIN}/enums", json=data, headers=headers)
    assert response.status_code == 409

    response = await client.post(
        f"{ADMIN}/enums", json={**data, "enum_type": "coding_test_status"}, headers=headers
    )
    assert response.status_code == 201

    # 枚举公开可读
    response = await client.patch(f"{PUBLIC}/enums", json={"enum_type": "interview_stage"})
    assert response.status_code == 200
    assert [item["enum_code"] for item in response.json()["data"]] == ["first_phase"]


@pytest.mark.asyncio
async def test_credentials_are_admin_only_and_audited_without_secret(client: AsyncClient, factory: DataFactory):
    admin = await factory.admin()
    headers = factory.headers(admin)
    applicant = await factory.applicant()

    response = await client.post(
        f"{ADMIN}/externalApiCredentials",
        json={"service_name": "mailer", "credential_key": "mailer-prod", "credential_json": '{"token": "s3cret"}'},
        headers=headers,
    )
    assert response.status_code == 201
    credential = response.json()

    response = await client.post(
        f"{ADMIN}/externalApiCredentials",
        json={"service_name": "mailer", "credential_key": "mailer-prod", "credential_json": "{}"},
        headers=headers,
    )
    assert response.status_code == 409

    response = await client.patch(
        f"{ADMIN}/auditTrails", json={"target_id": credential["id"]}, headers=headers
    )
    entries = response.json()["data"]
    assert len(entries) == 1
    assert entries[0]["operation_type"] == "CREATE"
    assert "s3cret" not in entries[0]["event_detail"]

    response = await client.patch(
        f"{APPLICANT}/externalApiCredentials", json={}, headers=factory.headers(applicant)
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_page_beyond_last_returns_empty_data(client: AsyncClient, factory: DataFactory):
    headers = factory.headers(await factory.admin())
    await client.post(
        f"{ADMIN}/enums", json={"enum_type": "stage", "enum_code": "first", "label": "一面"}, headers=headers
    )

    for page in (2, 10 ** 20):
        response = await client.patch(f"{ADMIN}/enums", json={"page": page}, headers=headers)
        assert response.status_code == 200
        body = response.json()
        assert body["data"] == []
        assert body["pagination"]["records"] == 1
        assert body["pagination"]["pages"] == 1
        assert body["pagination"]["current"] == page
