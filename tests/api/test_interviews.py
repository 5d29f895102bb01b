"""
面试 API 测试
"""
import pytest
from httpx import AsyncClient
from tests.conftest import APPLICANT, HR, DataFactory


async def create_interview(client: AsyncClient, factory: DataFactory, setup: dict) -> dict:
    response = await client.post(
        f"{HR}/interviews",
        json={
            "application_id": setup["application"]["id"],
            "title": "技术一面",
            "stage": "first_phase",
        },
        headers=factory.headers(setup["hr"]),
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_interview_requires_live_application(client: AsyncClient, factory: DataFactory):
    hr = await factory.hr()
    response = await client.post(
        f"{HR}/interviews",
        json={"application_id": "missing", "title": "面试", "stage": "first_phase"},
        headers=factory.headers(hr),
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_participants(client: AsyncClient, factory: DataFactory):
    """参与人必须是有效账号，同一面试不能重复添加"""
    setup = await factory.application_setup()
    interview = await create_interview(client, factory, setup)
    reviewer = await factory.reviewer()
    url = f"{HR}/interviews/{interview['id']}/participants"
    headers = factory.headers(setup["hr"])

    data = {"participant_id": reviewer["id"], "participant_role": "techReviewer", "role": "interviewer"}
    response = await client.post(url, json=data, headers=headers)
    assert response.status_code == 201
    participant = response.json()
    assert participant["confirmation_status"] == "pending"
    assert participant["invited_at"]

    response = await client.post(url, json=data, headers=headers)
    assert response.status_code == 409

    # 角色与账号不匹配
    response = await client.post(
        url,
        json={"participant_id": reviewer["id"], "participant_role": "applicant", "role": "candidate"},
        headers=headers,
    )
    assert response.status_code == 404

    # 管理员与未知角色不能作为参与人
    for role in ("systemAdmin", "nobody"):
        response = await client.post(
            url,
            json={"participant_id": reviewer["id"], "participant_role": role, "role": "observer"},
            headers=headers,
        )
        assert response.status_code == 422

    # 参与人为物理删除，删除后可重新添加
    response = await client.delete(f"{url}/{participant['id']}", headers=headers)
    assert response.status_code == 204
    response = await client.post(url, json=data, headers=headers)
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_schedule_window(client: AsyncClient, factory: DataFactory):
    """结束时间必须晚于开始时间"""
    setup = await factory.application_setup()
    interview = await create_interview(client, factory, setup)
    url = f"{HR}/interviews/{interview['id']}/schedules"
    headers = factory.headers(setup["hr"])

    response = await client.post(
        url,
        json={"start_at": "2030-05-01T10:00:00Z", "end_at": "2030-05-01T09:00:00Z"},
        headers=headers,
    )
    assert response.status_code == 400

    response = await client.post(
        url,
        json={"start_at": "2030-05-01T10:00:00Z", "end_at": "2030-05-01T11:00:00Z"},
        headers=headers,
    )
    assert response.status_code == 201
    schedule = response.json()
    assert schedule["start_at"].startswith("2030-05-01T10:00:00")
    assert schedule["schedule_status"] == "proposed"

    response = await client.put(
        f"{url}/{schedule['id']}", json={"end_at": "2030-05-01T08:00:00Z"}, headers=headers
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_applicant_sees_only_candidate_visible_questions(client: AsyncClient, factory: DataFactory):
    """应聘者只能看到自己面试中对候选人可见的题目"""
    setup = await factory.application_setup()
    interview = await create_interview(client, factory, setup)
    hr_headers = factory.headers(setup["hr"])
    url = f"{HR}/interviews/{interview['id']}/questions"

    for order, visible in ((1, True), (2, False)):
        response = await client.post(
            url,
            json={"order": order, "question_text": f"问题{order}", "is_visible_to_candidate": visible},
            headers=hr_headers,
        )
        assert response.status_code == 201

    response = await client.patch(
        f"{APPLICANT}/interviews/{interview['id']}/questions",
        json={},
        headers=factory.headers(setup["applicant"]),
    )
    assert response.status_code == 200
    assert [q["question_text"] for q in response.json()["data"]] == ["问题1"]

    response = await client.patch(f"{HR}/interviews/{interview['id']}/questions", json={}, headers=hr_headers)
    assert response.json()["pagination"]["records"] == 2

    other = await factory.applicant()
    response = await client.get(
        f"{APPLICANT}/interviews/{interview['id']}", headers=factory.headers(other)
    )
    assert response.status_code == 404
    response = await client.patch(
        f"{APPLICANT}/interviews/{interview['id']}/questions", json={}, headers=factory.headers(other)
    )
    assert response.status_code == 404
