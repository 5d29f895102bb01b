"""
笔试 API 测试

覆盖笔试创建校验、所有权、提交、评分与评审意见
"""
import pytest
from httpx import AsyncClient
from tests.conftest import APPLICANT, HR, REVIEWER, DataFactory


async def create_coding_test(client: AsyncClient, factory: DataFactory, setup: dict, **overrides) -> dict:
    data = {
        "application_id": setup["application"]["id"],
        "applicant_id": setup["applicant"]["id"],
        "test_provider": "internal",
        "scheduled_at": "2030-01-01T09:00:00Z",
        **overrides
    }
    response = await client.post(f"{HR}/codingTests", json=data, headers=factory.headers(setup["hr"]))
    assert response.status_code == 201, response.text
    return response.json()


async def submit(client: AsyncClient, factory: DataFactory, applicant: dict, test_id: str, **data):
    return await client.post(
        f"{APPLICANT}/codingTests/{test_id}/submissions", json=data, headers=factory.headers(applicant)
    )


@pytest.mark.asyncio
async def test_create_coding_test(client: AsyncClient, factory: DataFactory):
    """HR 创建笔试默认归属本人；应聘者与申请必须一致"""
    setup = await factory.application_setup()
    coding_test = await create_coding_test(client, factory, setup)
    assert coding_test["hr_recruiter_id"] == setup["hr"]["id"]
    assert coding_test["status"] == "scheduled"
    assert coding_test["closed_at"] is None

    other = await factory.applicant()
    response = await client.post(
        f"{HR}/codingTests",
        json={
            "application_id": setup["application"]["id"],
            "applicant_id": other["id"],
            "test_provider": "internal",
            "scheduled_at": "2030-01-01T09:00:00Z",
        },
        headers=factory.headers(setup["hr"]),
    )
    assert response.status_code == 400

    response = await client.post(
        f"{HR}/codingTests",
        json={
            "application_id": setup["application"]["id"],
            "applicant_id": setup["applicant"]["id"],
            "test_provider": "internal",
            "scheduled_at": "2030-01-02T09:00:00Z",
            "expiration_at": "2030-01-01T09:00:00Z",
        },
        headers=factory.headers(setup["hr"]),
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_keeps_expiration_after_schedule(client: AsyncClient, factory: DataFactory):
    """修改安排时间或过期时间后，过期时间仍须晚于安排时间"""
    setup = await factory.application_setup()
    coding_test = await create_coding_test(
        client, factory, setup,
        scheduled_at="2030-01-10T09:00:00Z", expiration_at="2030-01-20T09:00:00Z",
    )
    url = f"{HR}/codingTests/{coding_test['id']}"
    headers = factory.headers(setup["hr"])

    response = await client.put(url, json={"expiration_at": "2030-01-01T00:00:00Z"}, headers=headers)
    assert response.status_code == 400

    response = await client.put(url, json={"scheduled_at": "2030-01-25T09:00:00Z"}, headers=headers)
    assert response.status_code == 400

    response = await client.get(url, headers=headers)
    assert response.json()["expiration_at"].startswith("2030-01-20T09:00:00")

    response = await client.put(
        url,
        json={"scheduled_at": "2030-01-25T09:00:00Z", "expiration_at": "2030-02-01T09:00:00Z"},
        headers=headers,
    )
    assert response.status_code == 200

    # 清空过期时间不受限制
    response = await client.put(url, json={"expiration_at": None}, headers=headers)
    assert response.status_code == 200
    assert response.json()["expiration_at"] is None


@pytest.mark.asyncio
async def test_other_recruiter_cannot_modify(client: AsyncClient, factory: DataFactory):
    setup = await factory.application_setup()
    coding_test = await create_coding_test(client, factory, setup)
    other = await factory.hr()

    response = await client.put(
        f"{HR}/codingTests/{coding_test['id']}", json={"test_url": "https://x"}, headers=factory.headers(other)
    )
    assert response.status_code == 403

    response = await client.delete(f"{HR}/codingTests/{coding_test['id']}", headers=factory.headers(other))
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_submission_rules(client: AsyncClient, factory: DataFactory):
    """只能为自己未关闭、未过期的笔试提交，且必须有答案"""
    setup = await factory.application_setup()
    applicant = setup["applicant"]
    coding_test = await create_coding_test(client, factory, setup)

    response = await submit(client, factory, applicant, coding_test["id"])
    assert response.status_code == 400

    response = await submit(client, factory, applicant, coding_test["id"], answer_text="print(42)")
    assert response.status_code == 201
    submission = response.json()
    assert submission["applicant_id"] == applicant["id"]
    assert submission["review_status"] == "pending"

    other = await factory.applicant()
    response = await submit(client, factory, other, coding_test["id"], answer_text="hack")
    assert response.status_code == 404

    # 关闭后不可提交，也不可再修改
    response = await client.put(
        f"{HR}/codingTests/{coding_test['id']}", json={"status": "closed"}, headers=factory.headers(setup["hr"])
    )
    assert response.status_code == 200
    assert response.json()["closed_at"] is not None

    response = await submit(client, factory, applicant, coding_test["id"], answer_text="late")
    assert response.status_code == 409

    response = await client.put(
        f"{HR}/codingTests/{coding_test['id']}", json={"test_url": "https://x"}, headers=factory.headers(setup["hr"])
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_expired_test_rejects_submission(client: AsyncClient, factory: DataFactory):
    setup = await factory.application_setup()
    coding_test = await create_coding_test(
        client, factory, setup,
        scheduled_at="2020-01-01T09:00:00Z",
        expiration_at="2020-01-02T09:00:00Z",
    )

    response = await submit(client, factory, setup["applicant"], coding_test["id"], answer_text="x")
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_results(client: AsyncClient, factory: DataFactory):
    """得分不超过满分；每份提交一条结果；定稿后不可修改"""
    setup = await factory.application_setup()
    coding_test = await create_coding_test(client, factory, setup)
    response = await submit(client, factory, setup["applicant"], coding_test["id"], answer_text="x")
    submission = response.json()
    url = f"{HR}/codingTests/{coding_test['id']}/results"
    headers = factory.headers(setup["hr"])
    data = {"submission_id": submission["id"], "evaluation_method": "manual", "maximum_score": 100}

    response = await client.post(url, json={**data, "score": 120}, headers=headers)
    assert response.status_code == 400

    response = await client.post(url, json={**data, "score": 85}, headers=headers)
    assert response.status_code == 201
    result = response.json()
    assert result["plagiarism_flag"] is False

    response = await client.post(url, json={**data, "score": 90}, headers=headers)
    assert response.status_code == 409

    response = await client.put(
        f"{url}/{result['id']}", json={"finalized_at": "2030-01-05T00:00:00Z"}, headers=headers
    )
    assert response.status_code == 200

    response = await client.put(f"{url}/{result['id']}", json={"score": 95}, headers=headers)
    assert response.status_code == 409

    # 应聘者可查看自己笔试的结果
    response = await client.patch(
        f"{APPLICANT}/codingTests/{coding_test['id']}/results",
        json={},
        headers=factory.headers(setup["applicant"]),
    )
    assert response.status_code == 200
    assert response.json()["data"][0]["score"] == 85


@pytest.mark.asyncio
async def test_review_comments(client: AsyncClient, factory: DataFactory):
    """技术评审只能修改自己的评审意见"""
    setup = await factory.application_setup()
    coding_test = await create_coding_test(client, factory, setup)
    response = await submit(client, factory, setup["applicant"], coding_test["id"], answer_text="x")
    submission = response.json()
    reviewer = await factory.reviewer()
    other = await factory.reviewer()
    url = f"{REVIEWER}/codingTestSubmissions/{submission['id']}/reviewComments"

    response = await client.post(url, json={"comment_text": "边界条件未处理"}, headers=factory.headers(reviewer))
    assert response.status_code == 201
    comment = response.json()
    assert comment["reviewer_id"] == reviewer["id"]

    response = await client.put(
        f"{url}/{comment['id']}", json={"is_resolved": True}, headers=factory.headers(other)
    )
    assert response.status_code == 403

    response = await client.put(
        f"{url}/{comment['id']}", json={"is_resolved": True}, headers=factory.headers(reviewer)
    )
    assert response.status_code == 200
    assert response.json()["is_resolved"] is True

    # 评审意见为物理删除
    response = await client.delete(f"{url}/{comment['id']}", headers=factory.headers(reviewer))
    assert response.status_code == 204
    response = await client.get(f"{url}/{comment['id']}", headers=factory.headers(reviewer))
    assert response.status_code == 404
