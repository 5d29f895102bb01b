"""
简历与应聘申请 API 测试

覆盖投递规则、状态流转、状态历史、通知与评审反馈
"""
import pytest
from httpx import AsyncClient
from tests.conftest import APPLICANT, HR, REVIEWER, DataFactory


@pytest.mark.asyncio
async def test_apply_creates_initial_history(client: AsyncClient, factory: DataFactory):
    """投递后状态为 applied，并写入首条状态历史"""
    setup = await factory.application_setup()
    application = setup["application"]
    headers = factory.headers(setup["applicant"])

    assert application["current_status"] == "applied"
    assert application["applicant_id"] == setup["applicant"]["id"]
    assert application["resume_id"] is None
    assert application["submitted_at"]

    response = await client.patch(
        f"{APPLICANT}/applications/{application['id']}/statusHistories", json={}, headers=headers
    )
    assert response.status_code == 200
    histories = response.json()["data"]
    assert len(histories) == 1
    assert histories[0]["from_status"] is None
    assert histories[0]["to_status"] == "applied"
    assert histories[0]["actor_role"] == "applicant"


@pytest.mark.asyncio
async def test_apply_rules(client: AsyncClient, factory: DataFactory):
    """重复投递 409；不可见岗位 404；已截止岗位 409"""
    hr = await factory.hr()
    applicant = await factory.applicant()
    headers = factory.headers(applicant)

    posting = await factory.create_posting(hr)
    await factory.create_application(applicant, posting["id"])
    response = await client.post(
        f"{APPLICANT}/applications", json={"job_posting_id": posting["id"]}, headers=headers
    )
    assert response.status_code == 409

    hidden = await factory.create_posting(hr, is_visible=False)
    response = await client.post(
        f"{APPLICANT}/applications", json={"job_posting_id": hidden["id"]}, headers=headers
    )
    assert response.status_code == 404

    closed = await factory.create_posting(hr, application_deadline="2020-01-01T00:00:00Z")
    response = await client.post(
        f"{APPLICANT}/applications", json={"job_posting_id": closed["id"]}, headers=headers
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_apply_with_foreign_resume(client: AsyncClient, factory: DataFactory):
    """不能使用他人的简历投递"""
    hr = await factory.hr()
    posting = await factory.create_posting(hr)
    owner = await factory.applicant()
    other = await factory.applicant()
    resume = await factory.create_resume(owner)

    response = await client.post(
        f"{APPLICANT}/applications",
        json={"job_posting_id": posting["id"], "resume_id": resume["id"]},
        headers=factory.headers(other),
    )
    assert response.status_code == 400

    application = await factory.create_application(owner, posting["id"], resume_id=resume["id"])
    assert application["resume_id"] == resume["id"]


@pytest.mark.asyncio
async def test_status_change_writes_history_and_notification(client: AsyncClient, factory: DataFactory):
    """HR 变更状态：追加历史，并通知应聘者"""
    setup = await factory.application_setup()
    application_id = setup["application"]["id"]
    applicant_headers = factory.headers(setup["applicant"])

    response = await client.put(
        f"{HR}/applications/{application_id}",
        json={"current_status": "screening", "change_reason": "进入初筛"},
        headers=factory.headers(setup["hr"]),
    )
    assert response.status_code == 200
    assert response.json()["current_status"] == "screening"

    response = await client.patch(
        f"{APPLICANT}/applications/{application_id}/statusHistories",
        json={"sort_by": "changed_at", "sort_order": "asc"},
        headers=applicant_headers,
    )
    histories = response.json()["data"]
    assert [h["to_status"] for h in histories] == ["applied", "screening"]
    assert histories[1]["from_status"] == "applied"
    assert histories[1]["change_reason"] == "进入初筛"
    assert histories[1]["actor_id"] == setup["hr"]["id"]

    response = await client.patch(f"{APPLICANT}/notifications", json={}, headers=applicant_headers)
    notifications = response.json()["data"]
    assert len(notifications) == 1
    assert notifications[0]["notification_type"] == "application_status_changed"
    assert notifications[0]["reference_id"] == application_id


@pytest.mark.asyncio
async def test_invalid_and_terminal_status(client: AsyncClient, factory: DataFactory):
    """无效状态 400；进入终态后不可再修改"""
    setup = await factory.application_setup()
    url = f"{HR}/applications/{setup['application']['id']}"
    headers = factory.headers(setup["hr"])

    response = await client.put(url, json={"current_status": "unknown"}, headers=headers)
    assert response.status_code == 400

    response = await client.put(url, json={"current_status": "rejected"}, headers=headers)
    assert response.status_code == 200

    response = await client.put(url, json={"current_status": "screening"}, headers=headers)
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_applicant_can_only_withdraw(client: AsyncClient, factory: DataFactory):
    """应聘者只能撤回申请，撤回后岗位可删除"""
    setup = await factory.application_setup()
    url = f"{APPLICANT}/applications/{setup['application']['id']}"
    headers = factory.headers(setup["applicant"])
    hr_headers = factory.headers(setup["hr"])
    posting_url = f"{HR}/jobPostings/{setup['posting']['id']}"

    response = await client.put(url, json={"current_status": "hired"}, headers=headers)
    assert response.status_code == 403

    # 仍有进行中的申请，岗位不能删除
    response = await client.delete(posting_url, headers=hr_headers)
    assert response.status_code == 409

    response = await client.put(url, json={"current_status": "withdrawn"}, headers=headers)
    assert response.status_code == 200
    assert response.json()["current_status"] == "withdrawn"

    response = await client.delete(posting_url, headers=hr_headers)
    assert response.status_code == 204


@pytest.mark.asyncio
async def test_applicants_see_only_their_applications(client: AsyncClient, factory: DataFactory):
    """应聘者之间互相不可见"""
    setup = await factory.application_setup()
    other = await factory.applicant()
    headers = factory.headers(other)

    response = await client.get(
        f"{APPLICANT}/applications/{setup['application']['id']}", headers=headers
    )
    assert response.status_code == 404

    response = await client.patch(f"{APPLICANT}/applications", json={}, headers=headers)
    assert response.json()["pagination"]["records"] == 0

    response = await client.patch(
        f"{APPLICANT}/applications/{setup['application']['id']}/statusHistories", json={}, headers=headers
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_feedback_ownership(client: AsyncClient, factory: DataFactory):
    """评审只能修改自己的反馈，最终推荐意见不能删除"""
    setup = await factory.application_setup()
    application_id = setup["application"]["id"]
    reviewer = await factory.reviewer()
    other = await factory.reviewer()
    base_url = f"{REVIEWER}/applications/{application_id}/feedbacks"

    response = await client.post(
        base_url,
        json={"feedback_body": "基础扎实", "rating": 4, "is_final_recommendation": True},
        headers=factory.headers(reviewer),
    )
    assert response.status_code == 201
    feedback = response.json()
    assert feedback["reviewer_id"] == reviewer["id"]
    assert feedback["reviewer_role"] == "techReviewer"

    response = await client.put(
        f"{base_url}/{feedback['id']}", json={"rating": 1}, headers=factory.headers(other)
    )
    assert response.status_code == 403

    response = await client.post(base_url, json={"feedback_body": "x", "rating": 6}, headers=factory.headers(other))
    assert response.status_code == 422

    response = await client.delete(f"{base_url}/{feedback['id']}", headers=factory.headers(reviewer))
    assert response.status_code == 409

    response = await client.put(
        f"{base_url}/{feedback['id']}", json={"is_final_recommendation": False}, headers=factory.headers(reviewer)
    )
    assert response.status_code == 200

    response = await client.delete(f"{base_url}/{feedback['id']}", headers=factory.headers(reviewer))
    assert response.status_code == 204

    # 父资源 ID 不匹配
    response = await client.get(
        f"{REVIEWER}/applications/missing/feedbacks/{feedback['id']}", headers=factory.headers(reviewer)
    )
    assert response.status_code == 404
