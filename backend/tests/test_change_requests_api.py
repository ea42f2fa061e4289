# ruff: noqa: INP001
"""API tests for change request submission and review endpoints."""

from __future__ import annotations

from uuid import uuid4

import pytest
from fastapi import APIRouter, FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from employee_profile.api.change_requests import router as change_requests_router
from employee_profile.api.employee_profiles import router as employee_profiles_router
from employee_profile.core.error_handling import REQUEST_ID_HEADER, install_error_handling
from employee_profile.db.session import get_session

PROFILE_PAYLOAD = {
    "employee_number": "E-1001",
    "first_name": "Mona",
    "last_name": "Hassan",
    "national_id": "29901011234567",
    "contract_type": "Permanent",
    "date_of_hire": "2020-01-06",
}


async def _make_engine() -> AsyncEngine:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.connect() as conn, conn.begin():
        await conn.run_sync(SQLModel.metadata.create_all)
    return engine


def _build_test_app(session_maker: async_sessionmaker[AsyncSession]) -> FastAPI:
    app = FastAPI()
    install_error_handling(app)
    api_v1 = APIRouter(prefix="/api/v1")
    api_v1.include_router(employee_profiles_router)
    api_v1.include_router(change_requests_router)
    app.include_router(api_v1)

    async def _override_get_session() -> AsyncSession:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = _override_get_session
    return app


def _client(engine: AsyncEngine) -> AsyncClient:
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    return AsyncClient(
        transport=ASGITransport(app=_build_test_app(session_maker)),
        base_url="http://testserver",
    )


async def _create_profile(client: AsyncClient) -> dict[str, object]:
    response = await client.post("/api/v1/employee-profiles", json=PROFILE_PAYLOAD)
    assert response.status_code == 201
    return response.json()


async def _submit(
    client: AsyncClient,
    profile_id: str,
    field: str,
    new_value: object,
) -> dict[str, object]:
    response = await client.post(
        "/api/v1/employee-profiles/change-requests",
        json={
            "subject_id": profile_id,
            "field": field,
            "new_value": new_value,
            "reason": "HR record is outdated",
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_submit_then_approve_updates_profile() -> None:
    engine = await _make_engine()
    try:
        async with _client(engine) as client:
            profile = await _create_profile(client)
            created = await _submit(client, profile["id"], "nationalId", "30001011234567")
            assert created["status"] == "pending"
            assert created["processed_at"] is None
            assert created["encoded_change"] == (
                '{"field":"nationalId","newValue":"30001011234567"}'
            )

            approved = await client.patch(
                f"/api/v1/employee-profiles/change-requests/{created['id']}/approve",
            )
            assert approved.status_code == 200
            assert approved.json() == {
                "message": "Request approved and employee updated",
                "field_updated": "nationalId",
                "new_value": "30001011234567",
            }

            refreshed = await client.get(f"/api/v1/employee-profiles/{profile['id']}")
            assert refreshed.json()["national_id"] == "30001011234567"

            detail = await client.get(
                f"/api/v1/employee-profiles/change-requests/{created['id']}",
            )
            assert detail.json()["status"] == "approved"
            assert detail.json()["processed_at"] is not None
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_second_approval_conflicts_with_request_id() -> None:
    engine = await _make_engine()
    try:
        async with _client(engine) as client:
            profile = await _create_profile(client)
            created = await _submit(client, profile["id"], "workType", "remote")
            url = f"/api/v1/employee-profiles/change-requests/{created['id']}"
            assert (await client.patch(f"{url}/approve")).status_code == 200

            again = await client.patch(f"{url}/approve")
            reject = await client.patch(f"{url}/reject", json={"reason": "duplicate"})

            for response in (again, reject):
                assert response.status_code == 409
                body = response.json()
                assert body["detail"]["code"] == "transition_conflict"
                assert body["detail"]["requires_resubmission"] is False
                assert response.headers[REQUEST_ID_HEADER] == body["request_id"]
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_invalid_national_id_is_422_and_request_stays_pending() -> None:
    engine = await _make_engine()
    try:
        async with _client(engine) as client:
            profile = await _create_profile(client)
            created = await _submit(client, profile["id"], "nationalId", "1234")
            url = f"/api/v1/employee-profiles/change-requests/{created['id']}"

            response = await client.patch(f"{url}/approve")

            assert response.status_code == 422
            assert response.json()["detail"] == {
                "code": "invalid_national_id",
                "message": "nationalId must be 14 digits",
                "requires_resubmission": True,
            }
            assert (await client.get(url)).json()["status"] == "pending"
            current = await client.get(f"/api/v1/employee-profiles/{profile['id']}")
            assert current.json()["national_id"] == PROFILE_PAYLOAD["national_id"]
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_unsupported_field_can_still_be_rejected() -> None:
    engine = await _make_engine()
    try:
        async with _client(engine) as client:
            profile = await _create_profile(client)
            created = await _submit(client, profile["id"], "unknownThing", "x")
            url = f"/api/v1/employee-profiles/change-requests/{created['id']}"

            approve = await client.patch(f"{url}/approve")
            assert approve.status_code == 422
            assert approve.json()["detail"]["message"] == "Unsupported field: unknownThing"

            reject = await client.patch(f"{url}/reject", json={"reason": "duplicate"})
            assert reject.status_code == 200
            assert reject.json()["status"] == "rejected"
            assert reject.json()["reason"] == "duplicate"
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_reject_requires_a_reason() -> None:
    engine = await _make_engine()
    try:
        async with _client(engine) as client:
            profile = await _create_profile(client)
            created = await _submit(client, profile["id"], "firstName", "Ahmed")
            response = await client.patch(
                f"/api/v1/employee-profiles/change-requests/{created['id']}/reject",
                json={"reason": ""},
            )
            assert response.status_code == 422
            assert isinstance(response.json()["detail"], list)
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_missing_request_and_profile_are_404() -> None:
    engine = await _make_engine()
    try:
        async with _client(engine) as client:
            missing = uuid4()
            approve = await client.patch(
                f"/api/v1/employee-profiles/change-requests/{missing}/approve",
            )
            assert approve.status_code == 404
            assert approve.json()["detail"]["message"] == "Request not found"

            submit = await client.post(
                "/api/v1/employee-profiles/change-requests",
                json={"subject_id": str(missing), "field": "firstName", "new_value": "A"},
            )
            assert submit.status_code == 404
            assert submit.json()["detail"]["code"] == "profile_not_found"

            listing = await client.get(f"/api/v1/employee-profiles/{missing}/change-requests")
            assert listing.status_code == 404
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_list_change_requests_for_profile() -> None:
    engine = await _make_engine()
    try:
        async with _client(engine) as client:
            profile = await _create_profile(client)
            first = await _submit(client, profile["id"], "firstName", "Ahmed")
            second = await _submit(client, profile["id"], "lastName", "Saleh")

            response = await client.get(
                f"/api/v1/employee-profiles/{profile['id']}/change-requests",
            )

            assert response.status_code == 200
            ids = [item["id"] for item in response.json()]
            assert sorted(ids) == sorted([first["id"], second["id"]])
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_boolean_new_value_is_refused_at_submission() -> None:
    engine = await _make_engine()
    try:
        async with _client(engine) as client:
            profile = await _create_profile(client)
            response = await client.post(
                "/api/v1/employee-profiles/change-requests",
                json={"subject_id": profile["id"], "field": "firstName", "new_value": True},
            )
            assert response.status_code == 422

            listing = await client.get(
                f"/api/v1/employee-profiles/{profile['id']}/change-requests",
            )
            assert listing.json() == []
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_numeric_new_values_keep_their_type() -> None:
    engine = await _make_engine()
    try:
        async with _client(engine) as client:
            profile = await _create_profile(client)
            created = await _submit(client, profile["id"], "contractType", 3)
            assert created["encoded_change"] == '{"field":"contractType","newValue":3}'
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_approving_unknown_position_is_422_not_500() -> None:
    engine = await _make_engine()
    try:
        async with _client(engine) as client:
            profile = await _create_profile(client)
            created = await _submit(client, profile["id"], "primaryPositionId", str(uuid4()))
            url = f"/api/v1/employee-profiles/change-requests/{created['id']}"

            response = await client.patch(f"{url}/approve")

            assert response.status_code == 422
            assert response.json()["detail"]["code"] == "invalid_field_value"
            assert response.json()["detail"]["requires_resubmission"] is True
            assert (await client.get(url)).json()["status"] == "pending"
    finally:
        await engine.dispose()
