import asyncio
import time

import pytest
from aiohttp import web

from xrplsale import ClientConfig, XRPLSaleClient
from xrplsale.core.exceptions import (
    APIError, AuthenticationError, NetworkError, NotFoundError, RateLimitError,
    RequestCancelledError, RequestTimeoutError, UnsupportedMethodError, ValidationError,
)

PROJECT = {"id": "p1", "name": "Alpha", "status": "active"}


class TestHeaders:
    async def test_default_headers_without_api_key(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (200, PROJECT))

        async with make_client() as sdk:
            await sdk.projects.get("p1")

        headers = fake_api.requests[0].headers
        assert headers["User-Agent"].startswith("XRPL.Sale-Python-SDK/")
        assert headers["Accept"] == "application/json"
        assert headers["Content-Type"] == "application/json"
        assert "X-API-Key" not in headers
        assert "Authorization" not in headers

    async def test_api_key_header(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (200, PROJECT))

        async with make_client(api_key="key-123") as sdk:
            await sdk.projects.get("p1")

        assert fake_api.requests[0].headers["X-API-Key"] == "key-123"

    async def test_bearer_token_replaces_api_key(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (200, PROJECT))

        async with make_client(api_key="key-123", auth_token="tok") as sdk:
            await sdk.projects.get("p1")

        headers = fake_api.requests[0].headers
        assert headers["Authorization"] == "Bearer tok"
        assert "X-API-Key" not in headers

    async def test_body_is_sent_as_json(self, fake_api, make_client):
        fake_api.add("PATCH", "/projects/p1", (200, {**PROJECT, "name": "Beta"}))

        async with make_client() as sdk:
            project = await sdk.projects.update("p1", {"name": "Beta"})

        assert project.name == "Beta"
        assert fake_api.requests[0].json == {"name": "Beta"}


class TestRetries:
    async def test_server_error_retried_up_to_cap(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (503, {"message": "maintenance"}))

        async with make_client(max_retries=3) as sdk:
            with pytest.raises(APIError) as exc_info:
                await sdk.projects.get("p1")

        assert len(fake_api.requests) == 4
        assert exc_info.value.status_code == 503
        assert exc_info.value.message == "maintenance"

    async def test_recovers_after_transient_failure(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (500, {}), (502, b""), (200, PROJECT))

        async with make_client() as sdk:
            project = await sdk.projects.get("p1")

        assert project.id == "p1"
        assert len(fake_api.requests) == 3

    async def test_zero_retries_makes_single_attempt(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (500, {}))

        async with make_client(max_retries=0) as sdk:
            with pytest.raises(APIError):
                await sdk.projects.get("p1")

        assert len(fake_api.requests) == 1

    @pytest.mark.parametrize("status", [400, 401, 403, 404, 409, 422, 429])
    async def test_client_errors_not_retried(self, fake_api, make_client, status):
        fake_api.add("GET", "/projects/p1", (status, {"message": "nope"}))

        async with make_client() as sdk:
            with pytest.raises(APIError):
                await sdk.projects.get("p1")

        assert len(fake_api.requests) == 1

    async def test_network_error_retried_then_surfaced(self):
        config = ClientConfig(
            base_url="http://127.0.0.1:1/v1", max_retries=2,
            retry_wait_time=0.001, retry_max_wait_time=0.001,
        )

        async with XRPLSaleClient(config=config) as sdk:
            with pytest.raises(NetworkError) as exc_info:
                await sdk.projects.get("p1")

        assert "3 attempts" in exc_info.value.message

    async def test_timeout_retried_then_surfaced(self, fake_api, make_client):
        async def slow(request):
            await asyncio.sleep(1)
            return web.json_response(PROJECT)

        fake_api.add("GET", "/projects/p1", slow)

        async with make_client(timeout=0.2, max_retries=1) as sdk:
            with pytest.raises(RequestTimeoutError):
                await sdk.projects.get("p1")

        assert len(fake_api.requests) == 2


class TestErrorDecoding:
    async def test_not_found(self, fake_api, make_client):
        fake_api.add("GET", "/projects/missing", (404, {"message": "Project not found", "code": "NOT_FOUND"}))

        async with make_client() as sdk:
            with pytest.raises(NotFoundError) as exc_info:
                await sdk.projects.get("missing")

        assert exc_info.value.code == "NOT_FOUND"
        assert exc_info.value.status_code == 404

    @pytest.mark.parametrize("status", [401, 403])
    async def test_authentication_error(self, fake_api, make_client, status):
        fake_api.add("GET", "/auth/profile", (status, {"message": "token expired"}))

        async with make_client() as sdk:
            with pytest.raises(AuthenticationError):
                await sdk.auth.get_profile()

    async def test_validation_error_carries_details(self, fake_api, make_client):
        body = {"message": "Invalid payload", "details": {"amount_xrp": "must be positive"}}
        fake_api.add("POST", "/investments/simulate", (422, body))

        async with make_client() as sdk:
            with pytest.raises(ValidationError) as exc_info:
                await sdk.http_client.post("/investments/simulate", json={"project_id": "p1", "amount_xrp": -1})

        assert exc_info.value.details == {"amount_xrp": "must be positive"}

    async def test_rate_limit_retry_after_from_body(self, fake_api, make_client):
        fake_api.add("GET", "/projects", (429, {"message": "slow down", "retry_after": 12}))

        async with make_client() as sdk:
            with pytest.raises(RateLimitError) as exc_info:
                await sdk.projects.list()

        assert exc_info.value.retry_after == 12

    async def test_rate_limit_retry_after_from_header(self, fake_api, make_client):
        fake_api.add("GET", "/projects", (429, {"message": "slow down"}, {"Retry-After": "30"}))

        async with make_client() as sdk:
            with pytest.raises(RateLimitError) as exc_info:
                await sdk.projects.list()

        assert exc_info.value.retry_after == 30

    @pytest.mark.parametrize("hint, expected", [(1.5, 2), ("2.2", 3), ("soon", None)])
    async def test_rate_limit_keeps_message_with_odd_retry_after(self, fake_api, make_client, hint, expected):
        fake_api.add("GET", "/projects", (429, {"message": "slow down", "retry_after": hint}))

        async with make_client() as sdk:
            with pytest.raises(RateLimitError) as exc_info:
                await sdk.projects.list()

        assert exc_info.value.message == "slow down"
        assert exc_info.value.retry_after == expected

    async def test_nested_error_body(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (409, {"error": {"message": "already launched", "code": "CONFLICT"}}))

        async with make_client() as sdk:
            with pytest.raises(APIError) as exc_info:
                await sdk.projects.get("p1")

        assert type(exc_info.value) is APIError
        assert exc_info.value.message == "already launched"
        assert exc_info.value.code == "CONFLICT"

    async def test_empty_message_falls_back_to_status(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (404, {"message": ""}))

        async with make_client() as sdk:
            with pytest.raises(APIError) as exc_info:
                await sdk.projects.get("p1")

        assert type(exc_info.value) is APIError
        assert exc_info.value.status_code == 404
        assert exc_info.value.message.startswith("API error: 404")

    async def test_non_json_error_body_falls_back_to_status(self, fake_api, make_client):
        fake_api.add("DELETE", "/webhooks/w1", (400, "<html>bad gateway</html>"))

        async with make_client() as sdk:
            with pytest.raises(APIError) as exc_info:
                await sdk.webhooks.delete("w1")

        assert exc_info.value.status_code == 400
        assert "400" in exc_info.value.message

    async def test_invalid_json_success_body(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (200, "not json"))

        async with make_client() as sdk:
            with pytest.raises(APIError):
                await sdk.projects.get("p1")


class TestRequestPipeline:
    async def test_unsupported_method_fails_without_request(self, fake_api, make_client):
        async with make_client() as sdk:
            with pytest.raises(UnsupportedMethodError):
                await sdk.http_client.request("TRACE", "/projects")

        assert fake_api.requests == []

    async def test_method_is_case_insensitive(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (200, PROJECT))

        async with make_client() as sdk:
            data = await sdk.http_client.request("get", "/projects/p1")

        assert data == PROJECT

    async def test_empty_success_body(self, fake_api, make_client):
        fake_api.add("POST", "/webhooks/w1/test", (204, b""))

        async with make_client() as sdk:
            assert await sdk.webhooks.test("w1") is None

    async def test_requires_open_session(self, make_client):
        sdk = make_client()

        with pytest.raises(NetworkError):
            await sdk.projects.get("p1")

    async def test_concurrent_requests_are_independent(self, fake_api, make_client):
        for n in range(5):
            fake_api.add("GET", f"/projects/p{n}", (200, {**PROJECT, "id": f"p{n}"}))

        async with make_client() as sdk:
            projects = await asyncio.gather(*(sdk.projects.get(f"p{n}") for n in range(5)))

        assert [p.id for p in projects] == [f"p{n}" for n in range(5)]


class TestCancellation:
    async def test_cancel_during_retry_wait(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (503, {"message": "down"}))

        async with make_client(retry_wait_time=5, retry_max_wait_time=5) as sdk:
            task = asyncio.create_task(sdk.projects.get("p1"))
            while not fake_api.requests:
                await asyncio.sleep(0.01)
            await asyncio.sleep(0.05)

            started = time.monotonic()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task
            assert time.monotonic() - started < 1

        assert len(fake_api.requests) == 1

    async def test_deadline_aborts_retry_wait(self, fake_api, make_client):
        fake_api.add("GET", "/projects/p1", (503, {"message": "down"}))

        async with make_client(retry_wait_time=5, retry_max_wait_time=5) as sdk:
            started = time.monotonic()
            with pytest.raises(RequestCancelledError) as exc_info:
                await sdk.projects.get("p1", deadline=0.2)

        assert time.monotonic() - started < 2
        assert exc_info.value.deadline == 0.2
        assert len(fake_api.requests) == 1

    async def test_deadline_aborts_in_flight_attempt(self, fake_api, make_client):
        async def slow(request):
            await asyncio.sleep(2)
            return web.json_response(PROJECT)

        fake_api.add("GET", "/projects/p1", slow)

        async with make_client() as sdk:
            with pytest.raises(RequestCancelledError):
                await sdk.projects.get("p1", deadline=0.1)

        assert len(fake_api.requests) == 1
