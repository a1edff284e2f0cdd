from decimal import Decimal

import httpx
import pytest

from activity_console.core.errors import UpstreamFetchError
from activity_console.upstream.clients.bored import BoredClient

BORED_TEST_URL = "https://bored.test/api/activity"


def client_for(handler) -> BoredClient:
    return BoredClient(BORED_TEST_URL, timeout_seconds=2.0, transport=httpx.MockTransport(handler))


class TestBoredClient:
    async def test_success_parses_activity(self, bored_payload):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=bored_payload)

        activity = await client_for(handler).get_activity(2)

        assert activity is not None
        assert activity.activity == "Learn how to play a new sport"
        assert activity.participants == 2
        assert activity.price == Decimal("0.1")
        assert activity.accessibility == Decimal("0.2")
        assert seen[0].method == "GET"
        assert seen[0].url.params["participants"] == "2"

    async def test_list_body_uses_first_item(self, bored_payload):
        second = dict(bored_payload, key="other")
        client = client_for(lambda request: httpx.Response(200, json=[bored_payload, second]))

        activity = await client.get_activity(2)

        assert activity.key == "5808228"

    async def test_empty_list_is_none(self):
        client = client_for(lambda request: httpx.Response(200, json=[]))

        assert await client.get_activity(2) is None

    @pytest.mark.parametrize("status_code", [404, 429, 500, 503])
    async def test_non_success_status_is_none(self, status_code, bored_payload):
        client = client_for(lambda request: httpx.Response(status_code, json=bored_payload))

        assert await client.get_activity(2) is None

    async def test_malformed_json_is_none(self):
        client = client_for(lambda request: httpx.Response(200, text="<html>not json</html>"))

        assert await client.get_activity(2) is None

    async def test_wrong_shape_is_none(self):
        client = client_for(lambda request: httpx.Response(200, json={"activity": "Missing everything else"}))

        assert await client.get_activity(2) is None

    async def test_upstream_error_body_is_none(self):
        body = {"error": "No activity found with the specified parameters"}
        client = client_for(lambda request: httpx.Response(200, json=body))

        assert await client.get_activity(9) is None

    async def test_transport_failure_raises_fetch_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamFetchError) as exc_info:
            await client_for(handler).get_activity(2)

        assert exc_info.value.url == BORED_TEST_URL
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_timeout_raises_fetch_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(UpstreamFetchError):
            await client_for(handler).get_activity(2)

    @pytest.mark.parametrize("participants", [0, -5])
    async def test_rejects_participants_below_one_without_calling_out(self, participants):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={})

        with pytest.raises(ValueError):
            await client_for(handler).get_activity(participants)
        assert calls == []


class TestBoredClientTimeout:
    async def test_configured_timeout_is_applied(self, bored_payload):
        timeouts = []

        def handler(request: httpx.Request) -> httpx.Response:
            timeouts.append(request.extensions["timeout"])
            return httpx.Response(200, json=bored_payload)

        await client_for(handler).get_activity(2)

        assert timeouts == [{"connect": 2.0, "read": 2.0, "write": 2.0, "pool": 2.0}]

    async def test_per_call_timeout_overrides_configured(self, bored_payload):
        timeouts = []

        def handler(request: httpx.Request) -> httpx.Response:
            timeouts.append(request.extensions["timeout"])
            return httpx.Response(200, json=bored_payload)

        await client_for(handler).get_activity(2, timeout=0.5)

        assert timeouts == [{"connect": 0.5, "read": 0.5, "write": 0.5, "pool": 0.5}]
