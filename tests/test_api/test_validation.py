"""Tests for the /isValid endpoints and the routing fallbacks."""

import pytest
from httpx import AsyncClient

from mailcheck.services.email_validation import DnsLookupError
from mailcheck.services.email_validation.mx import MX_RECORD_TYPE
from mailcheck.services.email_validation.syntax import FORMAT_INVALID_REASON

pytestmark = pytest.mark.asyncio


class TestIsValidQuery:
    """Tests for GET /isValid."""

    async def test_valid_address(self, client: AsyncClient, resolver):
        """Should return a valid verdict without a reason key."""
        response = await client.get("/isValid", params={"emailAddress": "user@example.com"})

        assert response.status_code == 200
        assert response.json() == {"emailAddress": "user@example.com", "valid": True}
        resolver.lookup_mx.assert_awaited_once_with("example.com")

    async def test_malformed_address(self, client: AsyncClient, resolver):
        """Should return the format reason and skip DNS."""
        response = await client.get("/isValid", params={"emailAddress": "not-an-email"})

        assert response.status_code == 200
        assert response.json() == {
            "emailAddress": "not-an-email",
            "valid": False,
            "reason": [FORMAT_INVALID_REASON],
        }
        resolver.lookup_mx.assert_not_called()

    async def test_unregistered_domain(self, client: AsyncClient, resolver, dns_answer_factory):
        """Should report NXDOMAIN as unregistered."""
        resolver.lookup_mx.return_value = dns_answer_factory(status=3)

        response = await client.get(
            "/isValid", params={"emailAddress": "user@nonexistent-domain-xyz123.invalid"}
        )

        assert response.status_code == 200
        assert response.json()["reason"] == ["Domain is not registered"]

    async def test_missing_parameter(self, client: AsyncClient, resolver):
        """Should reject a request without emailAddress."""
        response = await client.get("/isValid")

        assert response.status_code == 422
        resolver.lookup_mx.assert_not_called()


class TestIsValidBody:
    """Tests for POST /isValid."""

    async def test_valid_address(self, client: AsyncClient):
        """Should validate the emailAddress body field."""
        response = await client.post("/isValid", json={"emailAddress": "user@example.com"})

        assert response.status_code == 200
        assert response.json() == {"emailAddress": "user@example.com", "valid": True}

    async def test_no_mx_record(self, client: AsyncClient, resolver, dns_answer_factory):
        """Should report a domain with only an A record."""
        resolver.lookup_mx.return_value = dns_answer_factory(status=0, record_types=[1])

        response = await client.post("/isValid", json={"emailAddress": "user@example.com"})

        assert response.status_code == 200
        assert response.json() == {
            "emailAddress": "user@example.com",
            "valid": False,
            "reason": ["Domain does not have a valid MX records"],
        }

    async def test_missing_field(self, client: AsyncClient):
        """Should reject a body without emailAddress."""
        response = await client.post("/isValid", json={"email": "user@example.com"})

        assert response.status_code == 422

    @pytest.mark.parametrize("record_types", [[MX_RECORD_TYPE], [1], None])
    async def test_matches_query_variant(
        self, client: AsyncClient, resolver, dns_answer_factory, record_types
    ):
        """GET and POST should give identical bodies for identical DNS state."""
        resolver.lookup_mx.return_value = dns_answer_factory(status=0, record_types=record_types)

        get_response = await client.get("/isValid", params={"emailAddress": "user@example.com"})
        post_response = await client.post("/isValid", json={"emailAddress": "user@example.com"})

        assert get_response.status_code == post_response.status_code == 200
        assert get_response.json() == post_response.json()


class TestDnsFailure:
    """Tests for resolver failures surfacing through the API."""

    async def test_returns_bad_gateway(self, client: AsyncClient, resolver):
        """Should answer 502 when the resolver call fails."""
        resolver.lookup_mx.side_effect = DnsLookupError("example.com", "connection refused")

        response = await client.get("/isValid", params={"emailAddress": "user@example.com"})

        assert response.status_code == 502
        assert response.json() == {"detail": "DNS lookup failed"}

    async def test_graceful_mode(self, client: AsyncClient, validator, resolver):
        """Should return an invalid verdict when configured to absorb failures."""
        validator.dns_failure_as_invalid = True
        resolver.lookup_mx.side_effect = DnsLookupError("example.com", "connection refused")

        response = await client.post("/isValid", json={"emailAddress": "user@example.com"})

        assert response.status_code == 200
        assert response.json() == {
            "emailAddress": "user@example.com",
            "valid": False,
            "reason": ["DNS lookup failed"],
        }


class TestRouting:
    """Tests for the root redirect and unmatched routes."""

    async def test_root_redirects_to_docs(self, client: AsyncClient):
        """GET / should redirect to /docs."""
        response = await client.get("/", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "http://test/docs"

    async def test_docs_available(self, client: AsyncClient):
        """The redirect target should serve the API docs."""
        response = await client.get("/docs")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]

    async def test_openapi_schema(self, client: AsyncClient):
        """Both /isValid operations should be described in the schema."""
        response = await client.get("/openapi.json")

        assert response.status_code == 200
        schema = response.json()
        assert schema["info"]["title"] == "Simple Email Validation API"
        assert set(schema["paths"]["/isValid"]) == {"get", "post"}

    @pytest.mark.parametrize("method,path", [("GET", "/nope"), ("POST", "/validate/"), ("PUT", "/isValid")])
    async def test_unmatched_route(self, client: AsyncClient, method, path):
        """Unmatched routes should get a plain-text 404."""
        response = await client.request(method, path)

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Not Found."
