"""
CORS behaviour: allow-list origins, 204 preflight.
"""
ALLOWED_ORIGIN = "http://localhost:5173"


class TestPreflight:

    async def test_preflight_allowed_origin(self, client):
        response = await client.options(
            "/api/register",
            headers={"Origin": ALLOWED_ORIGIN, "Access-Control-Request-Method": "POST"}
        )

        assert response.status_code == 204
        assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
        assert response.headers["access-control-allow-credentials"] == "true"
        assert "POST" in response.headers["access-control-allow-methods"]
        assert "Authorization" in response.headers["access-control-allow-headers"]

    async def test_preflight_unknown_origin(self, client):
        response = await client.options(
            "/api/register",
            headers={"Origin": "https://evil.example", "Access-Control-Request-Method": "POST"}
        )

        assert response.status_code == 204
        assert "access-control-allow-origin" not in response.headers

    async def test_options_without_preflight_headers(self, client):
        response = await client.options("/api/search-history")

        assert response.status_code == 204


class TestSimpleRequests:

    async def test_allowed_origin_echoed(self, client):
        response = await client.get("/", headers={"Origin": ALLOWED_ORIGIN})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN

    async def test_unknown_origin_not_echoed(self, client):
        response = await client.get("/", headers={"Origin": "https://evil.example"})

        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers
