"""Integration tests for application assembly: static bundle and API prefix."""

import pytest

from usermanager.main import create_app, mount_static


@pytest.fixture
def bundle_dir(tmp_path):
    """A pre-built client bundle with an index page and one asset."""
    bundle = tmp_path / "public"
    bundle.mkdir()
    (bundle / "index.html").write_text("<html><body>User Manager</body></html>", encoding="utf-8")
    (bundle / "app.js").write_text("console.log('users');", encoding="utf-8")
    return bundle


class TestStaticBundle:

    async def test_index_is_served_at_root(self, client_for, bundle_dir) -> None:
        client = await client_for(create_app(static_dir=str(bundle_dir)))

        response = await client.get("/")
        assert response.status_code == 200
        assert "User Manager" in response.text

        response = await client.get("/app.js")
        assert response.status_code == 200

    async def test_api_routes_win_over_the_mount(self, client_for, bundle_dir) -> None:
        client = await client_for(create_app(static_dir=str(bundle_dir)))

        response = await client.post("/users", json={"name": "Ann", "email": "ann@x.com", "role": "User"})
        assert response.status_code == 201

        response = await client.get("/users")
        assert response.status_code == 200
        assert [u["email"] for u in response.json()] == ["ann@x.com"]

        assert (await client.get("/health")).json() == {"status": "healthy"}

    async def test_missing_directory_is_skipped(self, client_for, tmp_path) -> None:
        app = create_app(static_dir=str(tmp_path / "no-such-dir"))
        client = await client_for(app)

        assert (await client.get("/users")).status_code == 200
        assert (await client.get("/")).status_code == 404

    def test_mount_static_reports_outcome(self, bundle_dir, tmp_path) -> None:
        app = create_app(static_dir=str(tmp_path / "absent"))
        assert mount_static(app, str(tmp_path / "absent")) is False
        assert mount_static(app, str(bundle_dir)) is True


class TestApiPrefix:

    async def test_routes_move_under_prefix(self, client_for, tmp_path) -> None:
        client = await client_for(create_app(api_prefix="/api", static_dir=str(tmp_path / "none")))

        response = await client.post("/api/users", json={"name": "Ann", "email": "ann@x.com", "role": "Admin"})
        assert response.status_code == 201

        response = await client.get("/api/users")
        assert [u["name"] for u in response.json()] == ["Ann"]

        assert (await client.get("/users")).status_code == 404

    async def test_errors_keep_their_status_under_prefix(self, client_for, tmp_path) -> None:
        client = await client_for(create_app(api_prefix="/api", static_dir=str(tmp_path / "none")))

        assert (await client.delete("/api/users/9")).status_code == 404
        response = await client.post("/api/users", json={"name": "Ann", "email": "ann@x.com", "role": "Owner"})
        assert response.status_code == 400
