"""
Smoke test - the application module builds and exposes its routes.
Run: pytest tests/test_smoke.py -v
"""


def test_app_registers_routes():
    from users_api.main import app

    paths = {(route.path, method) for route in app.routes for method in getattr(route, "methods", ())}
    assert ("/", "GET") in paths
    assert ("/api/users/", "POST") in paths
    assert ("/api/users/", "GET") in paths
    assert ("/api/users/{user_id}", "PUT") in paths
    assert ("/api/users/{user_id}", "DELETE") in paths
