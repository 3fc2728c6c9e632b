"""Smoke test for application startup."""


def test_app_imports() -> None:
    """Verify the app can be imported without errors."""
    from cardgrid.main import app

    assert app.title == "CardGrid"


def test_routes_registered() -> None:
    from cardgrid.main import app

    paths = {route.path for route in app.routes}
    assert {"/health", "/cards/render", "/cards/render/default", "/art/validate"} <= paths
