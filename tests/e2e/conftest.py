"""E2E test fixtures for Playwright.

The pytest-playwright plugin automatically provides:
  - page: A new browser page for each test
  - context: A new browser context for each test
  - browser: A browser instance (session scope)

Override base_url with --base-url on the CLI:
    pytest -m e2e --base-url http://localhost:8000
"""

from __future__ import annotations

import subprocess
from typing import Generator
from uuid import uuid4

import pytest
from playwright.sync_api import APIRequestContext, Playwright


@pytest.fixture(scope="session")
def base_url(request) -> str:
    """Provide base URL for Playwright tests.

    Uses --base-url CLI value if given, otherwise defaults to the
    Django dev server running inside the Docker container.
    """
    return request.config.getoption("base_url") or "http://localhost:8000"


@pytest.fixture(autouse=True)
def _use_db() -> None:
    """Override root conftest _use_db: e2e tests hit the server over HTTP,
    they do not need the pytest-django ``db`` fixture (which conflicts
    with Playwright's async event-loop)."""


@pytest.fixture(scope="session")
def api_request_context(
    playwright: Playwright, base_url: str
) -> Generator[APIRequestContext, None, None]:
    """Playwright API context for direct HTTP calls."""
    context = playwright.request.new_context(base_url=base_url)
    yield context
    context.dispose()


def _run_manage_py(command: str) -> None:
    subprocess.run(
        ["python", "src/manage.py", "shell", "-c", command],
        check=True,
        capture_output=True,
        text=True,
    )


def _create_user(username: str, password: str, role: str) -> None:
    command = (
        "from django.contrib.auth import get_user_model; "
        "User = get_user_model(); "
        f"User.objects.filter(username={username!r}).delete(); "
        f"User.objects.create_user(username={username!r}, password={password!r}, role={role!r})"
    )
    _run_manage_py(command)


def _deactivate_user(username: str) -> None:
    command = (
        "from django.contrib.auth import get_user_model; "
        "User = get_user_model(); "
        f"User.objects.filter(username={username!r}).update(is_active=False)"
    )
    _run_manage_py(command)


@pytest.fixture()
def user_factory() -> Generator:
    """Creates users with a role through ``manage.py shell``; deactivates them afterwards."""
    created: list[str] = []

    def _factory(role: str) -> tuple[str, str]:
        username = f"e2e_{role.lower()}_{uuid4().hex[:8]}"
        password = "testpass123"
        _create_user(username, password, role)
        created.append(username)
        return username, password

    yield _factory
    for username in created:
        _deactivate_user(username)


@pytest.fixture()
def auth_credentials(user_factory) -> tuple[str, str]:
    """Valid administrator credentials."""
    return user_factory("ADMIN")


def _obtain_token(api_request_context, username: str, password: str) -> str:
    response = api_request_context.post(
        "/api/v1/auth/token/",
        data={"username": username, "password": password},
    )
    assert response.status == 200
    return response.json()["access"]


@pytest.fixture()
def auth_token(api_request_context, auth_credentials) -> str:
    """Access token for an administrator."""
    return _obtain_token(api_request_context, *auth_credentials)


@pytest.fixture()
def driver_session(api_request_context, user_factory) -> tuple[str, str]:
    """``(driver_id, access_token)`` for a freshly created driver."""
    username, password = user_factory("DRIVER")
    token = _obtain_token(api_request_context, username, password)
    me = api_request_context.get(
        "/api/v1/me/", headers={"Authorization": f"Bearer {token}"}
    )
    assert me.status == 200
    return me.json()["id"], token
