"""Tests for watsoncli.auth.resolver -- endpoint and credential resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from watsoncli.auth.base import AuthPlugin, AuthResult
from watsoncli.auth.manager import AuthManager
from watsoncli.auth.resolver import resolve_auth
from watsoncli.exceptions import AuthConfigError
from watsoncli.models import GlobalConfig, RequestConfig, ServiceCredentials, ServiceSpec

SERVICE = ServiceSpec(
    tag="example-service-v1",
    credential_name="example_service",
    default_url="https://example.test/api/",
    short_help="Example",
)


class _RecordingPlugin(AuthPlugin):
    def __init__(self) -> None:
        self.seen: list[ServiceCredentials] = []

    @property
    def auth_type(self) -> str:
        return "iam"

    def authenticate(self, credentials: ServiceCredentials) -> AuthResult:
        self.seen.append(credentials)
        return AuthResult(headers={"Authorization": "Bearer fake"})


@pytest.fixture
def recording_manager() -> tuple[AuthManager, _RecordingPlugin]:
    plugin = _RecordingPlugin()
    manager = AuthManager()
    manager.register(plugin)
    return manager, plugin


class TestResolveAuth:
    def test_default_url(self, isolated_env: Path, recording_manager) -> None:
        manager, plugin = recording_manager
        resolved = resolve_auth(SERVICE, manager=manager, environ={"EXAMPLE_SERVICE_APIKEY": "k"})
        assert resolved.base_url == "https://example.test/api"
        assert resolved.auth_result.headers == {"Authorization": "Bearer fake"}
        assert plugin.seen[0].apikey == "k"
        assert resolved.source == "environment"

    def test_credential_url_wins(self, isolated_env: Path, recording_manager) -> None:
        manager, _ = recording_manager
        resolved = resolve_auth(
            SERVICE,
            manager=manager,
            environ={"EXAMPLE_SERVICE_APIKEY": "k", "EXAMPLE_SERVICE_URL": "https://eu.test/api"},
        )
        assert resolved.base_url == "https://eu.test/api"

    def test_request_settings_from_config(self, isolated_env: Path, recording_manager) -> None:
        manager, _ = recording_manager
        config = GlobalConfig(request=RequestConfig(timeout=5.0, verify_ssl=True))
        resolved = resolve_auth(
            SERVICE, config, manager=manager, environ={"EXAMPLE_SERVICE_APIKEY": "k"}
        )
        assert resolved.timeout == 5.0
        assert resolved.verify_ssl is True

    def test_disable_ssl_overrides_config(self, isolated_env: Path, recording_manager) -> None:
        manager, _ = recording_manager
        resolved = resolve_auth(
            SERVICE,
            manager=manager,
            environ={"EXAMPLE_SERVICE_APIKEY": "k", "EXAMPLE_SERVICE_DISABLE_SSL": "true"},
        )
        assert resolved.verify_ssl is False

    def test_no_auth_with_default_manager(self, isolated_env: Path) -> None:
        resolved = resolve_auth(SERVICE, environ={"EXAMPLE_SERVICE_AUTH_TYPE": "noAuth"})
        assert resolved.auth_result.headers == {}

    def test_missing_credentials(self, isolated_env: Path) -> None:
        with pytest.raises(AuthConfigError):
            resolve_auth(SERVICE, environ={})
