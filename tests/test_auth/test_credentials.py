"""Tests for watsoncli.auth.credentials -- credential discovery."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from watsoncli.auth.credentials import (
    credentials_file_path,
    env_prefix,
    has_bad_first_or_last_char,
    load_service_credentials,
    parse_credentials_file,
)
from watsoncli.exceptions import AuthConfigError

LT = "language_translator"


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    def test_env_prefix(self) -> None:
        assert env_prefix("language_translator") == "LANGUAGE_TRANSLATOR_"

    def test_env_prefix_hyphen(self) -> None:
        assert env_prefix("text-to-speech") == "TEXT_TO_SPEECH_"

    @pytest.mark.parametrize("value", ["{apikey}", '"abc"', "abc}", '"'])
    def test_bad_values(self, value: str) -> None:
        assert has_bad_first_or_last_char(value)

    def test_good_value(self) -> None:
        assert not has_bad_first_or_last_char("abc123")

    def test_parse_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "creds.env",
            "# comment\n\nLANGUAGE_TRANSLATOR_APIKEY = abc\nX=a=b\n",
        )
        assert parse_credentials_file(path) == {"LANGUAGE_TRANSLATOR_APIKEY": "abc", "X": "a=b"}

    def test_parse_file_export_and_inline_comment(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "creds.env",
            "export LANGUAGE_TRANSLATOR_APIKEY=abc\n"
            "LANGUAGE_TRANSLATOR_URL=https://x # region\n",
        )
        assert parse_credentials_file(path) == {
            "LANGUAGE_TRANSLATOR_APIKEY": "abc",
            "LANGUAGE_TRANSLATOR_URL": "https://x",
        }

    def test_parse_file_quoted_value(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "creds.env", 'A="quoted value"\n')
        assert parse_credentials_file(path) == {"A": "quoted value"}


# ---------------------------------------------------------------------------
# Credentials file location
# ---------------------------------------------------------------------------


class TestCredentialsFilePath:
    def test_none_found(self, isolated_env: Path) -> None:
        assert credentials_file_path({}) is None

    def test_explicit_variable(self, isolated_env: Path) -> None:
        path = _write(isolated_env / "elsewhere" / "creds.env", "A=1\n")
        assert credentials_file_path({"IBM_CREDENTIALS_FILE": str(path)}) == path

    def test_explicit_variable_missing_file(self, isolated_env: Path) -> None:
        with pytest.raises(AuthConfigError, match="IBM_CREDENTIALS_FILE"):
            credentials_file_path({"IBM_CREDENTIALS_FILE": str(isolated_env / "nope.env")})

    def test_working_directory_before_home(self, isolated_env: Path) -> None:
        cwd_file = _write(isolated_env / "ibm-credentials.env", "A=1\n")
        _write(isolated_env / "home" / "ibm-credentials.env", "A=2\n")
        assert credentials_file_path({}) == cwd_file

    def test_home_directory(self, isolated_env: Path) -> None:
        home_file = _write(isolated_env / "home" / "ibm-credentials.env", "A=2\n")
        assert credentials_file_path({}) == home_file


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadServiceCredentials:
    def test_from_environment(self, isolated_env: Path) -> None:
        creds = load_service_credentials(
            LT,
            {"LANGUAGE_TRANSLATOR_APIKEY": "abc", "LANGUAGE_TRANSLATOR_URL": "https://lt.test"},
        )
        assert creds.apikey == "abc"
        assert creds.url == "https://lt.test"
        assert creds.auth_type == "iam"
        assert creds.source == "environment"

    def test_file_wins_over_environment(self, isolated_env: Path) -> None:
        _write(isolated_env / "ibm-credentials.env", "LANGUAGE_TRANSLATOR_APIKEY=from-file\n")
        creds = load_service_credentials(LT, {"LANGUAGE_TRANSLATOR_APIKEY": "from-env"})
        assert creds.apikey == "from-file"
        assert creds.source.endswith("ibm-credentials.env")

    def test_file_without_service_falls_through(self, isolated_env: Path) -> None:
        _write(isolated_env / "ibm-credentials.env", "DISCOVERY_APIKEY=d\n")
        creds = load_service_credentials(LT, {"LANGUAGE_TRANSLATOR_APIKEY": "from-env"})
        assert creds.apikey == "from-env"

    def test_file_with_export_and_comment(self, isolated_env: Path) -> None:
        _write(
            isolated_env / "ibm-credentials.env",
            "export LANGUAGE_TRANSLATOR_APIKEY=abc\n"
            "LANGUAGE_TRANSLATOR_URL=https://x # region\n",
        )
        creds = load_service_credentials(LT, {})
        assert creds.apikey == "abc"
        assert creds.url == "https://x"

    def test_apikey_precedes_legacy_iam_apikey(self, isolated_env: Path) -> None:
        creds = load_service_credentials(
            LT,
            {"LANGUAGE_TRANSLATOR_IAM_APIKEY": "old", "LANGUAGE_TRANSLATOR_APIKEY": "new"},
        )
        assert creds.apikey == "new"

    def test_legacy_iam_apikey(self, isolated_env: Path) -> None:
        creds = load_service_credentials(LT, {"LANGUAGE_TRANSLATOR_IAM_APIKEY": "old"})
        assert creds.apikey == "old"

    def test_auth_type_and_basic_fields(self, isolated_env: Path) -> None:
        creds = load_service_credentials(
            LT,
            {
                "LANGUAGE_TRANSLATOR_AUTH_TYPE": "basic",
                "LANGUAGE_TRANSLATOR_USERNAME": "user",
                "LANGUAGE_TRANSLATOR_PASSWORD": "pass",
            },
        )
        assert (creds.auth_type, creds.username, creds.password) == ("basic", "user", "pass")

    def test_disable_ssl_parsed(self, isolated_env: Path) -> None:
        creds = load_service_credentials(
            LT, {"LANGUAGE_TRANSLATOR_APIKEY": "a", "LANGUAGE_TRANSLATOR_DISABLE_SSL": "True"}
        )
        assert creds.disable_ssl is True

    def test_vcap_services(self, isolated_env: Path) -> None:
        vcap = {LT: [{"name": "lt", "credentials": {"apikey": "vk", "url": "https://v.test"}}]}
        creds = load_service_credentials(LT, {"VCAP_SERVICES": json.dumps(vcap)})
        assert creds.apikey == "vk"
        assert creds.url == "https://v.test"
        assert creds.source == "VCAP_SERVICES"

    def test_vcap_username_means_basic(self, isolated_env: Path) -> None:
        vcap = {LT: [{"credentials": {"username": "u", "password": "p"}}]}
        creds = load_service_credentials(LT, {"VCAP_SERVICES": json.dumps(vcap)})
        assert creds.auth_type == "basic"

    def test_vcap_invalid_json(self, isolated_env: Path) -> None:
        with pytest.raises(AuthConfigError, match="VCAP_SERVICES"):
            load_service_credentials(LT, {"VCAP_SERVICES": "{"})

    def test_nothing_found(self, isolated_env: Path) -> None:
        with pytest.raises(AuthConfigError) as exc_info:
            load_service_credentials(LT, {})
        assert "LANGUAGE_TRANSLATOR_APIKEY" in exc_info.value.message
        assert exc_info.value.source == "auth"

    def test_unsubstituted_value_rejected(self, isolated_env: Path) -> None:
        with pytest.raises(AuthConfigError, match="apikey"):
            load_service_credentials(LT, {"LANGUAGE_TRANSLATOR_APIKEY": "{apikey}"})

    def test_reads_os_environ_by_default(self, isolated_env: Path, monkeypatch) -> None:
        monkeypatch.setenv("LANGUAGE_TRANSLATOR_AUTH_TYPE", "noAuth")
        assert load_service_credentials(LT).auth_type == "noAuth"
