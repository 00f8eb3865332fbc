"""Credential discovery for one service.

A service's credential set is looked up in three places, first match
wins:

1. a credentials file -- ``$IBM_CREDENTIALS_FILE``, else
   ``./ibm-credentials.env``, else ``~/ibm-credentials.env``;
2. the process environment;
3. the ``VCAP_SERVICES`` JSON document.

Within the file and the environment, a service's variables share the
upper-cased credential name as prefix, e.g. ``LANGUAGE_TRANSLATOR_APIKEY``
and ``LANGUAGE_TRANSLATOR_URL``. A source "matches" when it defines at
least one variable with that prefix.

Example ``ibm-credentials.env``::

    # Language Translator
    LANGUAGE_TRANSLATOR_APIKEY=abc123
    LANGUAGE_TRANSLATOR_URL=https://gateway-fra.watsonplatform.net/language-translator/api
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from dotenv import dotenv_values

from watsoncli.exceptions import AuthConfigError
from watsoncli.models import ServiceCredentials

logger = logging.getLogger(__name__)

CREDENTIALS_FILE_ENV = "IBM_CREDENTIALS_FILE"
DEFAULT_CREDENTIALS_FILE = "ibm-credentials.env"
VCAP_SERVICES_ENV = "VCAP_SERVICES"

# Variable suffix -> ServiceCredentials field.
_PROPERTY_FIELDS = {
    "AUTH_TYPE": "auth_type",
    "APIKEY": "apikey",
    "IAM_APIKEY": "apikey",
    "URL": "url",
    "USERNAME": "username",
    "PASSWORD": "password",
    "BEARER_TOKEN": "bearer_token",
    "AUTH_URL": "auth_url",
    "IAM_URL": "auth_url",
    "DISABLE_SSL": "disable_ssl",
}

_TRUE_VALUES = ("true", "1", "yes")


def env_prefix(credential_name: str) -> str:
    """Return the variable prefix for *credential_name*.

    ``language_translator`` becomes ``LANGUAGE_TRANSLATOR_``.
    """
    return credential_name.upper().replace("-", "_") + "_"


def has_bad_first_or_last_char(value: str) -> bool:
    """Whether *value* looks like an unsubstituted template or a quoted literal."""
    return value.startswith(("{", '"')) or value.endswith(("}", '"'))


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


def credentials_file_path(environ: Mapping[str, str]) -> Optional[Path]:
    """Return the first credentials file that exists, or ``None``."""
    explicit = environ.get(CREDENTIALS_FILE_ENV)
    if explicit:
        path = Path(explicit).expanduser()
        if not path.is_file():
            raise AuthConfigError(f"{CREDENTIALS_FILE_ENV} points to a missing file: {path}")
        return path

    for candidate in (Path.cwd() / DEFAULT_CREDENTIALS_FILE, Path.home() / DEFAULT_CREDENTIALS_FILE):
        if candidate.is_file():
            return candidate
    return None


def parse_credentials_file(path: Path) -> dict[str, str]:
    """Read a dotenv-style credentials file.

    ``export`` prefixes, quoting and inline ``#`` comments follow the
    usual ``.env`` rules. Keys without a value are dropped.
    """
    try:
        with open(path, encoding="utf-8") as stream:
            values = dotenv_values(stream=stream)
    except OSError as exc:
        raise AuthConfigError(f"cannot read credentials file {path}: {exc}") from exc
    return {key: value for key, value in values.items() if value is not None}


def _properties_with_prefix(variables: Mapping[str, str], prefix: str) -> dict[str, Any]:
    props: dict[str, Any] = {}
    for suffix, field in _PROPERTY_FIELDS.items():
        value = variables.get(prefix + suffix)
        if value is None:
            continue
        # APIKEY takes precedence over the legacy IAM_APIKEY.
        if field in props and suffix.startswith("IAM_"):
            continue
        props[field] = value
    if "disable_ssl" in props:
        props["disable_ssl"] = str(props["disable_ssl"]).strip().lower() in _TRUE_VALUES
    return props


def _properties_from_vcap(raw: str, credential_name: str) -> dict[str, Any]:
    try:
        services = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise AuthConfigError(f"{VCAP_SERVICES_ENV} is not valid JSON: {exc}") from exc
    if not isinstance(services, dict):
        return {}

    entries = services.get(credential_name)
    if not isinstance(entries, list) or not entries or not isinstance(entries[0], dict):
        return {}
    creds = entries[0].get("credentials") or {}

    props: dict[str, Any] = {}
    for key in ("apikey", "url", "username", "password"):
        if creds.get(key):
            props[key] = creds[key]
    if "apikey" not in props and "username" in props:
        props["auth_type"] = "basic"
    return props


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_service_credentials(
    credential_name: str,
    environ: Optional[Mapping[str, str]] = None,
) -> ServiceCredentials:
    """Find the credential set for *credential_name*.

    Args:
        credential_name: The service's environment namespace, e.g.
            ``language_translator``.
        environ: Environment to read; defaults to :data:`os.environ`.

    Returns:
        The :class:`~watsoncli.models.ServiceCredentials` of the first
        matching source, with ``source`` naming where it was found.

    Raises:
        AuthConfigError: If no source defines the service, or a value is
            malformed.
    """
    environ = os.environ if environ is None else environ
    prefix = env_prefix(credential_name)

    props: dict[str, Any] = {}
    source = ""

    path = credentials_file_path(environ)
    if path is not None:
        props = _properties_with_prefix(parse_credentials_file(path), prefix)
        source = str(path)

    if not props:
        props = _properties_with_prefix(environ, prefix)
        source = "environment"

    if not props and environ.get(VCAP_SERVICES_ENV):
        props = _properties_from_vcap(environ[VCAP_SERVICES_ENV], credential_name)
        source = VCAP_SERVICES_ENV

    if not props:
        raise AuthConfigError(
            f"no credentials found for {credential_name}; set {prefix}APIKEY "
            f"(or {prefix}AUTH_TYPE) in the environment or in {DEFAULT_CREDENTIALS_FILE}"
        )

    for field, value in props.items():
        if isinstance(value, str) and field != "auth_type" and (
            not value or has_bad_first_or_last_char(value)
        ):
            raise AuthConfigError(
                f"the {field} for {credential_name} is empty or contains "
                f"unsubstituted braces or quotes"
            )

    logger.debug("Loaded credentials for %s from %s", credential_name, source)
    return ServiceCredentials(source=source, **props)
