"""Exception hierarchy for watsoncli.

All exceptions inherit from :class:`WatsonCLIError`, which carries an
``exit_code`` (always :data:`~watsoncli.exit_codes.EXIT_FAILURE`) and a
``source`` naming the flag or component the failure originated from. The
top-level handler in :func:`watsoncli.app.main` turns any of them into one
``FAILED: <source>: <message>`` line on stderr.

Subclass hierarchy::

    WatsonCLIError
    +-- UsageError          missing or unknown flag / service / operation
    +-- InputDecodeError    malformed JSON or list in a flag value
    +-- TimeParseError      malformed date or datetime flag
    +-- FileAccessError     open / read / write failures
    +-- AuthConfigError     missing or malformed credentials
    +-- RemoteCallError     non-2xx response or transport failure
    +-- QueryCompileError   JMESPath expression does not compile
    +-- QueryEvalError      JMESPath expression fails at runtime
    +-- RenderError         unexpected failure while formatting
    +-- ConfigError         malformed configuration file
    +-- RegistryError       inconsistent operation descriptors
"""

from __future__ import annotations

from typing import Optional

from watsoncli.exit_codes import EXIT_FAILURE


class WatsonCLIError(Exception):
    """Base exception for all watsoncli errors.

    Args:
        message: Human-readable error description.
        source: The flag name or component that produced the error. When
            omitted the class-level ``source`` is used.
    """

    exit_code: int = EXIT_FAILURE
    source: str = "watson"

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if source is not None:
            self.source = source

    def failure_line(self) -> str:
        """Return the one-line stderr rendering of this error."""
        return f"FAILED: {self.source}: {self.message}"


class UsageError(WatsonCLIError):
    """Raised for unknown services, operations or flags and missing required flags."""

    source = "usage"


class InputDecodeError(WatsonCLIError):
    """Raised when a JSON or list flag value is not well-formed."""

    source = "input"


class TimeParseError(WatsonCLIError):
    """Raised when a ``date`` or ``datetime`` flag value cannot be parsed."""

    source = "input"


class FileAccessError(WatsonCLIError):
    """Raised when a bound file cannot be opened or an output file cannot be written."""

    source = "io"


class AuthConfigError(WatsonCLIError):
    """Raised when no usable credential set exists for a service, or a token exchange fails."""

    source = "auth"


class RemoteCallError(WatsonCLIError):
    """Raised when the remote service answers with an error status or cannot be reached.

    Args:
        message: Human-readable error description.
        source: Component name (defaults to ``"remote"``).
        status_code: HTTP status code, when a response was received.
    """

    source = "remote"

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, source)
        self.status_code = status_code


class QueryCompileError(WatsonCLIError):
    """Raised when the ``--jmes_query`` expression does not compile."""

    source = "jmes_query"


class QueryEvalError(WatsonCLIError):
    """Raised when the ``--jmes_query`` expression fails against the result."""

    source = "jmes_query"


class RenderError(WatsonCLIError):
    """Raised for unexpected failures while formatting a result."""

    source = "output"


class ConfigError(WatsonCLIError):
    """Raised for configuration problems (unreadable file, invalid JSON, bad values)."""

    source = "config"


class RegistryError(WatsonCLIError):
    """Raised when operation descriptors are inconsistent with each other."""

    source = "registry"
