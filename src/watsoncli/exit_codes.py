"""Numeric process exit codes.

``watson`` deliberately uses only two codes so that shell scripts can test
for success with a plain ``if watson ...; then``. The error category is
carried by the single ``FAILED:`` line on stderr instead.

Example::

    $ watson lt-v3 list-models --version 2018-05-01
    $ echo $?
    0
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_FAILURE = 1
"""Any failure: usage, input decoding, auth, I/O, remote call, query or render."""
