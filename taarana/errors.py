"""
Taarana error types.
Every error carries the HTTP status the API answers with.
"""


class TaaranaError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(TaaranaError):
    """Bad input caught before any remote call."""
    status_code = 400


class AuthError(TaaranaError):
    """The identity provider rejected the request."""
    status_code = 400


class UnauthorizedError(TaaranaError):
    status_code = 401

    def __init__(self, message="Unauthorized"):
        super().__init__(message)


class NotFoundError(TaaranaError):
    status_code = 404


class RuleConfigError(TaaranaError):
    """A rule table can never behave as written."""


class ConfigError(TaaranaError):
    pass
