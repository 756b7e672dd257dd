# blitz_backend/core/errors.py
"""Typed errors raised by the bot and plugin services.

Each error carries a machine-checkable ``kind`` and the HTTP status the
transport layer answers with.
"""


class BlitzError(Exception):
    kind = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind}


class ValidationError(BlitzError):
    kind = "validation_error"
    status_code = 400


class NotFoundError(BlitzError):
    kind = "not_found"
    status_code = 404


class AlreadyExistsError(BlitzError):
    kind = "already_exists"
    status_code = 409


class UpstreamError(BlitzError):
    kind = "upstream_error"
    status_code = 502


class UpstreamFetchError(UpstreamError):
    """The entrypoint template could not be downloaded."""


class ParseError(BlitzError):
    kind = "parse_error"
    status_code = 500


class WorkspaceIOError(BlitzError):
    kind = "io_error"
    status_code = 500
