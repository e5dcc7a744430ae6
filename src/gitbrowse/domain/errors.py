"""Errors raised by the repository-access layer.

Every error carries the HTTP status the API answers with. Anything that is
not an ``ApiError`` is an unexpected fault and becomes a plain 500.
"""

from __future__ import annotations


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class RepositoryNotFound(ApiError):
    status_code = 404

    def __init__(self, slug: str) -> None:
        super().__init__(f"Unknown repo: {slug}")
        self.slug = slug


class StorageUnavailable(ApiError):
    """A filesystem operation on the storage root failed for a reason other than absence."""


class SubprocessFailure(ApiError):
    """The version-control binary could not run or wrote to stderr."""


class MalformedListing(ApiError):
    """A tree listing line did not have the expected shape."""


class InvalidObjectName(ApiError):
    """A revision or hash that git would read as a command-line option."""
