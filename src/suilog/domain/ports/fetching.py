"""Ports for fetching the remote aquarium catalog."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from suilog.domain.model import CatalogResponse


class FetchErrorKind(StrEnum):
    INVALID_URL = "invalid_url"
    NETWORK = "network"
    HTTP = "http"
    DECODING = "decoding"


class CatalogFetchError(RuntimeError):
    """Raised when the catalog could not be retrieved or understood."""

    def __init__(
        self,
        message: str,
        *,
        kind: FetchErrorKind,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code

    @classmethod
    def invalid_url(cls, url: str) -> CatalogFetchError:
        return cls(f"Invalid catalog URL: {url!r}", kind=FetchErrorKind.INVALID_URL)

    @classmethod
    def network(cls, message: str) -> CatalogFetchError:
        return cls(message, kind=FetchErrorKind.NETWORK)

    @classmethod
    def http(cls, status_code: int) -> CatalogFetchError:
        return cls(
            f"Catalog request failed with HTTP {status_code}",
            kind=FetchErrorKind.HTTP,
            status_code=status_code,
        )

    @classmethod
    def decoding(cls, message: str) -> CatalogFetchError:
        return cls(message, kind=FetchErrorKind.DECODING)

    @property
    def user_message(self) -> str:
        match self.kind:
            case FetchErrorKind.INVALID_URL:
                return "The catalog URL is invalid."
            case FetchErrorKind.NETWORK:
                return "Could not reach the catalog. Check your internet connection."
            case FetchErrorKind.HTTP:
                return f"The catalog server returned an error (code: {self.status_code})."
            case FetchErrorKind.DECODING:
                return "The catalog could not be read."


@runtime_checkable
class CatalogFetcher(Protocol):
    """Callable port for retrieving the current catalog revision.

    Implementations raise :class:`CatalogFetchError` and never retry.
    """

    def __call__(self, url: str | None = None) -> CatalogResponse: ...


__all__ = ["CatalogFetchError", "CatalogFetcher", "FetchErrorKind"]
