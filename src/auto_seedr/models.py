"""Data models used by auto-seedr."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Self, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Folder:
    """Remote Seedr folder as returned by ``GET /api/folder``."""

    id: int
    name: str
    fullname: str = ""
    size: int = 0
    play_audio: bool = False
    play_video: bool = False
    is_shared: bool = False
    last_update: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a folder from an API payload.

        Only ``id`` and ``name`` are required; the remaining keys fall back
        to neutral defaults.
        """
        name = str(data["name"])
        return cls(
            id=int(data["id"]),
            name=name,
            fullname=str(data.get("fullname") or name),
            size=int(data.get("size") or 0),
            play_audio=bool(data.get("play_audio", False)),
            play_video=bool(data.get("play_video", False)),
            is_shared=bool(data.get("is_shared", False)),
            last_update=str(data.get("last_update") or ""),
        )


@dataclass(frozen=True, slots=True)
class DeviceCode:
    """Pairing codes returned by the device authorization start endpoint."""

    device_code: str
    user_code: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            device_code=str(data["device_code"]),
            user_code=str(data["user_code"]),
        )


@dataclass(frozen=True, slots=True)
class ArchiveLink:
    archive_url: str | None
    archive_id: int | None
    success: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        archive_id = data.get("archive_id")
        return cls(
            archive_url=data.get("archive_url"),
            archive_id=int(archive_id) if archive_id is not None else None,
            success=bool(data.get("result", False)),
        )


@dataclass(frozen=True, slots=True)
class FetchedFile:
    url: str | None
    name: str | None
    success: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            url=data.get("url"),
            name=data.get("name"),
            success=bool(data.get("result", False)),
        )


@dataclass(frozen=True, slots=True)
class ApiResult(Generic[T]):
    """Outcome of a single remote call.

    ``value`` carries the parsed payload (or a neutral fallback such as an
    empty list), ``error`` is set when the HTTP status was not successful.
    Callers that only care about the happy path can read ``value`` and
    ignore the rest.
    """

    value: T
    status_code: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
