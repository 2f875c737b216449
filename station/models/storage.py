"""Outcomes reported by the persistence gateway."""

from dataclasses import dataclass
from enum import StrEnum

from station.models.weather import Reading


class LoadStatus(StrEnum):
    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"
    ERROR = "ERROR"


@dataclass(frozen=True)
class SaveResult:
    time: str
    ok: bool
    error_message: str = ""


@dataclass(frozen=True)
class LoadResult:
    time: str
    status: LoadStatus
    reading: Reading | None = None
    error_message: str = ""

    @property
    def found(self) -> bool:
        return self.status == LoadStatus.FOUND
