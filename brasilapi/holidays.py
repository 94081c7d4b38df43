"""National holidays of Brazil."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from brasilapi.errors import BRASIL_API_URL, APIError, Errored, fetch


@dataclass(frozen=True)
class Holiday:
    """A national holiday."""

    date: str
    kind: str
    name: str
    full_name: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Holiday:
        """Build from a decoded JSON object."""
        return cls(
            date=data["date"],
            kind=data["type"],
            name=data["name"],
            full_name=data.get("full_name"),
        )


class HolidayService:
    """Holiday endpoints of the API rooted at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    async def get_holidays(self, year: str) -> list[Holiday]:
        """List the national holidays of a year."""
        response = await fetch(f"{self.base_url}/api/feriados/v1/{year}")
        return [Holiday.from_dict(item) for item in response.json()]

    async def get_holiday(self, year: str, month: str, day: str) -> Holiday:
        """Return the holiday on the given date; raise APIError if there is none."""
        date = f"{year}-{month}-{day}"
        holidays = await self.get_holidays(year)
        found = next((holiday for holiday in holidays if holiday.date == date), None)
        if found is None:
            raise APIError("holiday not found", Errored.NOT_FOUND, 404)
        return found


async def get_holidays(year: str) -> list[Holiday]:
    """List the national holidays of a year."""
    return await HolidayService(BRASIL_API_URL).get_holidays(year)


async def get_holiday(year: str, month: str, day: str) -> Holiday:
    """Return the holiday on the given date."""
    return await HolidayService(BRASIL_API_URL).get_holiday(year, month, day)