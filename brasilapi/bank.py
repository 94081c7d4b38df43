"""Brazilian banking system: list banks and look one up by its code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from brasilapi.errors import BRASIL_API_URL, fetch


@dataclass(frozen=True)
class Bank:
    """A bank registered in the Brazilian payment system."""

    ispb: str
    name: str | None = None
    code: int | None = None
    fullname: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Bank:
        """Build from a decoded JSON object."""
        return cls(
            ispb=data["ispb"],
            name=data.get("name"),
            code=data.get("code"),
            fullname=data.get("fullName"),
        )


class BankService:
    """Bank endpoints of the API rooted at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    async def get_all_banks(self) -> list[Bank]:
        """Return every bank known to the API."""
        response = await fetch(f"{self.base_url}/api/banks/v1")
        return [Bank.from_dict(item) for item in response.json()]

    async def get_bank(self, code: int) -> Bank:
        """Return the bank with the given code."""
        response = await fetch(f"{self.base_url}/api/banks/v1/{code}")
        return Bank.from_dict(response.json())


async def get_all_banks() -> list[Bank]:
    """Return every bank in Brazil."""
    return await BankService(BRASIL_API_URL).get_all_banks()


async def get_bank(code: int) -> Bank:
    """Return the bank with the given code."""
    return await BankService(BRASIL_API_URL).get_bank(code)