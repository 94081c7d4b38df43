"""Telephone area codes (DDD): state and cities served by a code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from brasilapi.errors import BRASIL_API_URL, APIError, fetch


@dataclass(frozen=True)
class Regiao:
    """A geographic region of Brazil."""

    id: int
    sigla: str
    nome: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Regiao:
        """Build from a decoded JSON object."""
        return cls(id=data["id"], sigla=data["sigla"], nome=data["nome"])


@dataclass(frozen=True)
class Ddd:
    """State and cities served by an area code."""

    state: str
    cities: tuple[str, ...]
    nome: str | None = None
    regiao: Regiao | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Ddd:
        """Build from a decoded JSON object."""
        raw_regiao = data.get("regiao")
        return cls(
            state=data["state"],
            cities=tuple(data["cities"]),
            nome=data.get("nome"),
            regiao=None if raw_regiao is None else Regiao.from_dict(raw_regiao),
        )


class DDDService:
    """DDD endpoints of the API rooted at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    async def get_ddd(self, ddd: str) -> Ddd:
        """Return the state and cities for an area code."""
        response = await fetch(f"{self.base_url}/api/ddd/v1/{ddd}")
        return Ddd.from_dict(response.json())

    async def ddd_exists(self, ddd: str) -> bool:
        """Return True if the area code exists, False if the API reports 404."""
        try:
            await fetch(f"{self.base_url}/api/ddd/v1/{ddd}")
        except APIError as exc:
            if exc.code == 404:
                return False
            raise
        return True


async def get_ddd(ddd: str) -> Ddd:
    """Return the state and cities for an area code."""
    return await DDDService(BRASIL_API_URL).get_ddd(ddd)


async def ddd_exists(ddd: str) -> bool:
    """Return whether an area code exists."""
    return await DDDService(BRASIL_API_URL).ddd_exists(ddd)