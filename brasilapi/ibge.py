"""States and municipalities of Brazil, as published by IBGE."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from brasilapi.errors import BRASIL_API_URL, fetch

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_casefold(text: str) -> str:
    """Lower-case ASCII letters only, leaving every other character as is."""
    return text.translate(_ASCII_LOWER)


@dataclass(frozen=True)
class Municipality:
    """A municipality and its IBGE code."""

    nome: str
    codigo_ibge: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Municipality:
        """Build from a decoded JSON object."""
        return cls(nome=data["nome"], codigo_ibge=data["codigo_ibge"])


@dataclass(frozen=True)
class StateRegion:
    """The region a state belongs to."""

    id: int
    sigla: str
    nome: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StateRegion:
        """Build from a decoded JSON object."""
        return cls(id=data["id"], sigla=data["sigla"], nome=data["nome"])


@dataclass(frozen=True)
class State:
    """A federative unit of Brazil."""

    id: int
    sigla: str
    nome: str
    regiao: StateRegion

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> State:
        """Build from a decoded JSON object."""
        return cls(
            id=data["id"],
            sigla=data["sigla"],
            nome=data["nome"],
            regiao=StateRegion.from_dict(data["regiao"]),
        )


class MunicipalitiesProvider(enum.Enum):
    """Data source for municipality lists, valued as the API's provider name."""

    DADOS_ABERTOS = "dados-abertos-br"
    GOV = "gov"
    WIKIPEDIA = "wikipedia"

    def __str__(self) -> str:
        return self.value


def _providers_query(providers: Iterable[MunicipalitiesProvider] | None) -> str:
    if providers is None:
        return ""
    return ",".join(MunicipalitiesProvider(provider).value for provider in providers)


class IbgeService:
    """IBGE endpoints of the API rooted at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    async def get_municipalities(
        self,
        uf: str,
        providers: Iterable[MunicipalitiesProvider] | None = None,
    ) -> list[Municipality]:
        """List the municipalities of a state."""
        url = (
            f"{self.base_url}/api/ibge/municipios/v1/{uf}"
            f"?providers={_providers_query(providers)}"
        )
        response = await fetch(url)
        return [Municipality.from_dict(item) for item in response.json()]

    async def find_municipality(
        self,
        uf: str,
        city_name: str,
        providers: Iterable[MunicipalitiesProvider] | None = None,
    ) -> Municipality | None:
        """Return the first municipality whose name matches, ignoring ASCII case."""
        wanted = _ascii_casefold(city_name)
        municipalities = await self.get_municipalities(uf, providers)
        return next(
            (m for m in municipalities if _ascii_casefold(m.nome) == wanted),
            None,
        )

    async def get_all_states(self) -> list[State]:
        """List every state of Brazil."""
        response = await fetch(f"{self.base_url}/api/ibge/uf/v1")
        return [State.from_dict(item) for item in response.json()]

    async def get_state(self, code: str) -> State:
        """Return a state by its abbreviation or code."""
        response = await fetch(f"{self.base_url}/api/ibge/uf/v1/{code}")
        return State.from_dict(response.json())


async def get_municipalities(
    uf: str, providers: Iterable[MunicipalitiesProvider] | None = None
) -> list[Municipality]:
    """List the municipalities of a state."""
    return await IbgeService(BRASIL_API_URL).get_municipalities(uf, providers)


async def find_municipality_by_state_and_name(
    uf: str,
    city_name: str,
    providers: Iterable[MunicipalitiesProvider] | None = None,
) -> Municipality | None:
    """Find a municipality of a state by name, ignoring ASCII case."""
    return await IbgeService(BRASIL_API_URL).find_municipality(uf, city_name, providers)


async def get_all_states() -> list[State]:
    """List every state of Brazil."""
    return await IbgeService(BRASIL_API_URL).get_all_states()


async def get_state(code: str) -> State:
    """Return a state by its abbreviation or code."""
    return await IbgeService(BRASIL_API_URL).get_state(code)