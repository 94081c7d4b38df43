"""Brokerage firms listed with the securities regulator (CVM)."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from brasilapi.errors import BRASIL_API_URL, fetch


@dataclass(frozen=True)
class Corretora:
    """A brokerage firm registered with the CVM."""

    cnpj: str
    nome_social: str
    nome_comercial: str
    bairro: str
    cep: str
    codigo_cvm: str
    complemento: str
    data_inicio_situacao: str
    data_patrimonio_liquido: str
    data_registro: str
    email: str
    logradouro: str
    municipio: str
    pais: str
    telefone: str
    uf: str
    valor_patrimonio_liquido: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Corretora:
        """Build from a decoded JSON object; every field is required."""
        return cls(**{f.name: data[f.name] for f in fields(cls)})


class CorretorasService:
    """Brokerage endpoints of the API rooted at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    async def get_corretoras(self) -> list[Corretora]:
        """Return every brokerage firm in the CVM files."""
        response = await fetch(f"{self.base_url}/api/cvm/corretoras/v1")
        return [Corretora.from_dict(item) for item in response.json()]

    async def get_corretora(self, cnpj: str) -> Corretora:
        """Return the brokerage firm with the given CNPJ."""
        response = await fetch(f"{self.base_url}/api/cvm/corretoras/v1/{cnpj}")
        return Corretora.from_dict(response.json())


async def get_corretoras() -> list[Corretora]:
    """Return every brokerage firm in the CVM files."""
    return await CorretorasService(BRASIL_API_URL).get_corretoras()


async def get_corretora(cnpj: str) -> Corretora:
    """Return the brokerage firm with the given CNPJ."""
    return await CorretorasService(BRASIL_API_URL).get_corretora(cnpj)