"""Participants of the PIX instant payment system."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from brasilapi.errors import BRASIL_API_URL, fetch


@dataclass(frozen=True)
class Participant:
    """An institution taking part in PIX."""

    ispb: str
    nome: str
    nome_reduzido: str
    modalidade_participacao: str
    tipo_participacao: str
    inicio_operacao: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Participant:
        """Build from a decoded JSON object; every field is required."""
        return cls(**{f.name: data[f.name] for f in fields(cls)})


class PIXService:
    """PIX endpoints of the API rooted at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    async def get_participants(self) -> list[Participant]:
        """List the PIX participants of the current or previous day."""
        response = await fetch(f"{self.base_url}/api/pix/v1/participants")
        return [Participant.from_dict(item) for item in response.json()]


async def get_participants() -> list[Participant]:
    """List the PIX participants of the current or previous day."""
    return await PIXService(BRASIL_API_URL).get_participants()