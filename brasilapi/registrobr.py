"""Domain availability at registro.br."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from brasilapi.errors import BRASIL_API_URL, fetch


def _optional_tuple(value: Any) -> tuple[str, ...] | None:
    return None if value is None else tuple(value)


@dataclass(frozen=True)
class Domain:
    """Registration status of a domain name."""

    status_code: int
    status: str
    fqdn: str
    suggestions: tuple[str, ...] | None = None
    hosts: tuple[str, ...] | None = None
    publication_status: str | None = None
    expires_at: str | None = None
    reasons: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Domain:
        """Build from a decoded JSON object."""
        return cls(
            status_code=data["status_code"],
            status=data["status"],
            fqdn=data["fqdn"],
            suggestions=_optional_tuple(data.get("suggestions")),
            hosts=_optional_tuple(data.get("hosts")),
            publication_status=data.get("publication-status"),
            expires_at=data.get("expires-at"),
            reasons=_optional_tuple(data.get("reasons")),
        )


class RegistroBrService:
    """registro.br endpoints of the API rooted at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    async def get_domain(self, name: str) -> Domain:
        """Return the registration status of a domain."""
        response = await fetch(f"{self.base_url}/api/registrobr/v1/{name}")
        return Domain.from_dict(response.json())


async def get_domain_by_name(name: str) -> Domain:
    """Return the registration status of a domain."""
    return await RegistroBrService(BRASIL_API_URL).get_domain(name)