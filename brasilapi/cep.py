"""Brazilian postal codes (CEP): lookup and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from brasilapi.errors import BRASIL_API_URL, APIError, BrasilAPIError, Errored, fetch


@dataclass(frozen=True)
class Cep:
    """Address data for a postal code."""

    cep: str
    state: str
    city: str
    neighborhood: str
    street: str
    service: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Cep:
        """Build from a decoded JSON object."""
        return cls(
            cep=data["cep"],
            state=data["state"],
            city=data["city"],
            neighborhood=data["neighborhood"],
            street=data["street"],
            service=data["service"],
        )


@dataclass(frozen=True)
class Coordinates:
    """Geographic coordinates, as strings."""

    longitude: str
    latitude: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Coordinates:
        """Build from a decoded JSON object."""
        return cls(longitude=data["longitude"], latitude=data["latitude"])


@dataclass(frozen=True)
class Location:
    """A typed location with its coordinates."""

    kind: str
    coordinates: Coordinates

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Location:
        """Build from a decoded JSON object."""
        return cls(kind=data["type"], coordinates=Coordinates.from_dict(data["coordinates"]))


def _api_error_from_dict(data: Mapping[str, Any]) -> APIError:
    raw_api_error = data.get("api_error")
    return APIError(
        message=data["message"],
        error=Errored(data["error"]),
        code=data.get("code"),
        api_error=None if raw_api_error is None else BrasilAPIError.from_dict(raw_api_error),
    )


@dataclass(frozen=True)
class CepError:
    """Aggregated failure report for a postal code lookup."""

    name: str
    message: str
    kind: str
    errors: tuple[APIError, ...] = field(default=())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CepError:
        """Build from a decoded JSON object."""
        return cls(
            name=data["name"],
            message=data["message"],
            kind=data["type"],
            errors=tuple(_api_error_from_dict(item) for item in data["errors"]),
        )


class CepService:
    """CEP endpoints of the API rooted at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    async def get_cep(self, cep_code: str) -> Cep:
        """Look up a postal code."""
        response = await fetch(f"{self.base_url}/api/cep/v2/{cep_code}")
        return Cep.from_dict(response.json())

    async def validate(self, cep_code: str) -> bool:
        """Return True if the postal code exists, False if the API reports 404."""
        try:
            await fetch(f"{self.base_url}/api/cep/v2/{cep_code}")
        except APIError as exc:
            if exc.code == 404:
                return False
            raise
        return True


async def get_cep(cep_code: str) -> Cep:
    """Look up a postal code, with the API's fallback providers."""
    return await CepService(BRASIL_API_URL).get_cep(cep_code)


async def validate(cep_code: str) -> bool:
    """Return whether a postal code exists."""
    return await CepService(BRASIL_API_URL).validate(cep_code)