"""Average vehicle prices from the FIPE table."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping

from brasilapi.errors import BRASIL_API_URL, fetch


@dataclass(frozen=True)
class Brand:
    """A vehicle brand and its FIPE identifier."""

    nome: str
    valor: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Brand:
        """Build from a decoded JSON object."""
        return cls(nome=data["nome"], valor=data["valor"])


@dataclass(frozen=True)
class Vehicle:
    """Price of a vehicle model in a reference month."""

    valor: str
    marca: str
    modelo: str
    ano_modelo: int
    combustivel: str
    codigo_fipe: str
    mes_referencia: str
    tipo_veiculo: int
    sigla_combustivel: str
    data_consulta: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Vehicle:
        """Build from a decoded JSON object."""
        return cls(
            valor=data["valor"],
            marca=data["marca"],
            modelo=data["modelo"],
            ano_modelo=data["anoModelo"],
            combustivel=data["combustivel"],
            codigo_fipe=data["codigoFipe"],
            mes_referencia=data["mesReferencia"],
            tipo_veiculo=data["tipoVeiculo"],
            sigla_combustivel=data["siglaCombustivel"],
            data_consulta=data["dataConsulta"],
        )


@dataclass(frozen=True)
class ReferenceTable:
    """A FIPE reference table and its month."""

    codigo: int
    mes: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ReferenceTable:
        """Build from a decoded JSON object."""
        return cls(codigo=data["codigo"], mes=data["mes"])


class VehicleType(enum.Enum):
    """Kind of vehicle, valued as the API's path segment."""

    CAR = "carros"
    MOTORCYCLE = "motos"
    TRUCK = "caminhoes"

    def __str__(self) -> str:
        return self.value


def _reference_query(reference_table: int | None) -> str:
    return "" if reference_table is None else f"tabela_referencia={reference_table}"


class FipeService:
    """FIPE endpoints of the API rooted at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    async def get_brands(
        self, vehicle_type: VehicleType, reference_table: int | None = None
    ) -> list[Brand]:
        """List the brands of a vehicle type."""
        kind = VehicleType(vehicle_type).value
        url = f"{self.base_url}/api/fipe/marcas/v1/{kind}?{_reference_query(reference_table)}"
        response = await fetch(url)
        return [Brand.from_dict(item) for item in response.json()]

    async def get_vehicles(
        self, fipe_code: str, reference_table: int | None = None
    ) -> list[Vehicle]:
        """Return the prices of the vehicle with the given FIPE code."""
        url = f"{self.base_url}/api/fipe/preco/v1/{fipe_code}?{_reference_query(reference_table)}"
        response = await fetch(url)
        return [Vehicle.from_dict(item) for item in response.json()]

    async def get_reference_tables(self) -> list[ReferenceTable]:
        """List the existing reference tables."""
        response = await fetch(f"{self.base_url}/api/fipe/tabelas/v1/")
        return [ReferenceTable.from_dict(item) for item in response.json()]


async def get_brands(
    vehicle_type: VehicleType, reference_table: int | None = None
) -> list[Brand]:
    """List the brands of a vehicle type."""
    return await FipeService(BRASIL_API_URL).get_brands(vehicle_type, reference_table)


async def get_vehicles(fipe_code: str, reference_table: int | None = None) -> list[Vehicle]:
    """Return the prices of the vehicle with the given FIPE code."""
    return await FipeService(BRASIL_API_URL).get_vehicles(fipe_code, reference_table)


async def get_reference_tables() -> list[ReferenceTable]:
    """List the existing reference tables."""
    return await FipeService(BRASIL_API_URL).get_reference_tables()