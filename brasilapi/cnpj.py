"""Company registry (CNPJ) lookup."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from brasilapi.errors import BRASIL_API_URL, fetch


@dataclass(frozen=True)
class Cnae:
    """An economic activity code with its description."""

    codigo: int | None = None
    descricao: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Cnae:
        """Build from a decoded JSON object."""
        return cls(codigo=data.get("codigo"), descricao=data.get("descricao"))


@dataclass(frozen=True)
class Qsa:
    """A partner or shareholder of a company."""

    identificador_de_socio: int | None = None
    nome_socio: str | None = None
    cnpj_cpf_do_socio: str | None = None
    codigo_qualificacao_socio: int | None = None
    percentual_capital_social: int | None = None
    data_entrada_sociedade: str | None = None
    cpf_representante_legal: str | None = None
    nome_representante_legal: str | None = None
    codigo_qualificacao_representante_legal: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Qsa:
        """Build from a decoded JSON object."""
        return cls(**{f.name: data.get(f.name) for f in fields(cls)})


@dataclass(frozen=True)
class Cnpj:
    """Registration data of a company."""

    cnpj: str | None = None
    identificador_matriz_filial: int | None = None
    descricao_matriz_filial: str | None = None
    razao_social: str | None = None
    nome_fantasia: str | None = None
    situacao_cadastral: int | None = None
    descricao_situacao_cadastral: str | None = None
    data_situacao_cadastral: str | None = None
    motivo_situacao_cadastral: int | None = None
    nome_cidade_exterior: str | None = None
    codigo_natureza_juridica: int | None = None
    data_inicio_atividade: str | None = None
    cnae_fiscal: int | None = None
    cnae_fiscal_descricao: str | None = None
    descricao_tipo_logradouro: str | None = None
    logradouro: str | None = None
    numero: str | None = None
    complemento: str | None = None
    bairro: str | None = None
    cep: str | None = None
    uf: str | None = None
    codigo_municipio: int | None = None
    municipio: str | None = None
    ddd_telefone_1: str | None = None
    ddd_telefone_2: str | None = None
    ddd_fax: str | None = None
    qualificacao_do_responsavel: int | None = None
    capital_social: int | None = None
    porte: str | None = None
    descricao_porte: str | None = None
    opcao_pelo_simples: bool | None = None
    data_opcao_pelo_simples: str | None = None
    data_exclusao_do_simples: str | None = None
    opcao_pelo_mei: bool | None = None
    situacao_especial: str | None = None
    data_situacao_especial: str | None = None
    cnaes_secundarias: tuple[Cnae, ...] | None = None
    qsa: tuple[Qsa, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Cnpj:
        """Build from a decoded JSON object."""
        values = {f.name: data.get(f.name) for f in fields(cls)}
        cnaes = values["cnaes_secundarias"]
        if cnaes is not None:
            values["cnaes_secundarias"] = tuple(Cnae.from_dict(item) for item in cnaes)
        partners = values["qsa"]
        if partners is not None:
            values["qsa"] = tuple(Qsa.from_dict(item) for item in partners)
        return cls(**values)


class CnpjService:
    """CNPJ endpoints of the API rooted at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    async def get_cnpj(self, cnpj: str) -> Cnpj:
        """Look up a company by its CNPJ."""
        response = await fetch(f"{self.base_url}/api/cnpj/v1/{cnpj}")
        return Cnpj.from_dict(response.json())


async def get_cnpj(cnpj: str) -> Cnpj:
    """Look up a company by its CNPJ."""
    return await CnpjService(BRASIL_API_URL).get_cnpj(cnpj)