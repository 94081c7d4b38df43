"""Async client for BrasilAPI: CEP, CNPJ, banks, brokers, DDD, FIPE, holidays, IBGE, PIX and domains."""

__version__ = "0.7.0"

__all__ = [
    "bank",
    "cep",
    "cnpj",
    "corretoras",
    "ddd",
    "errors",
    "fipe",
    "holidays",
    "ibge",
    "pix",
    "registrobr",
]