# brasilapi

An asynchronous Python client for BrasilAPI, a public API that serves Brazilian data. It covers postal codes (CEP), the company registry (CNPJ), banks, CVM brokerage firms, telephone area codes (DDD), FIPE vehicle prices, national holidays, IBGE states and municipalities, PIX participants and registro.br domains.

Every lookup is a coroutine built on `httpx`. Results are frozen dataclasses.

## Installation

```
pip install brasilapi
```

To install the test tools as well:

```
pip install "brasilapi[test]"
```

## Usage

```python
import asyncio

from brasilapi import cep, ddd, holidays


async def main() -> None:
    address = await cep.get_cep("01001000")
    print(address.state, address.city, address.street)

    print(await cep.validate("01001000"))
    print(await ddd.ddd_exists("21"))

    independence = await holidays.get_holiday("2022", "09", "07")
    print(independence.name)


asyncio.run(main())
```

## Modules

| Module | Functions |
| --- | --- |
| `brasilapi.bank` | `get_all_banks()`, `get_bank(code)` |
| `brasilapi.cep` | `get_cep(cep_code)`, `validate(cep_code)` |
| `brasilapi.cnpj` | `get_cnpj(cnpj)` |
| `brasilapi.corretoras` | `get_corretoras()`, `get_corretora(cnpj)` |
| `brasilapi.ddd` | `get_ddd(ddd)`, `ddd_exists(ddd)` |
| `brasilapi.fipe` | `get_brands(vehicle_type, reference_table=None)`, `get_vehicles(fipe_code, reference_table=None)`, `get_reference_tables()` |
| `brasilapi.holidays` | `get_holidays(year)`, `get_holiday(year, month, day)` |
| `brasilapi.ibge` | `get_municipalities(uf, providers=None)`, `find_municipality_by_state_and_name(uf, city_name, providers=None)`, `get_all_states()`, `get_state(code)` |
| `brasilapi.pix` | `get_participants()` |
| `brasilapi.registrobr` | `get_domain_by_name(name)` |

Each module also has a service class that takes a base URL: `BankService`, `CepService`, `CnpjService`, `CorretorasService`, `DDDService`, `FipeService`, `HolidayService`, `IbgeService`, `PIXService` and `RegistroBrService`. The module-level functions use these with the public API address, `brasilapi.errors.BRASIL_API_URL`. A service pointed elsewhere is handy in tests:

```python
from brasilapi.cep import CepService

service = CepService("http://localhost:8080")
address = await service.get_cep("01001000")
```

Some details:

- `fipe.get_brands` takes a `VehicleType` (`CAR`, `MOTORCYCLE`, `TRUCK`). The optional `reference_table` is sent as the `tabela_referencia` query parameter.
- `ibge.get_municipalities` takes an optional iterable of `MunicipalitiesProvider` values (`DADOS_ABERTOS`, `GOV`, `WIKIPEDIA`).
- `ibge.find_municipality_by_state_and_name` returns the first municipality whose name matches, ignoring the case of ASCII letters only, or `None`.
- `holidays.get_holiday` fetches the year's holidays and picks the one dated `year-month-day`; if there is none it raises `APIError` with code 404.

## Errors

A response other than HTTP 200 raises `brasilapi.errors.APIError`, and so does a transport failure. The exception carries:

- `code`: the HTTP status, or `None` when there was no response
- `error`: an `Errored` member (`NOT_FOUND`, `INTERNAL_SERVER_ERROR`, `BAD_REQUEST`, `UNEXPECTED`)
- `api_error`: the parsed `BrasilAPIError` body (`message`, `kind`, `name`) when the server sent one, otherwise `None`
- `message`: the raw response body or the transport error text

```python
from brasilapi import corretoras
from brasilapi.errors import APIError, Errored


async def lookup() -> None:
    try:
        await corretoras.get_corretora("00000000000000")
    except APIError as exc:
        print(exc.error is Errored.NOT_FOUND, exc.api_error)
```

`cep.validate` and `ddd.ddd_exists` return `False` on a 404 and raise on any other error.

## What it does not do

The package is a library only: it has no command-line tool, and it does not cache or retry requests. Each call opens its own HTTP client.