import httpx
import pytest
import respx

from brasilapi.corretoras import Corretora, CorretorasService, get_corretora, get_corretoras
from brasilapi.errors import BRASIL_API_URL, APIError, BrasilAPIError, Errored

XP = {
    "cnpj": "02332886000104",
    "nome_social": "XP INVESTIMENTOS CCTVM S.A.",
    "nome_comercial": "XP INVESTIMENTOS",
    "bairro": "CENTRO",
    "cep": "20000000",
    "codigo_cvm": "3247",
    "complemento": "SALA 1",
    "data_inicio_situacao": "1998-02-10",
    "data_patrimonio_liquido": "2021-12-31",
    "data_registro": "1997-12-05",
    "email": "contato@example.com",
    "logradouro": "AVENIDA EXEMPLO 1",
    "municipio": "RIO DE JANEIRO",
    "pais": "",
    "telefone": "0",
    "uf": "RJ",
    "valor_patrimonio_liquido": "100.00",
}


@pytest.fixture
def router():
    with respx.mock(base_url=BRASIL_API_URL, assert_all_called=True) as mocked:
        yield mocked


def test_corretora_from_dict_requires_every_field():
    incomplete = dict(XP)
    del incomplete["uf"]
    with pytest.raises(KeyError):
        Corretora.from_dict(incomplete)


@pytest.mark.asyncio
async def test_get_corretoras(router):
    router.get("/api/cvm/corretoras/v1").mock(return_value=httpx.Response(200, json=[XP]))

    corretoras = await get_corretoras()

    assert len(corretoras) == 1
    assert corretoras[0] == Corretora.from_dict(XP)


@pytest.mark.asyncio
async def test_get_corretora(router):
    router.get("/api/cvm/corretoras/v1/02332886000104").mock(
        return_value=httpx.Response(200, json=XP)
    )

    corretora = await get_corretora("02332886000104")

    assert corretora.cnpj == "02332886000104"
    assert corretora.nome_social == "XP INVESTIMENTOS CCTVM S.A."


@pytest.mark.asyncio
async def test_get_corretora_not_found(router):
    router.get("/api/cvm/corretoras/v1/00000000000000").mock(
        return_value=httpx.Response(
            404,
            json={
                "message": "Nenhuma corretora localizada",
                "type": "exchange_error",
                "name": "EXCHANGE_NOT_FOUND",
            },
        )
    )

    with pytest.raises(APIError) as info:
        await get_corretora("00000000000000")

    assert info.value.api_error == BrasilAPIError(
        kind="exchange_error",
        message="Nenhuma corretora localizada",
        name="EXCHANGE_NOT_FOUND",
    )
    assert info.value.error is Errored.NOT_FOUND


@pytest.mark.asyncio
async def test_service_custom_base_url():
    with respx.mock() as mocked:
        route = mocked.get("http://testserver/api/cvm/corretoras/v1").mock(
            return_value=httpx.Response(200, json=[XP, XP])
        )
        corretoras = await CorretorasService("http://testserver").get_corretoras()

    assert route.call_count == 1
    assert [c.uf for c in corretoras] == ["RJ", "RJ"]