import httpx
import pytest
import respx

from brasilapi.errors import BRASIL_API_URL, APIError, Errored
from brasilapi.holidays import Holiday, HolidayService, get_holiday, get_holidays

HOLIDAYS_2022 = [
    {"date": "2022-01-01", "name": "Confraternização mundial", "type": "national"},
    {"date": "2022-04-21", "name": "Tiradentes", "type": "national"},
    {"date": "2022-09-07", "name": "Independência do Brasil", "type": "national"},
    {"date": "2022-10-12", "name": "Nossa Senhora Aparecida", "type": "national"},
]


@pytest.fixture
def api():
    with respx.mock(base_url=BRASIL_API_URL, assert_all_called=False) as router:
        router.get("/api/feriados/v1/2022").mock(
            return_value=httpx.Response(200, json=HOLIDAYS_2022)
        )
        yield router


@pytest.mark.asyncio
async def test_get_holidays_contains_holiday(api):
    holidays = await get_holidays("2022")
    holiday = await get_holiday("2022", "01", "01")
    assert holiday in holidays
    assert len(holidays) == 4


@pytest.mark.asyncio
async def test_get_holidays_error(api):
    api.get("/api/feriados/v1/2").mock(
        return_value=httpx.Response(
            404,
            json={"type": "feriados_range_error", "message": "Ano fora do intervalo suportado."},
        )
    )
    with pytest.raises(APIError) as info:
        await get_holidays("2")
    assert info.value.code == 404
    assert info.value.api_error.kind == "feriados_range_error"


@pytest.mark.asyncio
async def test_get_holiday(api):
    holiday = await get_holiday("2022", "09", "07")
    assert holiday.name == "Independência do Brasil"
    assert holiday.kind == "national"


@pytest.mark.asyncio
async def test_get_holiday_error(api):
    with pytest.raises(APIError) as info:
        await get_holiday("2022", "10", "02")
    assert info.value.message == "holiday not found"
    assert info.value.error is Errored.NOT_FOUND
    assert info.value.code == 404
    assert info.value.api_error is None


@pytest.mark.asyncio
async def test_service_uses_its_base_url():
    with respx.mock(base_url="http://mock.local") as router:
        route = router.get("/api/feriados/v1/2023").mock(
            return_value=httpx.Response(200, json=[HOLIDAYS_2022[1]])
        )
        holidays = await HolidayService("http://mock.local").get_holidays("2023")
        assert route.called
    assert holidays == [Holiday(date="2022-04-21", kind="national", name="Tiradentes")]


def test_holiday_from_dict_full_name():
    holiday = Holiday.from_dict(
        {"date": "2022-11-15", "type": "national", "name": "Proclamação da República",
         "full_name": "Dia da Proclamação da República"}
    )
    assert holiday.full_name == "Dia da Proclamação da República"
    assert holiday.kind == "national"