import httpx
import pytest
import respx

from brasilapi.errors import BRASIL_API_URL, APIError, Errored
from brasilapi.registrobr import Domain, RegistroBrService, get_domain_by_name

REGISTERED = {
    "status_code": 2,
    "status": "REGISTERED",
    "fqdn": "google.com.br",
    "hosts": ["ns1.example.com", "ns2.example.com"],
    "publication-status": "published",
    "expires-at": "2030-01-01T00:00:00-03:00",
    "suggestions": ["agr.br", "app.br"],
}


def test_domain_from_dict_renamed_fields():
    domain = Domain.from_dict(REGISTERED)
    assert domain.publication_status == "published"
    assert domain.expires_at == "2030-01-01T00:00:00-03:00"
    assert domain.hosts == ("ns1.example.com", "ns2.example.com")
    assert domain.reasons is None


def test_domain_from_dict_minimal():
    domain = Domain.from_dict({"status_code": 0, "status": "AVAILABLE", "fqdn": "livre.com.br"})
    assert domain == Domain(0, "AVAILABLE", "livre.com.br")


@pytest.mark.asyncio
async def test_get_domain_by_name():
    with respx.mock(base_url=BRASIL_API_URL) as router:
        router.get(path="/api/registrobr/v1/google.com").mock(
            return_value=httpx.Response(200, json=REGISTERED)
        )
        domain = await get_domain_by_name("google.com")
    assert domain.status_code == 2
    assert domain.status == "REGISTERED"
    assert domain.fqdn == "google.com.br"


@pytest.mark.asyncio
async def test_get_domain_bad_request():
    base = "http://localhost:7000"
    body = {"message": "Domínio inválido", "type": "bad_request"}
    with respx.mock(base_url=base) as router:
        router.get(path="/api/registrobr/v1/x").mock(return_value=httpx.Response(400, json=body))
        with pytest.raises(APIError) as info:
            await RegistroBrService(base).get_domain("x")
    assert info.value.code == 400
    assert info.value.error is Errored.BAD_REQUEST
    assert info.value.api_error.message == "Domínio inválido"
    assert info.value.api_error.name is None