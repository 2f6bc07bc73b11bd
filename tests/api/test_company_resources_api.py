"""API tests for suppliers and items under /api/company/{id}."""

import pytest
from httpx import AsyncClient

from poms.domain.enums import Role


@pytest.fixture
async def company(client: AsyncClient, user_headers: dict) -> dict:
    r = await client.post("/api/companies", json={"name": "Acme"}, headers=user_headers)
    return r.json()["data"]


@pytest.fixture
async def supplier(client: AsyncClient, user_headers: dict, company: dict) -> dict:
    r = await client.post(
        f"/api/company/{company['id']}/suppliers",
        json={"name": "Steel Co", "gstin": "", "phone": "9876543210"},
        headers=user_headers,
    )
    assert r.status_code == 201, r.text
    return r.json()["data"]


async def test_supplier_create_and_list(
    client: AsyncClient, user_headers: dict, company: dict, supplier: dict
) -> None:
    assert supplier["gstin"] is None
    assert supplier["isRegisteredGst"] is True
    r = await client.get(f"/api/company/{company['id']}/suppliers", headers=user_headers)
    assert r.status_code == 200
    assert [p["id"] for p in r.json()["data"]] == [supplier["id"]]


async def test_supplier_update(
    client: AsyncClient, user_headers: dict, company: dict, supplier: dict
) -> None:
    r = await client.put(
        f"/api/company/{company['id']}/suppliers/{supplier['id']}",
        json={"name": "Steel Company", "isRegisteredGst": False},
        headers=user_headers,
    )
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Steel Company"
    assert r.json()["data"]["isRegisteredGst"] is False
    assert r.json()["data"]["phone"] is None


async def test_supplier_validation_message(client: AsyncClient, user_headers: dict, company: dict) -> None:
    r = await client.post(
        f"/api/company/{company['id']}/suppliers", json={"name": " "}, headers=user_headers
    )
    assert r.status_code == 422
    assert r.json()["message"] == "Supplier name is required"


async def test_supplier_of_foreign_company_is_not_found(
    client: AsyncClient, company: dict, supplier: dict, create_identity, headers_for
) -> None:
    other = headers_for(await create_identity("other@example.com", Role.USER))
    base = f"/api/company/{company['id']}/suppliers"
    assert (await client.get(base, headers=other)).status_code == 404
    assert (await client.get(f"{base}/{supplier['id']}", headers=other)).status_code == 404
    r = await client.post(base, json={"name": "Sneaky"}, headers=other)
    assert r.status_code == 404


async def test_supplier_is_scoped_to_its_company(
    client: AsyncClient, user_headers: dict, supplier: dict
) -> None:
    r = await client.post("/api/companies", json={"name": "Globex"}, headers=user_headers)
    globex = r.json()["data"]
    r = await client.get(
        f"/api/company/{globex['id']}/suppliers/{supplier['id']}", headers=user_headers
    )
    assert r.status_code == 404
    assert r.json()["message"] == "Supplier not found"


async def test_item_lifecycle(
    client: AsyncClient, user_headers: dict, company: dict, supplier: dict
) -> None:
    base = f"/api/company/{company['id']}/items"
    r = await client.post(
        base,
        json={"partyId": supplier["id"], "name": "Bolt", "basePrice": "12.5", "gstRate": 18},
        headers=user_headers,
    )
    assert r.status_code == 201, r.text
    item = r.json()["data"]
    assert item["basePrice"] == 12.5
    assert item["gstRate"] == 18
    assert item["partyId"] == supplier["id"]
    assert item["companyId"] == company["id"]

    r = await client.get(base, headers=user_headers)
    assert [i["id"] for i in r.json()["data"]] == [item["id"]]

    r = await client.patch(
        f"{base}/{item['id']}",
        json={"partyId": supplier["id"], "name": "Hex bolt", "basePrice": 14, "gstRate": 12},
        headers=user_headers,
    )
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Hex bolt"
    assert r.json()["data"]["basePrice"] == 14

    r = await client.get(f"{base}/{item['id']}", headers=user_headers)
    assert r.json()["data"]["gstRate"] == 12


async def test_item_with_foreign_supplier_is_rejected(
    client: AsyncClient, user_headers: dict, company: dict, supplier: dict
) -> None:
    r = await client.post("/api/companies", json={"name": "Globex"}, headers=user_headers)
    globex = r.json()["data"]
    r = await client.post(
        f"/api/company/{globex['id']}/items",
        json={"partyId": supplier["id"], "name": "Bolt", "basePrice": 1, "gstRate": 5},
        headers=user_headers,
    )
    assert r.status_code == 400
    assert r.json()["message"] == "Supplier not found for this company"


async def test_item_validation_messages(client: AsyncClient, user_headers: dict, company: dict) -> None:
    base = f"/api/company/{company['id']}/items"
    r = await client.post(base, json={"name": "Bolt", "basePrice": 1, "gstRate": 5}, headers=user_headers)
    assert r.status_code == 422
    assert r.json()["message"] == "partyId is required"

    r = await client.post(
        base, json={"partyId": "p", "name": "Bolt", "basePrice": 1, "gstRate": 150}, headers=user_headers
    )
    assert r.status_code == 422
    assert r.json()["message"] == "GST rate must be between 0 and 100"

    r = await client.post(
        base, json={"partyId": "p", "name": "Bolt", "basePrice": 1e30, "gstRate": 5}, headers=user_headers
    )
    assert r.status_code == 422
    assert r.json()["message"] == "Base price must be at most 9999999999.99"


async def test_item_of_foreign_company_is_not_found(
    client: AsyncClient, company: dict, create_identity, headers_for
) -> None:
    other = headers_for(await create_identity("other@example.com", Role.USER))
    r = await client.get(f"/api/company/{company['id']}/items", headers=other)
    assert r.status_code == 404
    r = await client.get(f"/api/company/{company['id']}/items/anything", headers=other)
    assert r.status_code == 404
