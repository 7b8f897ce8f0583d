"""
Resource tests for ``/api/owners``.

Covers the identifier policy of create, replace and merge-patch, the
alert headers, and the owner/account deletion coupling.
"""

import pytest

from conftest import ADMIN, ANNA, login
from furrymatch_api.app.api.deps import get_owner_service, get_user_service
from furrymatch_api.app.main import app
from furrymatch_api.app.repositories.owner_repository import OwnerRepository
from furrymatch_api.app.services.owner_service import OwnerService

# Does not fit an SQLite INTEGER.
HUGE_ID = 99999999999999999999

OWNER = {
    "first_name": "Anna",
    "last_name": "Schmidt",
    "email": "anna@example.com",
    "phone_number": "+49 30 1234567",
    "city": "Berlin",
}


def create_owner(client, headers, **overrides):
    response = client.post("/api/owners", json={**OWNER, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateOwner:
    def test_assigns_id_and_location(self, client, user_headers):
        response = client.post("/api/owners", json=OWNER, headers=user_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] is not None
        assert body["first_name"] == "Anna"
        assert response.headers["location"] == f"/api/owners/{body['id']}"
        assert response.headers["x-furrymatchapp-alert"] == "furrymatchApp.owner.created"
        assert response.headers["x-furrymatchapp-params"] == str(body["id"])

    def test_rejects_preassigned_id(self, client, user_headers):
        response = client.post("/api/owners", json={**OWNER, "id": 42}, headers=user_headers)

        assert response.status_code == 400
        problem = response.json()
        assert problem["errorKey"] == "idexists"
        assert problem["entityName"] == "owner"
        assert problem["message"] == "error.idexists"
        assert response.headers["x-furrymatchapp-error"] == "error.idexists"
        assert response.headers["content-type"].startswith("application/problem+json")
        assert client.get("/api/owners", headers=user_headers).headers["x-total-count"] == "0"

    def test_missing_required_field_is_bad_request(self, client, user_headers):
        response = client.post("/api/owners", json={"city": "Berlin"}, headers=user_headers)

        assert response.status_code == 400
        problem = response.json()
        assert problem["message"] == "error.validation"
        assert any(error["field"] == "first_name" for error in problem["fieldErrors"])

    def test_requires_authentication(self, client):
        response = client.post("/api/owners", json=OWNER)

        assert response.status_code == 401


class TestReadOwner:
    def test_get_existing(self, client, user_headers):
        owner = create_owner(client, user_headers)

        response = client.get(f"/api/owners/{owner['id']}", headers=user_headers)

        assert response.status_code == 200
        assert response.json() == owner

    def test_get_missing_is_not_found(self, client, user_headers):
        response = client.get("/api/owners/999", headers=user_headers)

        assert response.status_code == 404


class TestUpdateOwner:
    def test_replaces_every_field(self, client, user_headers):
        owner = create_owner(client, user_headers)

        response = client.put(
            f"/api/owners/{owner['id']}",
            json={"id": owner["id"], "first_name": "Anne"},
            headers=user_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["first_name"] == "Anne"
        assert body["city"] is None
        assert body["email"] is None
        assert response.headers["x-furrymatchapp-alert"] == "furrymatchApp.owner.updated"

    def test_path_id_wins_over_body_id(self, client, user_headers):
        owner = create_owner(client, user_headers)
        other = create_owner(client, user_headers, first_name="Bert")

        response = client.put(
            f"/api/owners/{owner['id']}",
            json={**OWNER, "id": other["id"], "first_name": "Anne"},
            headers=user_headers,
        )

        assert response.status_code == 200
        assert response.json()["id"] == owner["id"]
        untouched = client.get(f"/api/owners/{other['id']}", headers=user_headers).json()
        assert untouched["first_name"] == "Bert"

    def test_unknown_id_is_bad_request(self, client, user_headers):
        response = client.put("/api/owners/999", json=OWNER, headers=user_headers)

        assert response.status_code == 400
        assert response.json()["errorKey"] == "idnotfound"


class TestPartialUpdateOwner:
    def test_merges_only_supplied_fields(self, client, user_headers):
        owner = create_owner(client, user_headers)

        response = client.patch(
            f"/api/owners/{owner['id']}",
            content=f'{{"id": {owner["id"]}, "city": "Hamburg", "email": null}}',
            headers={**user_headers, "Content-Type": "application/merge-patch+json"},
        )

        assert response.status_code == 200
        assert response.json() == {**owner, "city": "Hamburg"}
        assert response.headers["x-furrymatchapp-alert"] == "furrymatchApp.owner.updated"

    def test_accepts_plain_json(self, client, user_headers):
        owner = create_owner(client, user_headers)

        response = client.patch(
            f"/api/owners/{owner['id']}",
            json={"id": owner["id"], "last_name": "Meyer"},
            headers=user_headers,
        )

        assert response.status_code == 200
        assert response.json()["last_name"] == "Meyer"
        assert response.json()["first_name"] == "Anna"

    def test_missing_id_is_bad_request(self, client, user_headers):
        owner = create_owner(client, user_headers)

        response = client.patch(f"/api/owners/{owner['id']}", json={"city": "Hamburg"}, headers=user_headers)

        assert response.status_code == 400
        assert response.json()["errorKey"] == "idnull"

    def test_mismatching_id_is_bad_request(self, client, user_headers):
        owner = create_owner(client, user_headers)

        response = client.patch(
            f"/api/owners/{owner['id']}",
            json={"id": owner["id"] + 1, "city": "Hamburg"},
            headers=user_headers,
        )

        assert response.status_code == 400
        assert response.json()["errorKey"] == "idinvalid"

    def test_unknown_id_is_bad_request(self, client, user_headers):
        response = client.patch("/api/owners/999", json={"id": 999, "city": "Hamburg"}, headers=user_headers)

        assert response.status_code == 400
        assert response.json()["errorKey"] == "idnotfound"


class TestDeleteOwner:
    def test_deletes_owner_and_current_account(self, client, admin_headers, user_headers):
        owner = create_owner(client, user_headers)

        response = client.delete(f"/api/owners/{owner['id']}", headers=user_headers)

        assert response.status_code == 204
        assert response.headers["x-furrymatchapp-alert"] == "userManagement.deleted"
        assert response.headers["x-furrymatchapp-params"] == ANNA["login"]
        assert client.get(f"/api/owners/{owner['id']}", headers=admin_headers).status_code == 404
        assert client.get("/api/account", headers=user_headers).status_code == 401
        assert client.get(f"/api/admin/users/{ANNA['login']}", headers=admin_headers).status_code == 404

    def test_owned_pets_are_kept_without_owner(self, client, admin_headers, user_headers):
        owner = create_owner(client, user_headers)
        pet = client.post(
            "/api/pets",
            json={"name": "Rex", "pet_type": "DOG", "owner_id": owner["id"]},
            headers=user_headers,
        ).json()

        client.delete(f"/api/owners/{owner['id']}", headers=user_headers)

        stored = client.get(f"/api/pets/{pet['id']}", headers=admin_headers).json()
        assert stored["owner_id"] is None

    def test_account_can_register_again(self, client, user_headers):
        owner = create_owner(client, user_headers)
        client.delete(f"/api/owners/{owner['id']}", headers=user_headers)

        assert client.post("/api/register", json=ANNA).status_code == 201
        assert login(client, ANNA)

    def test_primary_admin_is_refused(self, client, admin_headers, user_headers):
        owner = create_owner(client, admin_headers)

        response = client.delete(f"/api/owners/{owner['id']}", headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["errorKey"] == "primaryadmin"
        assert client.get(f"/api/owners/{owner['id']}", headers=admin_headers).status_code == 200
        assert client.get("/api/admin/users", headers=admin_headers).status_code == 200
        assert login(client, ADMIN)

    def test_unknown_owner_still_removes_account(self, client, user_headers):
        response = client.delete("/api/owners/999", headers=user_headers)

        assert response.status_code == 204
        assert client.get("/api/account", headers=user_headers).status_code == 401


class TestOutOfRangeId:
    def test_get_is_not_found(self, client, user_headers):
        assert client.get(f"/api/owners/{HUGE_ID}", headers=user_headers).status_code == 404

    def test_put_is_unknown_id(self, client, user_headers):
        response = client.put(f"/api/owners/{HUGE_ID}", json=OWNER, headers=user_headers)

        assert response.status_code == 400
        assert response.json()["errorKey"] == "idnotfound"

    def test_patch_is_unknown_id(self, client, user_headers):
        response = client.patch(
            f"/api/owners/{HUGE_ID}",
            content=f'{{"id": {HUGE_ID}, "city": "Hamburg"}}',
            headers={**user_headers, "Content-Type": "application/merge-patch+json"},
        )

        assert response.status_code == 400
        assert response.json()["errorKey"] == "idnotfound"

    def test_delete_is_no_content(self, client, user_headers):
        assert client.delete(f"/api/pets/{HUGE_ID}", headers=user_headers).status_code == 204
        assert client.delete(f"/api/photos/{HUGE_ID}", headers=user_headers).status_code == 204


class VanishingOwnerRepository(OwnerRepository):
    """Loses the row between the existence check and the write."""

    def save(self, entity):
        if entity.id is not None:
            self.delete_by_id(entity.id)
        return super().save(entity)


@pytest.fixture
def vanishing_owners(client):
    app.dependency_overrides[get_owner_service] = lambda: OwnerService(
        VanishingOwnerRepository(), get_user_service()
    )
    yield
    app.dependency_overrides.pop(get_owner_service, None)


class TestRowDeletedDuringWrite:
    def test_put_is_not_found(self, client, user_headers, vanishing_owners):
        owner = create_owner(client, user_headers)

        response = client.put(f"/api/owners/{owner['id']}", json=OWNER, headers=user_headers)

        assert response.status_code == 404
        assert response.json()["errorKey"] == "notfound"

    def test_patch_is_not_found(self, client, user_headers, vanishing_owners):
        owner = create_owner(client, user_headers)

        response = client.patch(
            f"/api/owners/{owner['id']}",
            json={"id": owner["id"], "city": "Hamburg"},
            headers=user_headers,
        )

        assert response.status_code == 404
