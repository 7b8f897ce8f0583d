"""Registration, authentication and user administration."""

from conftest import ADMIN, ANNA, login


def test_first_account_is_admin(client, admin_headers):
    account = client.get("/api/account", headers=admin_headers).json()

    assert account["login"] == "admin"
    assert account["role_id"] == 1
    assert "password" not in account


def test_later_accounts_are_users(client, user_headers):
    account = client.get("/api/account", headers=user_headers).json()

    assert account["login"] == "anna"
    assert account["first_name"] == "Anna"
    assert account["role_id"] == 2


def test_login_is_case_insensitive(client, admin_headers):
    response = client.post("/api/authenticate", json={"login": "ADMIN", "password": ADMIN["password"]})

    assert response.status_code == 200
    assert response.headers["authorization"] == f"Bearer {response.json()['id_token']}"


def test_duplicate_login(client, user_headers):
    response = client.post("/api/register", json={**ANNA, "email": "other@furrymatch.test"})

    assert response.status_code == 400
    assert response.json()["errorKey"] == "loginexists"


def test_duplicate_email(client, user_headers):
    response = client.post("/api/register", json={**ANNA, "login": "anna2"})

    assert response.status_code == 400
    assert response.json()["errorKey"] == "emailexists"


def test_wrong_password(client, admin_headers):
    response = client.post("/api/authenticate", json={"login": "admin", "password": "nope"})

    assert response.status_code == 401


def test_invalid_token(client):
    response = client.get("/api/account", headers={"Authorization": "Bearer not.a.token"})

    assert response.status_code == 401


def test_admin_lists_users(client, admin_headers, user_headers):
    response = client.get("/api/admin/users", headers=admin_headers)

    assert response.status_code == 200
    assert [u["login"] for u in response.json()] == ["admin", "anna"]
    assert response.headers["x-total-count"] == "2"


def test_users_cannot_administer(client, user_headers):
    assert client.get("/api/admin/users", headers=user_headers).status_code == 403
    assert client.delete("/api/admin/users/admin", headers=user_headers).status_code == 403


def test_admin_deletes_user(client, admin_headers, user_headers):
    response = client.delete("/api/admin/users/anna", headers=admin_headers)

    assert response.status_code == 204
    assert response.headers["x-furrymatchapp-alert"] == "userManagement.deleted"
    assert client.get("/api/account", headers=user_headers).status_code == 401


def test_primary_admin_cannot_be_deleted(client, admin_headers):
    response = client.delete("/api/admin/users/admin", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["errorKey"] == "primaryadmin"
    assert login(client, ADMIN)


def test_delete_unknown_user(client, admin_headers):
    response = client.delete("/api/admin/users/ghost", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["errorKey"] == "usernotfound"
