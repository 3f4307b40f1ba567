"""Integration tests for registration, login and the current user."""

import pytest

pytestmark = pytest.mark.integration

REGISTER_URL = "/api/auth/local/register"
LOGIN_URL = "/api/auth/local"
ME_URL = "/api/users/me"


def test_register_returns_token_and_role(client):
    response = client.post(
        REGISTER_URL,
        json={"username": "newbie", "email": "Newbie@Example.com", "password": "secret123"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["jwt"]
    assert body["user"]["username"] == "newbie"
    assert body["user"]["email"] == "newbie@example.com"
    assert body["user"]["role"]["type"] == "authenticated"


def test_register_duplicate_rejected(client, test_user):
    response = client.post(
        REGISTER_URL,
        json={"username": "someone", "email": test_user.email, "password": "secret123"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Email or Username are already taken"


def test_register_short_password_rejected(client):
    response = client.post(
        REGISTER_URL,
        json={"username": "newbie", "email": "newbie@example.com", "password": "abc"},
    )

    assert response.status_code == 400


def test_login_with_email_or_username(client, test_user):
    by_email = client.post(
        LOGIN_URL, json={"identifier": test_user.email, "password": "testpassword123"}
    )
    by_username = client.post(
        LOGIN_URL, json={"identifier": test_user.username, "password": "testpassword123"}
    )

    assert by_email.status_code == 200
    assert by_username.status_code == 200
    assert by_email.json()["user"]["id"] == test_user.id


def test_login_wrong_password(client, test_user):
    response = client.post(
        LOGIN_URL, json={"identifier": test_user.email, "password": "wrong-password"}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid identifier or password"


def test_login_unknown_user_same_message(client):
    response = client.post(
        LOGIN_URL, json={"identifier": "ghost", "password": "whatever123"}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid identifier or password"


def test_me_returns_user_with_role(client, test_user, auth_headers):
    response = client.get(ME_URL, headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == test_user.id
    assert body["role"]["name"] == "Authenticated"


def test_me_without_token(client):
    assert client.get(ME_URL).status_code == 401


def test_me_with_token_for_deleted_user(client, test_session, test_user, auth_headers):
    test_session.delete(test_user)
    test_session.commit()

    response = client.get(ME_URL, headers=auth_headers)

    assert response.status_code == 401


def test_token_from_login_works_on_me(client, test_user):
    token = client.post(
        LOGIN_URL, json={"identifier": test_user.username, "password": "testpassword123"}
    ).json()["jwt"]

    response = client.get(ME_URL, headers={"Authorization": f"Bearer {token}"})

    assert response.json()["username"] == test_user.username
