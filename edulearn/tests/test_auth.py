from fastapi import status

from edulearn.core.identity import AdminIdentity, UserIdentity
from edulearn.core.security import create_admin_token, decode_token, hash_password
from edulearn.models import Admin, AdminRole


def test_register_and_login_user(client):
    response = client.post(
        "/api/auth/register",
        json={"name": "Grace", "email": "grace@example.com", "password": "hopper123"},
    )
    assert response.status_code == status.HTTP_200_OK
    assert isinstance(decode_token(response.json()["token"]), UserIdentity)

    response = client.post("/api/auth/login", json={"email": "grace@example.com", "password": "hopper123"})
    assert response.status_code == status.HTTP_200_OK
    token = response.json()["token"]

    response = client.get("/api/auth/me", headers={"x-auth-token": token})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["email"] == "grace@example.com"
    assert data["preferences"] == {"theme": "light", "language": "en"}
    assert "passwordHash" not in data


def test_register_duplicate_email(client, learner):
    response = client.post(
        "/api/auth/register",
        json={"name": "Other", "email": learner.email, "password": "another1"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "User already exists"


def test_user_login_bad_password(client, learner):
    response = client.post("/api/auth/login", json={"email": learner.email, "password": "nope"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_admin_login(client, superadmin):
    response = client.post(
        "/api/admin/login",
        json={"email": "admin@edulearn.com", "password": "admin123"},
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["admin"] == {
        "id": superadmin.id,
        "username": "admin",
        "email": "admin@edulearn.com",
        "role": "superadmin",
    }
    assert decode_token(data["token"]) == AdminIdentity(id=superadmin.id, is_admin=True)


def test_admin_login_bad_credentials(client, superadmin):
    response = client.post(
        "/api/admin/login",
        json={"email": "admin@edulearn.com", "password": "wrong"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Invalid credentials"


def test_inactive_admin_cannot_login(client, db_session, superadmin):
    superadmin.is_active = False
    db_session.commit()
    response = client.post(
        "/api/admin/login",
        json={"email": "admin@edulearn.com", "password": "admin123"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_superadmin_creates_admin(client, db_session, admin_headers):
    response = client.post(
        "/api/admin/create",
        headers=admin_headers,
        json={"username": "editor", "email": "editor@edulearn.com", "password": "editor123", "role": "admin"},
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"msg": "Admin created successfully"}
    created = db_session.query(Admin).filter(Admin.email == "editor@edulearn.com").one()
    assert created.role == AdminRole.admin
    assert created.password_hash != "editor123"

    response = client.post(
        "/api/admin/create",
        headers=admin_headers,
        json={"username": "editor2", "email": "editor@edulearn.com", "password": "editor123"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Admin already exists"


def test_plain_admin_cannot_create_admin(client, db_session):
    editor = Admin(
        username="editor",
        email="editor@edulearn.com",
        password_hash=hash_password("editor123"),
        role=AdminRole.admin,
    )
    db_session.add(editor)
    db_session.commit()

    response = client.post(
        "/api/admin/create",
        headers={"x-auth-token": create_admin_token(editor.id)},
        json={"username": "x", "email": "x@edulearn.com", "password": "xxxxxx"},
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN
