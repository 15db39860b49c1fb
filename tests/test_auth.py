import time

from jose import jwt

from app.auth.models import User
from app.config import JWT_ALGORITHM, JWT_SECRET
from app.create_admin import create_admin


def login(client, email="admin@paie.tn", password="s3cret"):
    return client.post("/api/login", json={"email": email, "password": password})


def test_login_returns_token_and_roles(client, db):
    create_admin(db, "Admin@Paie.tn", "s3cret")
    resp = login(client, email="ADMIN@paie.tn")
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["user"]["email"] == "admin@paie.tn"
    assert body["roles"] == ["admin"]

    claims = jwt.decode(body["token"], JWT_SECRET, algorithms=[JWT_ALGORITHM])
    assert claims["email"] == "admin@paie.tn"
    assert claims["roles"] == ["admin"]
    lifetime = claims["exp"] - time.time()
    assert 23 * 3600 < lifetime <= 24 * 3600 + 60


def test_wrong_password(client, db):
    create_admin(db, "admin@paie.tn", "s3cret")
    resp = login(client, password="nope")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Identifiants invalides"}


def test_unknown_email(client):
    resp = login(client, email="ghost@paie.tn")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Identifiants invalides"}


def test_me_with_token(client, db):
    create_admin(db, "admin@paie.tn", "s3cret")
    token = login(client).json()["token"]
    resp = client.get("/api/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert resp.json()["user"]["email"] == "admin@paie.tn"
    assert resp.json()["roles"] == ["admin"]


def test_me_without_or_with_bad_token(client):
    assert client.get("/api/me").status_code == 401
    resp = client.get("/api/me", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401
    assert "error" in resp.json()


def test_create_admin_is_idempotent(db):
    user, created = create_admin(db, "admin@paie.tn", "s3cret")
    again, created_again = create_admin(db, "admin@paie.tn", "other")
    assert created and not created_again
    assert again.id == user.id
    assert db.query(User).count() == 1
    # the stored password is a hash
    assert user.password != "s3cret"
    assert user.check_password("s3cret")
