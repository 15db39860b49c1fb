import os
import tempfile

# must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="paie-uploads-")
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine, init_db
from app.main import app


@pytest.fixture(autouse=True)
def fresh_schema():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


def employee_payload(**overrides):
    data = {
        "nom": "Ben Salah",
        "prenom": "Amira",
        "cin": "09876543",
        "type_contrat": "CDI",
        "service": "Comptabilité",
        "poste": "Comptable",
        "date_embauche": "2022-03-01",
        "nationalite": "tunisienne",
        "id_type": "CIN",
        "id_date": "2015-06-20",
        "id_place": "Tunis",
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_employee(client):
    def _make(**overrides):
        resp = client.post("/api/employees", json=employee_payload(**overrides))
        assert resp.status_code == 200, resp.text
        return resp.json()
    return _make


@pytest.fixture
def employee(make_employee):
    return make_employee()


@pytest.fixture
def make_salary(client):
    def _make(employee_id, **overrides):
        data = {"employee_id": employee_id, "year": 2024, "month": 4, "salaire": 900, "prime": 50, "absence": 2}
        data.update(overrides)
        resp = client.post("/api/salaries", json=data)
        assert resp.status_code == 200, resp.text
        return resp.json()
    return _make


@pytest.fixture
def company(client):
    resp = client.post("/api/company", json={
        "nom": "Société Test SARL",
        "adresse": "12 rue de Marseille",
        "ville": "Tunis",
        "cnss_employeur": "123456-78",
        "rib": "08 006 0123456789012 34",
        "matricule_fiscal": "1234567/A/M/000",
        "banque": "BIAT",
        "ccb": "0800601234",
        "capital": "10 000 DT",
        "telephone": "+216 71 000 000",
    })
    assert resp.status_code == 200, resp.text
    return resp.json()
