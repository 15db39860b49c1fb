from app.company.models import Company


def test_no_company_yet(client):
    resp = client.get("/api/company")
    assert resp.status_code == 200
    assert resp.json() is None


def test_upsert_keeps_a_single_row(client, db, company):
    resp = client.post("/api/company", json={"nom": "Nouvelle Raison Sociale", "telephone": "71 111 111"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == company["id"]
    assert body["nom"] == "Nouvelle Raison Sociale"
    # fields left out of the update are kept
    assert body["ville"] == "Tunis"
    assert db.query(Company).count() == 1


def test_get_returns_saved_profile(client, company):
    assert client.get("/api/company").json()["matricule_fiscal"] == company["matricule_fiscal"]


def test_name_is_required(client):
    resp = client.post("/api/company", json={"ville": "Sfax"})
    assert resp.status_code == 422
    assert "nom" in resp.json()["error"]
