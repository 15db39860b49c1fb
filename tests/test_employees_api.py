from app.employees import sequence
from app.employees.models import Counter
from conftest import employee_payload


def test_create_assigns_code_when_missing(client):
    resp = client.post("/api/employees", json=employee_payload())
    assert resp.status_code == 200
    body = resp.json()
    assert body["code"] == "EMP-001"
    assert body["id"]
    assert body["date_embauche"] == "2022-03-01"


def test_temp_code_is_replaced(make_employee):
    make_employee()
    emp = make_employee(code="TEMP", cin="11111111")
    assert emp["code"] == "EMP-002"


def test_explicit_code_is_preserved(make_employee):
    emp = make_employee(code="EMP-900")
    assert emp["code"] == "EMP-900"
    # the counter is only consumed by generated codes
    assert make_employee(cin="22222222")["code"] == "EMP-001"


def test_blank_optional_fields_use_defaults(make_employee):
    emp = make_employee(id_date="", service="", nationalite=None)
    assert emp["id_date"] is None
    assert emp["service"] is None
    assert emp["nationalite"] == "tunisienne"


def test_duplicate_cin_is_a_conflict(client, make_employee):
    make_employee()
    resp = client.post("/api/employees", json=employee_payload())
    assert resp.status_code == 409
    assert "error" in resp.json()
    assert len(client.get("/api/employees").json()) == 1


def test_invalid_contract_type_is_rejected(client):
    resp = client.post("/api/employees", json=employee_payload(type_contrat="PIGISTE"))
    assert resp.status_code == 422
    assert "type_contrat" in resp.json()["error"]


def test_list_newest_first(client, make_employee):
    make_employee(cin="1")
    make_employee(cin="2")
    codes = [e["code"] for e in client.get("/api/employees").json()]
    assert codes == ["EMP-002", "EMP-001"]


def test_get_one_and_missing(client, employee):
    assert client.get(f"/api/employees/{employee['id']}").json()["cin"] == employee["cin"]
    resp = client.get("/api/employees/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Employee not found"}


def test_update_employee(client, employee):
    resp = client.put(f"/api/employees/{employee['id']}", json={"poste": "Chef comptable", "nom": None})
    assert resp.status_code == 200
    assert resp.json()["poste"] == "Chef comptable"
    assert resp.json()["nom"] == employee["nom"]


def test_update_missing_employee(client):
    resp = client.put("/api/employees/nope", json={"poste": "X"})
    assert resp.status_code == 404


def test_delete_is_idempotent(client, employee):
    first = client.delete(f"/api/employees/{employee['id']}")
    assert first.status_code == 200
    assert first.json() == {"message": "Employee deleted"}
    again = client.delete(f"/api/employees/{employee['id']}")
    assert again.status_code == 200
    assert client.get("/api/employees").json() == []


def test_create_survives_concurrent_counter_creation(client, db, monkeypatch):
    db.add(Counter(entity="employee", last_value=5))
    db.commit()
    real = sequence._locked_counter
    calls = []

    def lookup(session, entity):
        calls.append(entity)
        return None if len(calls) == 1 else real(session, entity)

    monkeypatch.setattr(sequence, "_locked_counter", lookup)

    resp = client.post("/api/employees", json=employee_payload())
    assert resp.status_code == 200, resp.text
    assert resp.json()["code"] == "EMP-006"
