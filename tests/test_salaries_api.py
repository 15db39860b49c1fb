def test_create_salary_with_employee(client, employee, make_salary):
    salary = make_salary(employee["id"])
    assert salary["year"] == 2024 and salary["month"] == 4
    assert salary["salaire"] == 900
    assert salary["avance"] == 0
    assert salary["employee"]["code"] == employee["code"]


def test_second_salary_same_month_conflicts(client, employee, make_salary):
    make_salary(employee["id"])
    resp = client.post("/api/salaries", json={
        "employee_id": employee["id"], "year": "2024", "month": "4", "salaire": "1000",
    })
    assert resp.status_code == 409
    assert resp.json() == {"error": "Un salaire existe déjà pour cet employé ce mois-ci"}
    assert len(client.get("/api/salaries").json()) == 1


def test_same_month_for_another_employee_is_fine(client, make_employee, make_salary):
    a = make_employee(cin="1")
    b = make_employee(cin="2")
    make_salary(a["id"])
    make_salary(b["id"])
    assert len(client.get("/api/salaries").json()) == 2


def test_blank_amounts_become_zero(client, employee):
    resp = client.post("/api/salaries", json={
        "employee_id": employee["id"], "year": 2024, "month": 5, "salaire": 900,
        "prime": "", "absence": None, "avance": "", "date_avance": "",
    })
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["prime"] == 0 and body["absence"] == 0 and body["avance"] == 0
    assert body["date_avance"] is None


def test_unknown_employee(client):
    resp = client.post("/api/salaries", json={"employee_id": "ghost", "year": 2024, "month": 4, "salaire": 1})
    assert resp.status_code == 404


def test_invalid_month(client, employee):
    resp = client.post("/api/salaries", json={"employee_id": employee["id"], "year": 2024, "month": 13, "salaire": 1})
    assert resp.status_code == 422


def test_filters(client, employee, make_salary):
    make_salary(employee["id"], month=3)
    make_salary(employee["id"], month=4)
    make_salary(employee["id"], year=2023, month=4)
    assert len(client.get("/api/salaries", params={"year": 2024}).json()) == 2
    assert len(client.get("/api/salaries", params={"month": 4}).json()) == 2
    only = client.get("/api/salaries", params={"year": 2024, "month": 3}).json()
    assert [(s["year"], s["month"]) for s in only] == [(2024, 3)]


def test_update_salary(client, employee, make_salary):
    salary = make_salary(employee["id"])
    resp = client.put(f"/api/salaries/{salary['id']}", json={"avance": "100", "date_avance": "2024-04-10"})
    assert resp.status_code == 200
    assert resp.json()["avance"] == 100
    assert resp.json()["date_avance"] == "2024-04-10"
    assert resp.json()["salaire"] == 900


def test_update_into_taken_month_conflicts(client, employee, make_salary):
    make_salary(employee["id"], month=3)
    april = make_salary(employee["id"], month=4)
    resp = client.put(f"/api/salaries/{april['id']}", json={"month": 3})
    assert resp.status_code == 409
    assert client.get(f"/api/salaries/{april['id']}").json()["month"] == 4


def test_update_missing_salary(client):
    assert client.put("/api/salaries/nope", json={"prime": 1}).status_code == 404


def test_delete_is_idempotent(client, employee, make_salary):
    salary = make_salary(employee["id"])
    assert client.delete(f"/api/salaries/{salary['id']}").json() == {"message": "Salary deleted"}
    assert client.delete(f"/api/salaries/{salary['id']}").status_code == 200
    assert client.get(f"/api/salaries/{salary['id']}").status_code == 404


def test_blank_filters_are_ignored(client, employee, make_salary):
    make_salary(employee["id"], month=3)
    make_salary(employee["id"], year=2023, month=4)
    resp = client.get("/api/salaries?year=2024&month=")
    assert resp.status_code == 200, resp.text
    assert [(s["year"], s["month"]) for s in resp.json()] == [(2024, 3)]
    assert len(client.get("/api/salaries?year=&month=").json()) == 2


def test_non_numeric_filter_is_rejected(client):
    resp = client.get("/api/salaries", params={"year": "abc"})
    assert resp.status_code == 422
    assert resp.json() == {"error": "year: must be an integer"}
