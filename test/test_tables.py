from conftest import OTHER_DAY, TODAY


# =========================================================
# TEST: GET /
# =========================================================
def test_base_path(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"success": True}

# =========================================================
# TEST: GET /tables
# =========================================================
def test_get_tables(client, make_table):
    make_table(number=1)
    make_table(number=2, hall_id="bar")

    response = client.get("/tables")
    assert response.status_code == 200

    data = response.json()
    assert len(data) == 2
    assert data[1]["hallId"] == "bar"

def test_get_tables_by_hall(client, make_table):
    make_table(number=1)
    make_table(number=2, hall_id="bar")

    response = client.get("/tables", params={"hallId": "bar"})
    assert response.status_code == 200
    assert [t["number"] for t in response.json()] == [2]

# =========================================================
# TEST: GET /tables/{id}
# =========================================================
def test_get_table(client, make_table):
    table = make_table(number=4, name="Large", capacity=6)

    response = client.get(f"/tables/{table.id}")
    assert response.status_code == 200

    data = response.json()
    assert data["name"] == "Large"
    assert data["capacity"] == 6
    assert data["status"] == "available"

def test_get_table_not_found(client):
    response = client.get("/tables/999")
    assert response.status_code == 404

# =========================================================
# TEST: POST /tables
# =========================================================
def test_create_table(client):
    payload = {
        "number": 8,
        "capacity": 6,
        "x": 100,
        "y": 120,
        "width": 100,
        "height": 60,
        "shape": "rectangular",
        "hallId": "vaulted"
    }

    response = client.post("/tables", json=payload)
    assert response.status_code == 200

    data = response.json()
    assert data["id"] == 1
    assert data["number"] == 8
    assert data["name"] is None
    assert data["status"] == "available"
    assert data["shape"] == "rectangular"
    assert data["hallId"] == "vaulted"

def test_create_table_invalid_capacity(client):
    payload = {"number": 1, "capacity": 0, "x": 0, "y": 0, "width": 60, "height": 60}

    response = client.post("/tables", json=payload)
    assert response.status_code == 422

def test_create_table_invalid_status(client):
    payload = {"number": 1, "capacity": 2, "x": 0, "y": 0, "width": 60, "height": 60, "status": "broken"}

    response = client.post("/tables", json=payload)
    assert response.status_code == 422

# =========================================================
# TEST: PUT/PATCH /tables/{id}
# =========================================================
def test_update_table(client, make_table):
    table = make_table(number=1, name="Old Name", capacity=4)

    response = client.put(f"/tables/{table.id}", json={"name": "New Name", "capacity": 6})
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert data["table"]["name"] == "New Name"
    assert data["table"]["capacity"] == 6
    assert data["table"]["number"] == 1

def test_patch_table_position(client, make_table):
    table = make_table()

    response = client.patch(f"/tables/{table.id}", json={"x": 300, "y": 150})
    assert response.status_code == 200
    assert response.json()["table"]["x"] == 300
    assert response.json()["table"]["width"] == 60

def test_update_table_not_found(client):
    response = client.put("/tables/999", json={"name": "DoesNotExist"})
    assert response.status_code == 404

# =========================================================
# TEST: PATCH /tables/{id}/status
# =========================================================
def test_update_table_status(client, make_table):
    table = make_table()

    response = client.patch(f"/tables/{table.id}/status", json={"status": "occupied"})
    assert response.status_code == 200
    assert response.json()["table"]["status"] == "occupied"

def test_update_table_status_not_found(client):
    response = client.patch("/tables/999/status", json={"status": "occupied"})
    assert response.status_code == 404

def test_update_table_status_invalid(client, make_table):
    table = make_table()

    response = client.patch(f"/tables/{table.id}/status", json={"status": "gone"})
    assert response.status_code == 422

# =========================================================
# TEST: GET /tables-with-reservations
# =========================================================
def test_get_tables_with_reservations(client, make_table, make_reservation):
    t1 = make_table(number=1)
    make_table(number=2)
    reservation = make_reservation(t1.id, date=TODAY)
    make_reservation(t1.id, date=OTHER_DAY)

    response = client.get("/tables-with-reservations")
    assert response.status_code == 200

    data = response.json()
    assert len(data) == 2
    assert data[0]["status"] == "reserved"
    assert data[0]["currentReservation"]["id"] == reservation.id
    assert [r["date"] for r in data[0]["todayReservations"]] == [TODAY]
    assert data[1]["currentReservation"] is None
    assert data[1]["todayReservations"] == []

def test_get_tables_with_reservations_for_date(client, make_table, make_reservation):
    table = make_table()
    make_reservation(table.id, date=TODAY)
    other = make_reservation(table.id, date=OTHER_DAY)

    response = client.get("/tables-with-reservations", params={"date": OTHER_DAY})
    assert response.status_code == 200
    assert [r["id"] for r in response.json()[0]["todayReservations"]] == [other.id]

def test_get_tables_with_reservations_invalid_date(client):
    response = client.get("/tables-with-reservations", params={"date": "tomorrow"})
    assert response.status_code == 422

def test_get_table_internal_error(client, storage, monkeypatch):
    def _fail(id):
        raise RuntimeError("db gone")
    monkeypatch.setattr(storage.tables, "get_table", _fail)

    response = client.get("/tables/1")
    assert response.status_code == 500
    assert response.json()["detail"] == "db gone"
