from models import TableStatus, TableUpdate


# =========================================================
# TEST: create_table
# =========================================================
def test_create_table_applies_defaults(make_table):
    table = make_table(number=7, capacity=2)

    assert table.id == 1
    assert table.name is None
    assert table.status == TableStatus.AVAILABLE
    assert table.shape == "round"
    assert table.hall_id == "white"

def test_create_table_keeps_given_values(make_table):
    table = make_table(number=3, capacity=6, name="Family", status="occupied", shape="rectangular", hall_id="bar")

    assert table.name == "Family"
    assert table.status == "occupied"
    assert table.shape == "rectangular"
    assert table.hall_id == "bar"

def test_create_table_empty_name_becomes_none(make_table):
    assert make_table(name="").name is None

def test_ids_increase(make_table):
    ids = [make_table(number=n).id for n in range(1, 4)]
    assert ids == [1, 2, 3]

# =========================================================
# TEST: list_tables / get_table
# =========================================================
def test_list_tables_in_insertion_order(storage, make_table):
    make_table(number=10)
    make_table(number=2)

    assert [t.number for t in storage.tables.list_tables()] == [10, 2]

def test_list_tables_by_hall(storage, make_table):
    make_table(number=1, hall_id="white")
    make_table(number=2, hall_id="bar")

    tables = storage.tables.list_tables("bar")
    assert [t.number for t in tables] == [2]

def test_get_table_not_found(storage):
    assert storage.tables.get_table(999) is None

# =========================================================
# TEST: update_table / update_table_status
# =========================================================
def test_update_table_merges_only_given_fields(storage, make_table):
    table = make_table(number=1, capacity=4, name="Old")

    updated = storage.tables.update_table(table.id, TableUpdate(capacity=6))

    assert updated.capacity == 6
    assert updated.name == "Old"
    assert updated.number == 1
    assert storage.tables.get_table(table.id) == updated

def test_update_table_can_clear_name(storage, make_table):
    table = make_table(name="Old")

    updated = storage.tables.update_table(table.id, TableUpdate(name=None))

    assert updated.name is None

def test_update_table_ignores_null_for_required_fields(storage, make_table):
    table = make_table(capacity=4)

    updated = storage.tables.update_table(table.id, TableUpdate(capacity=None, status=None))

    assert updated.capacity == 4
    assert updated.status == "available"

def test_update_table_not_found(storage):
    assert storage.tables.update_table(999, TableUpdate(capacity=2)) is None

def test_update_table_status(storage, make_table):
    table = make_table()

    updated = storage.tables.update_table_status(table.id, "occupied")

    assert updated.status == TableStatus.OCCUPIED
    assert storage.tables.get_table(table.id).status == "occupied"

def test_update_table_status_not_found(storage):
    assert storage.tables.update_table_status(42, TableStatus.RESERVED) is None

def test_update_table_empty_name_becomes_none(storage, make_table):
    table = make_table(name="Old")

    updated = storage.tables.update_table(table.id, TableUpdate(name=""))

    assert updated.name is None
    assert storage.tables.get_table(table.id).name is None
