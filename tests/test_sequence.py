from app.employees.models import Counter
from app.employees import sequence
from app.employees.sequence import format_code, next_code


def test_first_code_for_fresh_entity(db):
    assert next_code(db) == "EMP-001"
    db.commit()
    assert db.query(Counter).filter_by(entity="employee").one().last_value == 1


def test_sequential_codes(db):
    codes = [next_code(db) for _ in range(12)]
    db.commit()
    assert codes[0] == "EMP-001"
    assert codes[9] == "EMP-010"
    assert codes[-1] == "EMP-012"


def test_rollback_releases_the_value(db):
    next_code(db)
    db.commit()
    next_code(db)
    db.rollback()
    assert next_code(db) == "EMP-002"


def test_counters_are_per_entity(db):
    next_code(db, entity="employee")
    next_code(db, entity="employee")
    assert next_code(db, entity="other") == "EMP-001"


def test_format_code_keeps_wide_numbers():
    assert format_code(7) == "EMP-007"
    assert format_code(1000) == "EMP-1000"


def _first_lookup_misses(monkeypatch):
    """The first locked read sees no row, as when another transaction is inserting it."""
    real = sequence._locked_counter
    calls = []

    def lookup(db, entity):
        calls.append(entity)
        return None if len(calls) == 1 else real(db, entity)

    monkeypatch.setattr(sequence, "_locked_counter", lookup)
    return calls


def test_concurrent_counter_creation_increments_existing_row(db, monkeypatch):
    db.add(Counter(entity="employee", last_value=5))
    db.commit()
    calls = _first_lookup_misses(monkeypatch)

    assert next_code(db) == "EMP-006"
    db.commit()
    assert len(calls) == 2
    assert db.query(Counter).filter_by(entity="employee").one().last_value == 6
