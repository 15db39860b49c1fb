# app/employees/sequence.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.employees.models import Counter

logger = logging.getLogger(__name__)

EMPLOYEE_ENTITY = "employee"
CODE_PREFIX = "EMP-"
CODE_WIDTH = 3


def format_code(value: int, prefix: str = CODE_PREFIX, width: int = CODE_WIDTH) -> str:
    return f"{prefix}{str(value).zfill(width)}"


def _locked_counter(db: Session, entity: str):
    return (
        db.query(Counter)
        .filter(Counter.entity == entity)
        .with_for_update()
        .first()
    )


def next_code(db: Session, entity: str = EMPLOYEE_ENTITY) -> str:
    """
    Reserve the next value of the named counter and return it as a code (EMP-001, EMP-002, ...).

    The counter row is read with SELECT ... FOR UPDATE, so concurrent callers queue on
    the row lock until the surrounding transaction commits. Nothing is committed here:
    the caller commits the counter together with the row that uses the code, and a
    rollback gives the value back.

    The first use of an entity inserts its row inside a savepoint. If another
    transaction inserted it first, the savepoint is rolled back and the existing
    row is locked and incremented instead.
    """
    counter = _locked_counter(db, entity)
    if counter is None:
        try:
            with db.begin_nested():
                counter = Counter(entity=entity, last_value=1)
                db.add(counter)
        except IntegrityError:
            logger.info("Counter %s created concurrently, incrementing the existing row", entity)
            counter = _locked_counter(db, entity)
            counter.last_value = counter.last_value + 1
    else:
        counter.last_value = counter.last_value + 1
    db.flush()

    code = format_code(counter.last_value)
    logger.debug("next_code(%s) -> %s", entity, code)
    return code
