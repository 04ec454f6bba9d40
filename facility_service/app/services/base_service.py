import re
from contextlib import contextmanager
from enum import Enum
from typing import Optional, Type
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.core.exceptions import AppException, ConflictError, InternalError, NotFoundError, ValidationError
from shared.core.logging import get_logger
from shared.models.users import Users
from ..crud.base_crud import CRUDBase

logger = get_logger("facility.services")

NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


@contextmanager
def handle_errors(db: Session, action: str, commit: bool = False):
    """Run a service step, committing on success and translating failures.

    AppExceptions pass through untouched, a unique/foreign key violation
    becomes a ConflictError and anything else is wrapped in an
    InternalError with the original exception chained.
    """
    try:
        yield
        if commit:
            db.commit()
    except AppException:
        db.rollback()
        raise
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(
            f"Error {action}: a record with the same unique value already exists") from exc
    except Exception as exc:
        db.rollback()
        raise InternalError(f"Error {action}: {exc}") from exc


def alnum(value: Optional[str]) -> str:
    return NON_ALNUM.sub("", value or "")


def generate_unique_code(db: Session, crud: CRUDBase, base_code: str, width: int, field: str = "code") -> str:
    """Return ``base_code`` or the first free ``base_code`` + zero padded counter."""
    base_code = base_code.upper()
    code = base_code
    counter = 1
    while crud.exists_with(db, field, code):
        code = f"{base_code}{str(counter).zfill(width)}"
        counter += 1
    return code


def ensure_unique(db: Session, crud: CRUDBase, field: str, value, exclude_id: Optional[UUID] = None):
    if value is not None and crud.exists_with(db, field, value, exclude_id=exclude_id):
        raise ValidationError.for_field(field, f"The {field} has already been taken.")


def get_or_404(db: Session, crud: CRUDBase, id: UUID, label: str):
    db_obj = crud.get(db, id)
    if not db_obj:
        raise NotFoundError(f"{label} not found")
    return db_obj


def ensure_reference(db: Session, crud: CRUDBase, field: str, id: Optional[UUID]):
    """Validate that an optional foreign key points at a live row."""
    if id is None:
        return None
    db_obj = crud.get(db, id)
    if not db_obj:
        raise ValidationError.for_field(field, f"The selected {field} is invalid.")
    return db_obj


def ensure_user(db: Session, field: str, user_id: Optional[UUID]):
    if user_id is None:
        return None
    user = db.query(Users).filter(Users.id == user_id, Users.is_deleted == False).first()
    if not user:
        raise ValidationError.for_field(field, f"The selected {field} is invalid.")
    return user


def get_user_or_404(db: Session, user_id: UUID):
    user = db.query(Users).filter(Users.id == user_id, Users.is_deleted == False).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def validate_choice(value: str, choices: Type[Enum], field: str = "status") -> str:
    allowed = [choice.value for choice in choices]
    if value not in allowed:
        raise ValidationError.for_field(
            field, f"The selected {field} is invalid. Allowed values: {', '.join(allowed)}.")
    return value


def drop_nulls(data: dict, *fields: str) -> dict:
    """Ignore explicit nulls for columns that cannot be cleared."""
    return {k: v for k, v in data.items() if not (k in fields and v is None)}


def percentage(part: float, whole: float, digits: int = 2) -> float:
    if not whole:
        return 0.0
    return round(part / whole * 100, digits)
