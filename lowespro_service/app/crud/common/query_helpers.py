import json
from collections import Counter
from typing import Iterable, Optional

from sqlalchemy import String, cast, func, or_
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import error_response


def build_search_filter(columns: Iterable, search: Optional[str]):
    """Case-insensitive substring match OR-ed across ``columns``; None when there is nothing to match."""
    if not search:
        return None
    search_term = f"%{search}%"
    return or_(*[column.ilike(search_term) for column in columns])


def json_list_contains(db: Session, column, value: str):
    """Membership test on a JSON array column of strings."""
    dialect = db.get_bind().dialect.name

    if dialect == "postgresql":
        return func.jsonb_contains(cast(column, JSONB), cast(json.dumps([value]), JSONB))

    # serialized text holds the element as a quoted JSON string
    return func.instr(cast(column, String), json.dumps(value)) > 0


def count_list_values(db: Session, column) -> Counter:
    """How many rows mention each value of a JSON list column; repeats inside one row count once."""
    counts = Counter()
    for (values,) in db.query(column).all():
        counts.update(set(values or []))
    return counts


def ensure_valid_parent(db: Session, model, parent_attr: str, item_id: Optional[str], parent_id: str, label: str):
    """Load the parent row, refusing self references, dangling ids and cycles."""
    if item_id is not None and parent_id == item_id:
        return error_response(message=f"A {label} cannot be its own parent")

    parent = db.get(model, parent_id)
    if not parent:
        return error_response(message=f"Parent {label} '{parent_id}' does not exist")

    if item_id is not None:
        seen = set()
        ancestor = parent
        while ancestor is not None and ancestor.id not in seen:
            if ancestor.id == item_id:
                return error_response(
                    message=f"A {label} cannot be moved under one of its own descendants")
            seen.add(ancestor.id)
            next_id = getattr(ancestor, parent_attr)
            ancestor = db.get(model, next_id) if next_id else None

    return parent
