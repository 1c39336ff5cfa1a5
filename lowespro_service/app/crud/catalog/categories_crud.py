# app/crud/catalog/categories_crud.py
import logging
from collections import Counter
from typing import Dict, List, Optional, Union

from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.database import utc_now
from shared.helpers.json_response_helper import error_response, not_found
from ..common.query_helpers import build_search_filter, count_list_values, ensure_valid_parent
from ...models.catalog.categories import Category
from ...models.procurement.vendors import Vendor
from ...schemas.catalog.categories_schemas import (
    CategoryCreate, CategoryOut, CategoryRequest, CategoryTreeNode, CategoryUpdate)

logger = logging.getLogger(__name__)

ROOT_LEVEL = "1"
ROOT_FILTER = "root"


def to_category_out(category: Category, vendor_counts: Counter) -> CategoryOut:
    out = CategoryOut.model_validate(category)
    return out.model_copy(update={"vendor_count": vendor_counts.get(category.name, 0)})


def child_level(db: Session, parent: Category) -> str:
    if parent.level and parent.level.isdigit():
        return str(int(parent.level) + 1)

    # parent carries a free-text level, fall back to its depth in the tree
    depth, seen, node = 1, {parent.id}, parent
    while node.parent_id and node.parent_id not in seen:
        node = db.get(Category, node.parent_id)
        if node is None:
            break
        seen.add(node.id)
        depth += 1
    return str(depth + 1)


def relevel_descendants(db: Session, category: Category):
    """Re-derive the level of every category below ``category`` from its new parent."""
    seen, pending = {category.id}, [category]
    while pending:
        parent = pending.pop()
        for child in db.query(Category).filter(Category.parent_id == parent.id).all():
            if child.id in seen:
                continue
            seen.add(child.id)
            child.level = child_level(db, parent)
            child.updated_at = utc_now()
            pending.append(child)

# ----------------- Get All Categories -----------------


def get_categories(db: Session, params: CategoryRequest) -> List[CategoryOut]:
    query = db.query(Category)

    search_filter = build_search_filter([Category.name, Category.description], params.search)
    if search_filter is not None:
        query = query.filter(search_filter)

    if params.parent_id == ROOT_FILTER:
        query = query.filter(Category.parent_id.is_(None))
    elif params.parent_id:
        query = query.filter(Category.parent_id == params.parent_id)

    categories = query.order_by(Category.created_at.desc()).all()
    vendor_counts = count_list_values(db, Vendor.categories)
    return [to_category_out(c, vendor_counts) for c in categories]


def get_category_by_id(db: Session, category_id: str) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()


def get_category(db: Session, category_id: str) -> CategoryOut:
    db_category = get_category_by_id(db, category_id)
    if not db_category:
        return not_found("Category")
    return to_category_out(db_category, count_list_values(db, Vendor.categories))

# ----------------- Tree -----------------


def build_category_tree(categories: List[CategoryOut]) -> List[CategoryTreeNode]:
    """Nest categories under their parents; orphans surface as roots, siblings sorted by name."""
    nodes: Dict[str, CategoryTreeNode] = {
        c.id: CategoryTreeNode(**c.model_dump(), children=[]) for c in categories
    }

    roots: List[CategoryTreeNode] = []
    for category in categories:
        node = nodes[category.id]
        parent = nodes.get(category.parent_id) if category.parent_id else None
        if parent is not None and parent is not node:
            parent.children.append(node)
        else:
            roots.append(node)

    def sort_level(level_nodes: List[CategoryTreeNode], seen: set):
        level_nodes.sort(key=lambda n: n.name.lower())
        for n in level_nodes:
            if n.id not in seen:
                seen.add(n.id)
                sort_level(n.children, seen)

    sort_level(roots, set())
    return roots


def get_category_tree(db: Session) -> List[CategoryTreeNode]:
    categories = db.query(Category).all()
    vendor_counts = count_list_values(db, Vendor.categories)
    return build_category_tree([to_category_out(c, vendor_counts) for c in categories])

# ----------------- Create / Update -----------------


def create_category(db: Session, category: CategoryCreate) -> Category:
    category_data = category.model_dump()

    if category_data.get("parent_id"):
        parent = ensure_valid_parent(db, Category, "parent_id", None, category_data["parent_id"], "category")
        if not category_data.get("level"):
            category_data["level"] = child_level(db, parent)
    elif not category_data.get("level"):
        category_data["level"] = ROOT_LEVEL

    db_category = Category(**category_data)
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    logger.info("Created category %s under %s", db_category.id, db_category.parent_id)
    return get_category(db, db_category.id)


def update_category(
        db: Session,
        category_id: str,
        category: Union[CategoryUpdate, CategoryCreate],
        replace: bool = False) -> CategoryOut:
    db_category = get_category_by_id(db, category_id)
    if not db_category:
        return not_found("Category")

    update_data = category.model_dump() if replace else category.model_dump(exclude_unset=True)

    moved = "parent_id" in update_data
    if moved or ("level" in update_data and not update_data["level"]):
        parent_id = update_data["parent_id"] if moved else db_category.parent_id
        parent = None
        if parent_id and moved:
            parent = ensure_valid_parent(db, Category, "parent_id", category_id, parent_id, "category")
        elif parent_id:
            parent = db.get(Category, parent_id)

        if not update_data.get("level"):
            update_data["level"] = child_level(db, parent) if parent else ROOT_LEVEL

    for field, value in update_data.items():
        setattr(db_category, field, value)
    db_category.updated_at = utc_now()

    if "level" in update_data:
        relevel_descendants(db, db_category)

    db.commit()
    db.refresh(db_category)
    logger.info("Updated category %s", category_id)
    return get_category(db, category_id)

# ----------------- Delete -----------------


def delete_category(db: Session, category_id: str) -> dict:
    db_category = get_category_by_id(db, category_id)
    if not db_category:
        return not_found("Category")

    child_count = (
        db.query(func.count(Category.id))
        .filter(Category.parent_id == category_id)
        .scalar()
    )
    if child_count > 0:
        return error_response(
            message=f"Cannot delete category with {child_count} subcategories. Delete or move them first.")

    db.delete(db_category)
    db.commit()
    logger.info("Deleted category %s", category_id)
    return {"success": True}
