"""
Page-based views over ordered ledger queries.
"""
from typing import TypeVar, Generic, List, Type
from pydantic import BaseModel
from fastapi import Query
from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session
import math

T = TypeVar("T")

class PageParams:
    """
    Page selection taken from the query string.

    Attributes:
        page: Page number (1-indexed)
        size: Entries per page
    """
    def __init__(
        self,
        page: int = Query(1, ge=1, description="Page number"),
        size: int = Query(50, ge=1, le=500, description="Entries per page")
    ):
        self.page = page
        self.size = size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


class PageResponse(BaseModel, Generic[T]):
    """
    One page of an ordered sequence.

    Attributes:
        items: Entries on this page, in sequence order
        total: Length of the whole sequence
        page: Page number
        size: Requested page size
        pages: Number of pages
        has_next: Whether a later page exists
        has_prev: Whether an earlier page exists
    """
    items: List[T]
    total: int
    page: int
    size: int
    pages: int
    has_next: bool
    has_prev: bool


def paginate(db: Session, statement: Select, page_params: PageParams, schema_class: Type[BaseModel]) -> PageResponse:
    """
    Cut one page out of an ordered select statement.

    Args:
        db: Session to run the statement in
        statement: Ordered select of ORM entities
        page_params: Page selection
        schema_class: Pydantic model each entity is converted to

    Returns:
        PageResponse: The requested page with totals
    """
    total = db.scalar(select(func.count()).select_from(statement.order_by(None).subquery()))
    rows = db.scalars(statement.offset(page_params.offset).limit(page_params.size)).all()
    pages = math.ceil(total / page_params.size) if total else 0

    return PageResponse[schema_class](
        items=[schema_class.model_validate(row) for row in rows],
        total=total,
        page=page_params.page,
        size=page_params.size,
        pages=pages,
        has_next=page_params.page < pages,
        has_prev=page_params.page > 1
    )
