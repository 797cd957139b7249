import logging
from typing import Any, List, Mapping, Optional
from sqlalchemy import and_, or_, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from health_care.exceptions import InvalidFilterFieldError
from health_care.models import Admin

logger = logging.getLogger(__name__)

SEARCH_TERM_KEY = "searchTerm"

# Query parameter name -> mapped column, for exact-match filtering.
ADMIN_FILTERABLE_FIELDS = (
    ("name", Admin.name),
    ("email", Admin.email),
    ("contactNumber", Admin.contact_number),
    ("profilePhoto", Admin.profile_photo),
)

# Fields matched case-insensitively against the free-text search term.
ADMIN_SEARCHABLE_FIELDS = (
    ("name", Admin.name),
    ("email", Admin.email),
)

def _search_clause(search_term: str) -> ColumnElement:
    return or_(*(column.icontains(search_term, autoescape=True) for _, column in ADMIN_SEARCHABLE_FIELDS))

def _exact_match_clause(filters: Mapping[str, Any]) -> ColumnElement:
    columns = dict(ADMIN_FILTERABLE_FIELDS)
    return and_(*(columns[key] == value for key, value in filters.items()))

def build_admin_filter(params: Mapping[str, Any]) -> List[ColumnElement]:
    """
    Builds the WHERE clauses for an admin listing from request query parameters.

    `searchTerm` becomes an OR of case-insensitive substring matches over the
    searchable fields; every other parameter must equal its value exactly.
    The returned clauses are meant to be ANDed together; an empty list
    matches every admin.

    Raises InvalidFilterFieldError for parameters that are not admin fields.
    """
    rest = dict(params)
    search_term: Optional[str] = rest.pop(SEARCH_TERM_KEY, None)
    rest = {key: value for key, value in rest.items() if value is not None}

    unknown = set(rest) - {key for key, _ in ADMIN_FILTERABLE_FIELDS}
    if unknown:
        raise InvalidFilterFieldError(unknown)

    clauses = []
    # An empty term would match every row
    if search_term:
        clauses.append(_search_clause(search_term))
    if rest:
        clauses.append(_exact_match_clause(rest))
    return clauses

def get_admins(db: Session, params: Mapping[str, Any]) -> List[Admin]:
    """Returns all admins matching the filter, ordered by id (insertion order)."""
    clauses = build_admin_filter(params)
    statement = select(Admin).where(*clauses).order_by(Admin.id)
    admins = list(db.scalars(statement).all())
    logger.info(f"Admin listing with filters {sorted(params)} matched {len(admins)} record(s).")
    return admins
