"""Query functionality: query model, access markers, and execution."""

from tecs.core.query.engine import QueryResult, iter_rows, run_query
from tecs.core.query.models import Access, Accessor, Query, Read, Write
from tecs.core.query.operations import check_arity, normalize_query

__all__ = [
    # Models
    "Query",
    "Read",
    "Write",
    "Access",
    "Accessor",
    # Operations
    "normalize_query",
    "check_arity",
    # Execution
    "QueryResult",
    "iter_rows",
    "run_query",
]
