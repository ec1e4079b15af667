"""Query operations: normalizing query arguments."""

from __future__ import annotations

from typing import Any

from tecs.core.query.models import Query
from tecs.errors import QueryError


def normalize_query(accessors: tuple[Any, ...], max_arity: int) -> Query:
    """Convert query arguments into a validated Query.

    Accepts either a single Query, or any number of positions (classes,
    Read(...), Write(...)).

    Args:
        accessors: Positional arguments given to Registry.query().
        max_arity: Largest number of positions allowed.

    Returns:
        The validated Query.

    Raises:
        QueryError: If the query is empty, malformed, or exceeds max_arity.
    """
    if len(accessors) == 1 and isinstance(accessors[0], Query):
        query = accessors[0]
    else:
        if any(isinstance(item, Query) for item in accessors):
            raise QueryError("A Query must be passed on its own")
        query = Query(*accessors)
    check_arity(query, max_arity)
    return query


def check_arity(query: Query, max_arity: int) -> None:
    """Raise QueryError if the query requests more than max_arity types."""
    if query.arity > max_arity:
        raise QueryError(
            f"Query requests {query.arity} component types, maximum is {max_arity}"
        )
