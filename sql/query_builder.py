"""
=========================
SELECT statement builder.
=========================

Composes a SELECT statement from the WHERE and ORDER BY clause builders,
with optional LIMIT/OFFSET.

Example:
    >>> from sql.query_builder import select_builder
    >>> from sql.conditions import like, desc
    >>>
    >>> select_builder(
    ...     table='customers',
    ...     columns=['id', 'name'],
    ...     conditions=[like('name', ':pattern')],
    ...     orderings=[desc('created_at')],
    ...     limit=10
    ... )
    'SELECT id, name FROM customers WHERE name LIKE :pattern ORDER BY created_at DESC LIMIT 10'
"""

from typing import Iterable, List, Optional, Tuple, Union

from sql.conditions import Condition
from sql.criteria import order_by_builder, where_builder
from sql.exceptions import InvalidInputError
from sql.operators import Order
from sql.placeholders import is_blank, join


def _count(name: str, value: Optional[int]) -> str:
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidInputError(f"{name} must be a non-negative integer, got {value!r}")
    return f"{name} {value}"


def select_builder(
    table: str,
    columns: Union[List[str], str] = "*",
    conditions: Optional[Iterable[Condition]] = None,
    raw_clauses: Optional[Iterable[Optional[str]]] = None,
    orderings: Optional[Iterable[Tuple[str, Order]]] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None
) -> str:
    """
    Build a SELECT statement with optional filtering, ordering and paging.

    Args:
        table: Table name (may be schema-qualified)
        columns: Column list or "*" for all columns
        conditions: WHERE conditions
        raw_clauses: Raw WHERE fragments
        orderings: (field, Order) entries
        limit: LIMIT clause value
        offset: OFFSET clause value

    Returns:
        SQL SELECT statement

    Raises:
        InvalidInputError: If the table or a column is empty, limit/offset
            is not a non-negative integer, or a clause input is malformed
    """
    if is_blank(table):
        raise InvalidInputError("table name must be a non-empty string")

    if isinstance(columns, str):
        column_clause = columns if not is_blank(columns) else "*"
    else:
        columns = list(columns)
        if any(is_blank(column) for column in columns):
            raise InvalidInputError("some column in columns is None or empty")
        column_clause = join(columns) or "*"

    return join([
        f"SELECT {column_clause} FROM {table}",
        where_builder(conditions, raw_clauses),
        order_by_builder(orderings),
        _count("LIMIT", limit),
        _count("OFFSET", offset),
    ], " ")
