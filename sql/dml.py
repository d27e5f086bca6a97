"""
============================================
Data Manipulation Language (DML) statements.
============================================

Composes complete UPDATE and DELETE statements from the clause builders.

Functions:
- update_builder: UPDATE ... SET ... [WHERE ...]
- delete_builder: DELETE FROM ... [WHERE ...]

Usage:
    from sql.dml import update_builder
    from sql.conditions import eq

    update_sql = update_builder(
        table='customers',
        fields=['email', 'state'],
        conditions=[eq('customer_id')]
    )
    # UPDATE customers SET email = :email, state = :state WHERE customer_id = :customer_id
"""

from typing import Iterable, Optional, Sequence

from sql.conditions import Condition
from sql.criteria import set_builder, where_builder
from sql.exceptions import InvalidInputError
from sql.placeholders import is_blank, join


def _require_table(table: str) -> None:
    if is_blank(table):
        raise InvalidInputError("table name must be a non-empty string")


def update_builder(
    table: str,
    fields: Sequence[str],
    values: Optional[Sequence[Optional[str]]] = None,
    conditions: Optional[Iterable[Condition]] = None,
    raw_clauses: Optional[Iterable[Optional[str]]] = None
) -> str:
    """
    Generate an UPDATE statement.

    Args:
        table: Table name (may be schema-qualified)
        fields: Columns to update
        values: Placeholder names for the fields (see set_builder)
        conditions: WHERE conditions
        raw_clauses: Raw WHERE fragments

    Returns:
        SQL UPDATE statement

    Raises:
        InvalidInputError: If the table is empty, there are no fields,
            or any clause input is malformed
    """
    _require_table(table)
    set_clause = set_builder(fields, values)
    if not set_clause:
        raise InvalidInputError(f"UPDATE of '{table}' needs at least one field")

    return join([f"UPDATE {table}", set_clause, where_builder(conditions, raw_clauses)], " ")


def delete_builder(
    table: str,
    conditions: Optional[Iterable[Condition]] = None,
    raw_clauses: Optional[Iterable[Optional[str]]] = None
) -> str:
    """
    Generate a DELETE statement.

    With no renderable conditions the statement has no WHERE clause and
    deletes every row.
    """
    _require_table(table)
    return join([f"DELETE FROM {table}", where_builder(conditions, raw_clauses)], " ")
