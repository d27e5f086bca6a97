"""
==================================================
SQLAlchemy helpers for executing generated clauses.
==================================================

Bridges the generated ':name' SQL text to SQLAlchemy. The connection is
always supplied by the caller; this module never opens, pools or closes
one.

Example:
    >>> from sqlalchemy import create_engine
    >>> from sql import eq, select_builder
    >>> from utils.statement_utils import execute_statement, required_parameters
    >>>
    >>> sql = select_builder('users', conditions=[eq('id')])
    >>> required_parameters(sql)
    ['id']
    >>> engine = create_engine('sqlite://')
    >>> with engine.connect() as conn:
    ...     rows = execute_statement(conn, sql, {'id': 1}).fetchall()
"""

import logging
from typing import Any, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.elements import TextClause

from sql.exceptions import InvalidInputError, StatementExecutionError

logger = logging.getLogger(__name__)


def to_text(sql: str) -> TextClause:
    """Wrap generated SQL in a SQLAlchemy TextClause."""
    return text(sql)


def required_parameters(sql: str) -> List[str]:
    """
    List the bind parameter names referenced by a statement.

    Args:
        sql: SQL text with ':name' placeholders

    Returns:
        Sorted, de-duplicated parameter names
    """
    return sorted(to_text(sql).compile().params)


def missing_parameters(sql: str, params: Optional[Mapping[str, Any]]) -> List[str]:
    """Return the bind names in sql that have no entry in params."""
    params = params or {}
    return [name for name in required_parameters(sql) if name not in params]


def execute_statement(connection, sql: str, params: Optional[Mapping[str, Any]] = None):
    """
    Execute generated SQL through a caller-supplied connection.

    Args:
        connection: SQLAlchemy Connection or Session
        sql: SQL text with ':name' placeholders
        params: Name to value mapping for the placeholders

    Returns:
        The SQLAlchemy result of connection.execute()

    Raises:
        InvalidInputError: If a placeholder has no value in params
        StatementExecutionError: If SQLAlchemy fails to execute the statement
    """
    params = dict(params or {})
    missing = missing_parameters(sql, params)
    if missing:
        raise InvalidInputError(f"missing values for parameters: {', '.join(missing)}")

    logger.debug(f"Executing: {sql}")
    try:
        return connection.execute(to_text(sql), params)
    except SQLAlchemyError as e:
        logger.error(f"Statement execution failed: {e}")
        raise StatementExecutionError(f"Failed to execute statement: {sql}") from e
