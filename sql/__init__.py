"""
=============================================
SQL clause generation with named placeholders.
=============================================

Pure functions assembling SET, WHERE and ORDER BY clauses (and the
statements built from them) from structured inputs. The generated text
uses ':name' placeholders; binding values and executing is left to the
caller's query layer.

The package is organized as:
    - operators.py: Operator and Order enumerations
    - conditions.py: Condition, Pair and Ordering values plus factories
    - placeholders.py: Placeholder derivation and fragment joining
    - criteria.py: set_builder, where_builder, order_by_builder
    - dml.py: UPDATE and DELETE statements
    - query_builder.py: SELECT statements
    - exceptions.py: InvalidInputError and friends

Example:
    >>> from sql import eq, set_builder, where_builder
    >>>
    >>> "UPDATE users " + set_builder(['name']) + " " + where_builder([eq('id')])
    'UPDATE users SET name = :name WHERE id = :id'
"""

__version__ = "0.3.0"
__all__ = [
    # Operators
    'Operator', 'Order', 'OperatorCategory',
    # Values
    'Condition', 'Pair', 'Ordering',
    'eq', 'ne', 'not_eq', 'gt', 'ge', 'lt', 'le', 'like', 'not_like',
    'between', 'not_between', 'is_null', 'is_not_null', 'in_', 'not_in',
    'asc', 'desc',
    # Builders
    'set_builder', 'where_builder', 'order_by_builder', 'render_condition',
    'placeholder', 'join',
    'update_builder', 'delete_builder', 'select_builder',
    # Errors
    'CriteriaError', 'InvalidInputError', 'StatementExecutionError',
]

from .conditions import (
    Condition,
    Ordering,
    Pair,
    asc,
    between,
    desc,
    eq,
    ge,
    gt,
    in_,
    is_not_null,
    is_null,
    le,
    like,
    lt,
    ne,
    not_between,
    not_eq,
    not_in,
    not_like,
)
from .criteria import order_by_builder, render_condition, set_builder, where_builder
from .dml import delete_builder, update_builder
from .exceptions import CriteriaError, InvalidInputError, StatementExecutionError
from .operators import Operator, OperatorCategory, Order
from .placeholders import join, placeholder
from .query_builder import select_builder
