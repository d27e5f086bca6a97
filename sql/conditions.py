"""
==============================
Condition and ordering values.
==============================

Immutable value types consumed by the clause builders, plus one factory
function per operator.

A condition's value is one of:
    - None: absent (null checks, or an unset optional filter)
    - str: a rendered SQL expression such as ':name' or ':a,:b,:c'
    - Pair: lower and upper bounds for BETWEEN / NOT BETWEEN

Scalar factories default an omitted value to a placeholder named after
the field. An explicit None leaves the value unset, so the condition is
dropped when rendered:

Example:
    >>> from sql.conditions import eq, between, in_, is_null, desc
    >>> conditions = [
    ...     eq('name'),                              # name = :name
    ...     between('created_at', ':start', ':end'), # created_at BETWEEN :start AND :end
    ...     in_('state', [':s1', ':s2']),            # state IN (:s1,:s2)
    ...     is_null('deleted_at'),                   # deleted_at IS NULL
    ...     eq('state', None),                       # dropped
    ... ]
    >>> orderings = [desc('created_at')]
"""

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional, Union

from sql.operators import Operator, Order
from sql.placeholders import placeholder


class Pair(NamedTuple):
    """Lower and upper bound of a range condition."""

    lower: str
    upper: str


Value = Union[str, Pair]


@dataclass(frozen=True)
class Condition:
    """A single comparison contributing one fragment to a WHERE clause.

    Attributes:
        field: Column name or expression on the left-hand side
        operator: Comparison operator
        value: Rendered right-hand side, or None when absent
    """

    field: str
    operator: Operator
    value: Optional[Value] = None


class Ordering(NamedTuple):
    """A single ORDER BY entry."""

    field: str
    direction: Order = Order.ASC


# Distinguishes an omitted value from an explicit None (unset filter)
_UNSET = object()


def _scalar(field: str, operator: Operator, value) -> Condition:
    if value is _UNSET:
        value = placeholder(field)
    return Condition(field, operator, value)


def eq(field: str, value: Optional[str] = _UNSET) -> Condition:
    return _scalar(field, Operator.EQ, value)


def ne(field: str, value: Optional[str] = _UNSET) -> Condition:
    return _scalar(field, Operator.NE, value)


def not_eq(field: str, value: Optional[str] = _UNSET) -> Condition:
    return _scalar(field, Operator.NOT_EQ, value)


def gt(field: str, value: Optional[str] = _UNSET) -> Condition:
    return _scalar(field, Operator.GT, value)


def ge(field: str, value: Optional[str] = _UNSET) -> Condition:
    return _scalar(field, Operator.GE, value)


def lt(field: str, value: Optional[str] = _UNSET) -> Condition:
    return _scalar(field, Operator.LT, value)


def le(field: str, value: Optional[str] = _UNSET) -> Condition:
    return _scalar(field, Operator.LE, value)


def like(field: str, value: Optional[str] = _UNSET) -> Condition:
    return _scalar(field, Operator.LIKE, value)


def not_like(field: str, value: Optional[str] = _UNSET) -> Condition:
    return _scalar(field, Operator.NOT_LIKE, value)


def _range(field: str, operator: Operator, lower: Optional[str], upper: Optional[str]) -> Condition:
    # A missing bound leaves the whole range unset
    value = Pair(lower, upper) if lower is not None and upper is not None else None
    return Condition(field, operator, value)


def between(field: str, lower: Optional[str], upper: Optional[str]) -> Condition:
    """
    Build a BETWEEN condition.

    Args:
        field: Column name
        lower: Rendered lower bound (e.g. ':start')
        upper: Rendered upper bound (e.g. ':end')

    Returns:
        Condition whose value is a Pair, or None if either bound is None
    """
    return _range(field, Operator.BETWEEN, lower, upper)


def not_between(field: str, lower: Optional[str], upper: Optional[str]) -> Condition:
    return _range(field, Operator.NOT_BETWEEN, lower, upper)


def is_null(field: str) -> Condition:
    return Condition(field, Operator.IS_NULL)


def is_not_null(field: str) -> Condition:
    return Condition(field, Operator.IS_NOT_NULL)


def _members(values: Union[str, Iterable[str], None]) -> Optional[str]:
    if values is None or isinstance(values, str):
        return values or None
    return ",".join(values) or None


def in_(field: str, values: Union[str, Iterable[str], None]) -> Condition:
    """
    Build an IN condition.

    Args:
        field: Column name
        values: Pre-joined member list or subquery text, or an iterable
            of rendered members that is joined with ','

    Returns:
        Condition whose value is the joined member string, or None when
        values is None or empty
    """
    return Condition(field, Operator.IN, _members(values))


def not_in(field: str, values: Union[str, Iterable[str], None]) -> Condition:
    return Condition(field, Operator.NOT_IN, _members(values))


def asc(field: str) -> Ordering:
    return Ordering(field, Order.ASC)


def desc(field: str) -> Ordering:
    return Ordering(field, Order.DESC)
