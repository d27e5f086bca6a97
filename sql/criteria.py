"""
=========================================
SET, WHERE and ORDER BY clause builders.
=========================================

Builds clause fragments with named placeholders, meant to be concatenated
after a base statement and executed with a parameter map by the caller's
query layer (e.g. SQLAlchemy text()).

Functions:
- set_builder: SET clause for UPDATE statements
- where_builder: WHERE clause from conditions and raw fragments
- order_by_builder: ORDER BY clause from (field, direction) entries
- render_condition: Fragment for a single condition

Every builder returns '' when there is nothing to render, so callers can
concatenate unconditionally.

Example:
    >>> from sql.criteria import set_builder, where_builder, order_by_builder
    >>> from sql.conditions import eq, is_null, desc
    >>>
    >>> set_builder(['name', 'state'])
    'SET name = :name, state = :state'
    >>> where_builder([eq('id'), is_null('deleted_at')])
    'WHERE id = :id AND deleted_at IS NULL'
    >>> order_by_builder([desc('created_at')])
    'ORDER BY created_at DESC'
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from sql.conditions import Condition, Pair
from sql.exceptions import InvalidInputError
from sql.operators import Operator, OperatorCategory, Order
from sql.placeholders import is_blank, join, placeholder

logger = logging.getLogger(__name__)

_COLLECTIONS = (list, tuple, set, frozenset)


def _as_list(name: str, items) -> list:
    if isinstance(items, (str, Condition)):
        raise InvalidInputError(f"{name} must be a list, got {type(items).__name__}: {items!r}")
    try:
        return list(items)
    except TypeError as e:
        raise InvalidInputError(f"{name} must be a list, got {items!r}") from e


def set_builder(
    fields: Optional[Sequence[str]],
    values: Optional[Sequence[Optional[str]]] = None,
    prefix: Optional[str] = None
) -> str:
    """
    Build the SET clause of an UPDATE statement.

    Args:
        fields: Columns to update
        values: Placeholder names, one per field. When omitted each field
            binds to a placeholder of its own name; a blank entry falls
            back to the field name.
        prefix: Placeholder prefix override

    Returns:
        '' for no fields, otherwise e.g. 'SET name = :name, state = :new_state'

    Raises:
        InvalidInputError: If a field is empty, the lengths differ, or
            fields or values is not a list of strings
    """
    if fields is None:
        return ""
    fields = _as_list("fields", fields)
    if not fields:
        return ""

    if any(is_blank(field) for field in fields):
        raise InvalidInputError("some field in fields is None or empty")

    values = list(fields) if values is None else _as_list("values", values)
    if len(values) != len(fields):
        raise InvalidInputError(
            f"fields and values must have the same length "
            f"({len(fields)} != {len(values)})"
        )

    assignments = [
        f"{field} = {placeholder(field if is_blank(value) else value, prefix)}"
        for field, value in zip(fields, values)
    ]
    return f"SET {join(assignments)}"


def _validate_conditions(conditions: List[Condition]) -> None:
    for index, condition in enumerate(conditions):
        if not isinstance(condition, Condition):
            raise InvalidInputError(f"condition {index} is not a Condition: {condition!r}")
        if is_blank(condition.field):
            raise InvalidInputError(f"condition {index} has an empty field")
        if not isinstance(condition.operator, Operator):
            raise InvalidInputError(
                f"condition {index} on '{condition.field}' has no valid operator"
            )


def _is_absent(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def render_condition(condition: Condition) -> str:
    """
    Render one condition as a SQL fragment.

    The operator alone selects the rendering; a condition whose operator
    needs a value but has none renders to ''.

    Returns:
        Fragment such as 'name = :name', or '' when the value is absent

    Raises:
        InvalidInputError: If a range value is not a pair, or a binary
            operator is given a pair or collection
    """
    field, operator, value = condition.field, condition.operator, condition.value
    category = operator.category

    if category is OperatorCategory.NULLITY:
        return f"{field} {operator.sql}"

    if _is_absent(value):
        return ""

    if category is OperatorCategory.RANGE:
        if not isinstance(value, tuple) or len(value) != 2:
            raise InvalidInputError(
                f"{operator.name} on '{field}' needs a (lower, upper) pair, got {value!r}"
            )
        lower, upper = value
        if _is_absent(lower) or _is_absent(upper):
            return ""
        return f"{field} {operator.sql} {lower} AND {upper}"

    if isinstance(value, Pair) or (
        category is OperatorCategory.BINARY and isinstance(value, _COLLECTIONS)
    ):
        raise InvalidInputError(
            f"{operator.name} on '{field}' takes a single value, got {value!r}"
        )

    if category is OperatorCategory.MEMBERSHIP:
        if isinstance(value, _COLLECTIONS):
            value = ",".join(str(member) for member in value)
            if not value:
                return ""
        return f"{field} {operator.sql} ({value})"

    return f"{field} {operator.sql} {value}"


def where_builder(
    conditions: Optional[Iterable[Condition]] = None,
    raw_clauses: Optional[Iterable[Optional[str]]] = None
) -> str:
    """
    Build a WHERE clause.

    Condition fragments come first, then the raw clauses, all joined with
    ' AND '. Conditions missing a required value and empty raw clauses
    are dropped. Raw clauses are inserted verbatim, so a caller can write
    'OR state = :state' and get exactly that after the AND.

    Args:
        conditions: Structured conditions
        raw_clauses: Hand-written SQL fragments

    Returns:
        '' when nothing renders, otherwise 'WHERE ...'

    Raises:
        InvalidInputError: If a condition has an empty field, no operator,
            or a malformed range value, or conditions or raw_clauses is
            not a list
    """
    fragments = []

    if conditions is not None:
        conditions = _as_list("conditions", conditions)
        _validate_conditions(conditions)
        for condition in conditions:
            fragment = render_condition(condition)
            if fragment:
                fragments.append(fragment)
            else:
                logger.debug(
                    "Dropping %s condition on '%s': no value",
                    condition.operator.name, condition.field
                )

    if raw_clauses is not None:
        raw_clauses = _as_list("raw_clauses", raw_clauses)
        fragments.extend(clause for clause in raw_clauses if not is_blank(clause))

    if not fragments:
        return ""
    return f"WHERE {join(fragments, ' AND ')}"


def order_by_builder(orderings: Optional[Iterable[Tuple[str, Order]]]) -> str:
    """
    Build an ORDER BY clause.

    Entries keep their input order; entries with an empty field are
    skipped.

    Args:
        orderings: (field, Order) pairs, e.g. Ordering tuples

    Returns:
        '' when nothing renders, otherwise e.g. 'ORDER BY name ASC,date DESC'

    Raises:
        InvalidInputError: If orderings is not a list, or an entry is not
            a (field, Order) pair
    """
    if orderings is None:
        return ""
    if isinstance(orderings, tuple) and len(orderings) == 2 and isinstance(orderings[1], Order):
        raise InvalidInputError(f"orderings must be a list of entries, got a single entry: {orderings!r}")

    terms = []
    for entry in _as_list("orderings", orderings):
        try:
            field, direction = entry
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"ordering must be a (field, Order) pair: {entry!r}") from e

        if is_blank(field):
            logger.debug("Skipping ordering with empty field")
            continue
        if not isinstance(direction, Order):
            raise InvalidInputError(f"ordering on '{field}' has no valid direction: {direction!r}")
        terms.append(f"{field} {direction.sql}")

    if not terms:
        return ""
    return f"ORDER BY {join(terms, ',')}"
