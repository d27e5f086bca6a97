"""
==================================
Comparison and ordering operators.
==================================

Closed enumerations of the operators a condition can use and of the
ORDER BY directions. Each member's value is its literal SQL token.

Every operator also belongs to exactly one rendering category, which
decides how a condition using it is turned into SQL:

    BINARY      field OP value
    RANGE       field OP lower AND upper
    NULLITY     field OP
    MEMBERSHIP  field OP (value)

Example:
    >>> from sql.operators import Operator, Order
    >>> Operator.NOT_IN.sql
    'NOT IN'
    >>> Operator.BETWEEN.category
    <OperatorCategory.RANGE: 'range'>
    >>> Order.DESC.sql
    'DESC'
"""

from enum import Enum


class OperatorCategory(Enum):
    """How a condition is rendered for a given operator."""

    BINARY = 'binary'
    RANGE = 'range'
    NULLITY = 'nullity'
    MEMBERSHIP = 'membership'


class Operator(Enum):
    """Condition operators mapped to their SQL tokens."""

    EQ = '='
    NE = '!='
    NOT_EQ = '<>'
    GT = '>'
    GE = '>='
    LT = '<'
    LE = '<='
    LIKE = 'LIKE'
    NOT_LIKE = 'NOT LIKE'
    BETWEEN = 'BETWEEN'
    NOT_BETWEEN = 'NOT BETWEEN'
    IS_NULL = 'IS NULL'
    IS_NOT_NULL = 'IS NOT NULL'
    IN = 'IN'
    NOT_IN = 'NOT IN'

    @property
    def sql(self) -> str:
        """Literal SQL token for this operator."""
        return self.value

    @property
    def category(self) -> OperatorCategory:
        """Rendering category for this operator."""
        return _CATEGORIES[self]

    @property
    def requires_value(self) -> bool:
        """False only for the null checks."""
        return self.category is not OperatorCategory.NULLITY


class Order(Enum):
    """ORDER BY directions."""

    ASC = 'ASC'
    DESC = 'DESC'

    @property
    def sql(self) -> str:
        """Literal SQL token for this direction."""
        return self.value


_CATEGORIES = {
    Operator.EQ: OperatorCategory.BINARY,
    Operator.NE: OperatorCategory.BINARY,
    Operator.NOT_EQ: OperatorCategory.BINARY,
    Operator.GT: OperatorCategory.BINARY,
    Operator.GE: OperatorCategory.BINARY,
    Operator.LT: OperatorCategory.BINARY,
    Operator.LE: OperatorCategory.BINARY,
    Operator.LIKE: OperatorCategory.BINARY,
    Operator.NOT_LIKE: OperatorCategory.BINARY,
    Operator.BETWEEN: OperatorCategory.RANGE,
    Operator.NOT_BETWEEN: OperatorCategory.RANGE,
    Operator.IS_NULL: OperatorCategory.NULLITY,
    Operator.IS_NOT_NULL: OperatorCategory.NULLITY,
    Operator.IN: OperatorCategory.MEMBERSHIP,
    Operator.NOT_IN: OperatorCategory.MEMBERSHIP,
}

_uncategorized = [op.name for op in Operator if op not in _CATEGORIES]
if _uncategorized:
    raise RuntimeError(f"Operators without a rendering category: {', '.join(_uncategorized)}")
