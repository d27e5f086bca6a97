"""
=================================================
Comprehensive pytest suite for sql/criteria.py
=================================================

Sections:
---------
1. Unit tests - set_builder, where_builder, order_by_builder, render_condition
2. Edge case tests - Blank inputs, malformed payloads, separators
3. Smoke tests - Clauses concatenated into a statement

Available markers:
------------------
unit, edge_case, smoke

How to Execute:
---------------
All tests:          pytest tests/tests_sql/test_criteria.py -v
By category:        pytest tests/tests_sql/test_criteria.py -m unit
"""

import logging

import pytest

from sql.conditions import Condition, Ordering, Pair, between, eq, in_, is_null
from sql.criteria import order_by_builder, render_condition, set_builder, where_builder
from sql.exceptions import InvalidInputError
from sql.operators import Operator, Order

# ====================
# Fixtures
# ====================

@pytest.fixture
def eq_name():
    """Condition rendering 'name = :name'."""
    return Condition('name', Operator.EQ, ':name')


# ===============
# 1. UNIT TESTS
# ===============

@pytest.mark.unit
def test_set_builder_empty_fields():
    """Empty or missing field lists render nothing."""
    assert set_builder([]) == ""
    assert set_builder(None) == ""
    assert set_builder([], ['x']) == ""


@pytest.mark.unit
def test_set_builder_fields_only():
    """Each field binds to a placeholder of its own name."""
    assert set_builder(['a', 'b']) == "SET a = :a, b = :b"
    assert set_builder(['a', 'b'], None) == "SET a = :a, b = :b"


@pytest.mark.unit
def test_set_builder_custom_values():
    """Explicit values name the placeholders."""
    result = set_builder(['name', 'state'], ['test_name', 'test_state'])

    assert result == "SET name = :test_name, state = :test_state"


@pytest.mark.unit
def test_set_builder_blank_value_falls_back_to_field():
    """Blank or None values fall back to the field name."""
    assert set_builder(['a', 'b'], ['x', '']) == "SET a = :x, b = :b"
    assert set_builder(['name', 'state'], [None, 'test_state']) == "SET name = :name, state = :test_state"


@pytest.mark.unit
def test_set_builder_length_mismatch():
    """Values must match fields one to one."""
    with pytest.raises(InvalidInputError, match="same length"):
        set_builder(['a'], ['x', 'y'])


@pytest.mark.unit
@pytest.mark.parametrize("fields", [['a', ''], ['a', None], ['   ']])
def test_set_builder_blank_field(fields):
    """Blank fields are rejected."""
    with pytest.raises(InvalidInputError):
        set_builder(fields)


@pytest.mark.unit
def test_set_builder_custom_prefix():
    """An explicit prefix overrides the configured one."""
    assert set_builder(['a'], prefix='@') == "SET a = @a"


@pytest.mark.unit
def test_where_builder_empty():
    """No conditions and no raw clauses render nothing."""
    assert where_builder() == ""
    assert where_builder([], []) == ""
    assert where_builder(None, None) == ""


@pytest.mark.unit
def test_where_builder_single_condition(eq_name):
    """A single equality condition."""
    assert render_condition(eq_name) == "name = :name"
    assert where_builder([eq_name]) == "WHERE name = :name"


@pytest.mark.unit
def test_where_builder_joins_with_and(eq_name):
    """Conditions are joined with AND in input order."""
    result = where_builder([eq_name, Condition('date', Operator.GT, ':date')])

    assert result == "WHERE name = :name AND date > :date"


@pytest.mark.unit
def test_where_builder_raw_clauses_after_conditions(eq_name):
    """Raw clauses follow the conditions and are joined with AND verbatim."""
    result = where_builder([eq_name], ["OR state = :s"])

    assert result == "WHERE name = :name AND OR state = :s"


@pytest.mark.unit
def test_where_builder_raw_clauses_only():
    """Raw clauses alone build a WHERE clause."""
    result = where_builder(None, ["(a = :a OR b = :b)", "c > 1"])

    assert result == "WHERE (a = :a OR b = :b) AND c > 1"


@pytest.mark.unit
@pytest.mark.parametrize("operator, expected", [
    (Operator.EQ, "age = :age"),
    (Operator.NE, "age != :age"),
    (Operator.NOT_EQ, "age <> :age"),
    (Operator.GT, "age > :age"),
    (Operator.GE, "age >= :age"),
    (Operator.LT, "age < :age"),
    (Operator.LE, "age <= :age"),
    (Operator.LIKE, "age LIKE :age"),
    (Operator.NOT_LIKE, "age NOT LIKE :age"),
])
def test_render_binary_operators(operator, expected):
    """Binary operators render 'field OP value'."""
    assert render_condition(Condition('age', operator, ':age')) == expected


@pytest.mark.unit
def test_render_between():
    """Range operators render both bounds."""
    condition = Condition('date', Operator.BETWEEN, Pair(':lo', ':hi'))

    assert render_condition(condition) == "date BETWEEN :lo AND :hi"


@pytest.mark.unit
def test_render_not_between_plain_tuple():
    """A plain two-element tuple is accepted as a pair."""
    condition = Condition('date', Operator.NOT_BETWEEN, (':lo', ':hi'))

    assert render_condition(condition) == "date NOT BETWEEN :lo AND :hi"


@pytest.mark.unit
def test_render_null_checks_without_value():
    """Null checks render without a value."""
    assert render_condition(Condition('deleted_at', Operator.IS_NULL)) == "deleted_at IS NULL"
    assert render_condition(Condition('deleted_at', Operator.IS_NOT_NULL)) == "deleted_at IS NOT NULL"


@pytest.mark.unit
def test_render_null_check_ignores_value():
    """A value given to a null check is not rendered."""
    assert render_condition(Condition('deleted_at', Operator.IS_NULL, ':x')) == "deleted_at IS NULL"


@pytest.mark.unit
def test_render_membership():
    """Membership operators wrap the value in parentheses."""
    assert render_condition(Condition('id', Operator.IN, ':a,:b')) == "id IN (:a,:b)"
    assert render_condition(Condition('id', Operator.NOT_IN, 'SELECT id FROM t')) == "id NOT IN (SELECT id FROM t)"


@pytest.mark.unit
def test_render_non_string_scalar():
    """Non-string scalars are rendered as text."""
    assert render_condition(Condition('age', Operator.GT, 18)) == "age > 18"


@pytest.mark.unit
def test_order_by_builder():
    """Entries render 'field DIRECTION' joined with a comma."""
    result = order_by_builder([('name', Order.ASC), ('date', Order.DESC)])

    assert result == "ORDER BY name ASC,date DESC"


@pytest.mark.unit
def test_order_by_builder_ordering_tuples():
    """Ordering named tuples are accepted and default to ASC."""
    assert order_by_builder([Ordering('name')]) == "ORDER BY name ASC"


@pytest.mark.unit
def test_order_by_builder_empty():
    """Empty input renders nothing."""
    assert order_by_builder([]) == ""
    assert order_by_builder(None) == ""


# ====================
# 2. EDGE CASE TESTS
# ====================

@pytest.mark.edge_case
@pytest.mark.parametrize("value", [None, "", "   "])
def test_missing_value_drops_condition(value):
    """A condition needing a value but lacking one contributes nothing."""
    condition = Condition('name', Operator.EQ, value)

    assert render_condition(condition) == ""
    assert where_builder([condition]) == ""


@pytest.mark.edge_case
def test_missing_value_dropped_between_others(eq_name):
    """Dropped conditions leave no stray separators."""
    conditions = [
        Condition('a', Operator.EQ, None),
        eq_name,
        Condition('b', Operator.IN, None),
        Condition('c', Operator.BETWEEN, None),
        is_null('deleted_at'),
    ]

    assert where_builder(conditions) == "WHERE name = :name AND deleted_at IS NULL"


@pytest.mark.edge_case
def test_missing_value_drop_is_logged(caplog):
    """Dropped conditions are reported at DEBUG level."""
    with caplog.at_level(logging.DEBUG, logger='sql.criteria'):
        where_builder([Condition('name', Operator.EQ)])

    assert "name" in caplog.text


@pytest.mark.edge_case
def test_between_with_blank_bound_is_dropped():
    """A pair with a blank bound counts as absent."""
    assert render_condition(Condition('date', Operator.BETWEEN, Pair(':lo', ''))) == ""


@pytest.mark.edge_case
@pytest.mark.parametrize("value", [':lo', (':lo',), (':lo', ':mid', ':hi')])
def test_between_with_malformed_value(value):
    """A present but non-pair range value is rejected."""
    with pytest.raises(InvalidInputError, match="pair"):
        where_builder([Condition('date', Operator.BETWEEN, value)])


@pytest.mark.edge_case
def test_scalar_operator_with_pair():
    """Scalar operators reject pair payloads."""
    with pytest.raises(InvalidInputError):
        render_condition(Condition('id', Operator.EQ, Pair(':a', ':b')))


@pytest.mark.edge_case
@pytest.mark.parametrize("condition", [
    Condition('', Operator.EQ, ':x'),
    Condition(None, Operator.EQ, ':x'),
    Condition('name', None, ':x'),
    Condition('name', '=', ':x'),
])
def test_where_builder_invalid_condition(condition, eq_name):
    """Empty fields and missing operators are rejected before rendering."""
    with pytest.raises(InvalidInputError):
        where_builder([eq_name, condition])


@pytest.mark.edge_case
def test_where_builder_rejects_none_condition():
    """None entries in the condition list are rejected."""
    with pytest.raises(InvalidInputError):
        where_builder([None])


@pytest.mark.edge_case
def test_where_builder_invalid_condition_ignores_value_check():
    """A condition with an empty field fails even when its value is absent."""
    with pytest.raises(InvalidInputError):
        where_builder([Condition('', Operator.EQ)])


@pytest.mark.edge_case
def test_where_builder_drops_blank_raw_clauses(eq_name):
    """None and empty raw clauses are skipped."""
    assert where_builder([eq_name], [None, "", "  "]) == "WHERE name = :name"
    assert where_builder([], [None, ""]) == ""


@pytest.mark.edge_case
def test_order_by_builder_skips_blank_fields():
    """Entries with empty fields are skipped, others keep their order."""
    orderings = [('', Order.ASC), ('b', Order.DESC), (None, Order.DESC), ('a', Order.ASC)]

    assert order_by_builder(orderings) == "ORDER BY b DESC,a ASC"


@pytest.mark.edge_case
def test_order_by_builder_all_blank():
    """All entries skipped renders nothing."""
    assert order_by_builder([('', Order.ASC), (None, Order.DESC)]) == ""


@pytest.mark.edge_case
def test_order_by_builder_keeps_duplicates():
    """Entries are neither reordered nor deduplicated."""
    result = order_by_builder([('a', Order.ASC), ('a', Order.ASC)])

    assert result == "ORDER BY a ASC,a ASC"


@pytest.mark.edge_case
@pytest.mark.parametrize("entry", [('name', 'ASC'), ('name', None), ('name',), 'name'])
def test_order_by_builder_malformed_entry(entry):
    """Entries must be (field, Order) pairs."""
    with pytest.raises(InvalidInputError):
        order_by_builder([entry])


@pytest.mark.edge_case
def test_builders_are_idempotent(eq_name):
    """Identical inputs give identical output."""
    conditions = [eq_name, between('d', ':lo', ':hi'), in_('id', [':a', ':b'])]

    assert where_builder(conditions) == where_builder(conditions)
    assert set_builder(['a', 'b']) == set_builder(['a', 'b'])
    assert order_by_builder([('a', Order.ASC)]) == order_by_builder([('a', Order.ASC)])


@pytest.mark.edge_case
def test_builders_do_not_mutate_inputs():
    """Input lists are left untouched."""
    fields = ['a', 'b']
    values = ['x', None]
    conditions = [eq('a'), Condition('b', Operator.EQ)]

    set_builder(fields, values)
    where_builder(conditions)

    assert fields == ['a', 'b']
    assert values == ['x', None]
    assert len(conditions) == 2


@pytest.mark.edge_case
def test_builders_accept_generators():
    """Iterables other than lists are accepted."""
    assert set_builder(tuple(['a'])) == "SET a = :a"
    assert where_builder(c for c in [eq('a')]) == "WHERE a = :a"
    assert order_by_builder(iter([('a', Order.DESC)])) == "ORDER BY a DESC"


# ================
# 3. SMOKE TESTS
# ================

@pytest.mark.smoke
def test_update_statement_concatenation():
    """Clauses concatenate directly after a base statement."""
    sql = "UPDATE users " + set_builder(['name', 'state']) + " " + where_builder([eq('id')])

    assert sql == "UPDATE users SET name = :name, state = :state WHERE id = :id"


@pytest.mark.edge_case
@pytest.mark.parametrize("fields, values", [
    ('name', None),
    (['ab', 'cd'], 'xy'),
    (5, None),
    (['a'], 5),
])
def test_set_builder_rejects_non_list_input(fields, values):
    """Bare strings and non-iterables are not split into characters."""
    with pytest.raises(InvalidInputError, match="must be a list"):
        set_builder(fields, values)


@pytest.mark.edge_case
@pytest.mark.parametrize("conditions, raw_clauses", [
    (eq('name'), None),
    ('name = :name', None),
    (42, None),
    (None, 'OR state = :s'),
    (None, 7),
])
def test_where_builder_rejects_non_list_input(conditions, raw_clauses):
    """A single condition or raw string must be wrapped in a list."""
    with pytest.raises(InvalidInputError, match="must be a list"):
        where_builder(conditions, raw_clauses)


@pytest.mark.edge_case
@pytest.mark.parametrize("orderings", [
    'name',
    ('name', Order.ASC),
    Ordering('name', Order.DESC),
    3,
])
def test_order_by_builder_rejects_non_list_input(orderings):
    """A bare string or lone entry must be wrapped in a list."""
    with pytest.raises(InvalidInputError, match="must be a list"):
        order_by_builder(orderings)


@pytest.mark.edge_case
@pytest.mark.parametrize("value, expected", [
    ([':a', ':b'], "id IN (:a,:b)"),
    ((':a', ':b', ':c'), "id IN (:a,:b,:c)"),
    ([1, 2], "id IN (1,2)"),
])
def test_render_membership_joins_collections(value, expected):
    """Collections given directly to IN are joined like in_()."""
    assert render_condition(Condition('id', Operator.IN, value)) == expected


@pytest.mark.edge_case
def test_render_membership_empty_collection_is_dropped():
    """An empty member collection counts as absent."""
    assert render_condition(Condition('id', Operator.NOT_IN, [])) == ""
    assert where_builder([Condition('id', Operator.IN, [])]) == ""


@pytest.mark.edge_case
def test_render_membership_rejects_pair():
    """Range pairs are not member lists."""
    with pytest.raises(InvalidInputError):
        render_condition(Condition('id', Operator.IN, Pair(':a', ':b')))


@pytest.mark.edge_case
@pytest.mark.parametrize("value", [[':a', ':b'], {':a'}])
def test_render_binary_rejects_collections(value):
    """Binary operators never render a Python list."""
    with pytest.raises(InvalidInputError, match="single value"):
        render_condition(Condition('id', Operator.EQ, value))
