import pytest

from tablayout.catalog import build_catalog
from tablayout.core import Schema, TableDefinition
from tablayout.enum import Heap
from tablayout.exceptions import UnsupportedKindException
from tablayout.fields import Field, FixedInt, TableRef
from tablayout.width import (
    build_width_formula,
    build_width_formulas,
    ConstantTerm,
    HeapTerm,
    TableTerm,
    CodedTerm,
)


class WeirdField(Field):
    kind = None


def test_width_formula_terms(schema):
    formula = build_width_formula(schema['A'])

    assert formula.terms == (
        ConstantTerm('flags', 2),
        HeapTerm('name', Heap.STRING),
        TableTerm('b', 'B'),
        CodedTerm('owner', 'AOrB'),
        TableTerm('children', 'B'),
    )
    assert str(formula) == \
        '2 + heap_index_width(STRING) + table_index_width(B) + coded_index_width(AOrB) + table_index_width(B)'
    assert not formula.is_constant
    assert formula.constant == 2


def test_width_formula_evaluate(schema, small_layout, large_layout):
    formula = build_width_formula(schema['A'])

    assert formula.evaluate(small_layout) == 10
    assert formula.evaluate(large_layout) == 18


def test_width_formula_sum_of_terms(schema, small_layout, large_layout):
    formulas = build_width_formulas(schema, build_catalog(schema))

    for formula in formulas.values():
        for layout in (small_layout, large_layout):
            assert formula.evaluate(layout) == sum(_.evaluate(layout) for _ in formula.terms)
            assert formula.evaluate(layout) == sum(_.evaluate(layout) for _ in reversed(formula.terms))


def test_width_formula_constant(small_layout, large_layout):
    formula = build_width_formula(TableDefinition('T', 3, [FixedInt(2, name='x')]))

    assert formula.is_constant
    assert str(formula) == '2'
    assert formula.evaluate(small_layout) == 2
    assert formula.evaluate(large_layout) == 2


def test_width_formula_table_ref(small_layout, large_layout):
    """A record with a reference to B depends exactly on the width of the indexes into B."""
    schema = Schema([
        TableDefinition('A', 0, [TableRef('B', name='b')]),
        TableDefinition('B', 1, []),
    ])

    formula = build_width_formulas(schema, build_catalog(schema))['A']

    assert formula.terms == (TableTerm('b', 'B'),)
    assert formula.evaluate(small_layout) == small_layout.table_index_width('B')
    assert formula.evaluate(large_layout) == large_layout.table_index_width('B')


def test_width_formula_empty_table(small_layout):
    formula = build_width_formula(TableDefinition('Empty', 0, []))

    assert formula.evaluate(small_layout) == 0
    assert str(formula) == '0'


def test_width_formula_unsupported_kind():
    table = TableDefinition('A', 0, [FixedInt(2, name='ok'), WeirdField(name='weird')])

    with pytest.raises(UnsupportedKindException) as e:
        build_width_formula(table)

    assert e.value.table == 'A'
    assert e.value.field == 'weird'


def test_width_formulas_keyed_by_table(schema):
    formulas = build_width_formulas(schema, build_catalog(schema))

    assert list(formulas) == ['A', 'B', 'Hidden']
    assert formulas['B'].table == 'B'
