import pytest

from tablayout.core import Table, TableDefinition, Schema, CodeScheme, schemes_by_name
from tablayout.enum import Heap
from tablayout.exceptions import SchemaException, InvalidCodeException, UnresolvedReferenceException
from tablayout.fields import FixedInt, HeapIndex, TableRef, CodedRef, RowRange


def test_table():
    """Check that declaring a Table from fields behaves correctly."""
    class Dummy(Table):
        a = FixedInt(4)
        b = HeapIndex(Heap.BLOB)
        c = TableRef('Dummy')

        class Meta:
            code = 0x12

    definition = Dummy.definition()

    assert definition.name == 'Dummy'
    assert definition.code == 0x12
    assert definition.visible
    assert definition.get_ordered_fields_name() == ['a', 'b', 'c']
    assert definition.fields[0] == FixedInt(4, name='a')
    assert definition.fields[2].target == 'Dummy'
    assert Dummy.a.name == 'a'


def test_table_meta_options():
    class Internal(Table):
        x = FixedInt(1)

        class Meta:
            code = 0x03
            visible = False
            name = 'InternalTable'

    definition = Internal.definition()

    assert definition.name == 'InternalTable'
    assert not definition.visible
    assert not hasattr(Internal, 'Meta')


def test_inheritance():
    '''subclasses inherit fields'''
    class Father(Table):
        field_a = FixedInt(2)
        field_b = HeapIndex(Heap.STRING)

    class Son(Father):
        field_c = FixedInt(4)

        class Meta:
            code = 0x01

    assert Son.definition().get_ordered_fields_name() == [
        'field_a', 'field_b', 'field_c',
    ]

    with pytest.raises(SchemaException):
        Father.definition()

    with pytest.raises(AttributeError):
        class Nephew(Father):
            field_a = FixedInt(4)


def test_shared_field_instance():
    """The same field object used twice gets a copy with the right name each time."""
    string = HeapIndex(Heap.STRING)

    class Double(Table):
        first = string
        second = string

        class Meta:
            code = 0x00

    assert Double.definition().get_ordered_fields_name() == ['first', 'second']
    assert string.name is None


def test_table_definition_duplicated_field():
    with pytest.raises(SchemaException):
        TableDefinition('A', 0, [FixedInt(2, name='x'), FixedInt(4, name='x')])

    with pytest.raises(SchemaException):
        TableDefinition('A', 0, [FixedInt(2)])


def test_schema(schema):
    assert len(schema) == 3
    assert 'A' in schema
    assert 'C' not in schema
    assert schema['B'].code == 1
    assert schema.get('C') is None
    assert [_.name for _ in schema] == ['A', 'B', 'Hidden']

    with pytest.raises(SchemaException):
        Schema([TableDefinition('A', 0, []), TableDefinition('A', 1, [])])


def test_schema_from_tables():
    class Parent(Table):
        Name = HeapIndex(Heap.STRING)

        class Meta:
            code = 0x01

    schema = Schema.from_tables([
        Parent,
        TableDefinition('Child', 0x00, [TableRef('Parent', name='Parent')]),
    ])

    assert [_.name for _ in schema] == ['Parent', 'Child']
    assert schema['Parent'] == Parent.definition()


def test_schema_validate(schema, schemes):
    schema.validate(schemes)


def test_schema_validate_unresolved_table():
    schema = Schema([TableDefinition('A', 0, [TableRef('Missing', name='ref')])])

    with pytest.raises(UnresolvedReferenceException) as e:
        schema.validate()

    assert e.value.table == 'A'
    assert e.value.field == 'ref'
    assert e.value.reference == 'Missing'


def test_schema_validate_unresolved_row_range():
    schema = Schema([TableDefinition('A', 0, [RowRange('Missing', name='list')])])

    with pytest.raises(UnresolvedReferenceException):
        schema.validate()


def test_schema_validate_unresolved_scheme(schema):
    with pytest.raises(UnresolvedReferenceException) as e:
        schema.validate([])

    assert e.value.reference == 'AOrB'


def test_schema_validate_scheme_with_unknown_table(schema):
    with pytest.raises(UnresolvedReferenceException):
        schema.validate([CodeScheme('AOrB', ['A', 'Z'])])


def test_schema_validate_code_out_of_range():
    with pytest.raises(InvalidCodeException):
        Schema([TableDefinition('A', 0x100, [])]).validate()

    with pytest.raises(InvalidCodeException):
        Schema([TableDefinition('A', -1, [])]).validate()


def test_table_definition_check_code():
    TableDefinition('A', 0, []).check_code()
    TableDefinition('A', 0xff, []).check_code()

    for code in (0x100, -1, None, '1'):
        with pytest.raises(InvalidCodeException):
            TableDefinition('A', code, []).check_code()



def test_code_scheme():
    scheme = CodeScheme('CustomAttributeType', [None, None, 'MethodDef', 'MemberRef', None])

    assert scheme.tag_bits == 3
    assert scheme.mask == 0b111
    assert scheme.table_for_tag(2) == 'MethodDef'
    assert scheme.table_for_tag(0) is None
    assert scheme.table_for_tag(7) is None
    assert scheme.tags() == [(2, 'MethodDef'), (3, 'MemberRef')]

    assert CodeScheme('One', ['A']).tag_bits == 1
    assert CodeScheme('Two', ['A', 'B']).tag_bits == 1
    assert CodeScheme('Wide', ['A', 'B'], tag_bits=5).tag_bits == 5

    with pytest.raises(SchemaException):
        CodeScheme('Narrow', ['A', 'B', 'C'], tag_bits=1)

    with pytest.raises(SchemaException):
        CodeScheme('Empty', [])


def test_schemes_by_name(schemes):
    by_name = schemes_by_name(schemes)

    assert list(by_name) == ['AOrB']
    assert schemes_by_name(by_name) == by_name

    with pytest.raises(SchemaException):
        schemes_by_name(schemes + schemes)


def test_table_definition_reserved_field_names():
    for name in ('table', 'get', 'keys', 'items', 'values'):
        with pytest.raises(SchemaException):
            TableDefinition('F', 0, [FixedInt(1, name=name)])

    TableDefinition('F', 0, [FixedInt(1, name='Table')])
