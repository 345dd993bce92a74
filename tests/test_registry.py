import pytest

from tablayout.catalog import build_catalog
from tablayout.generator import generate
from tablayout.registry import build_registry, RegistryEntry, Tables
from tablayout.streams import CodedIndex


def test_registry(schema):
    registry = build_registry(schema, build_catalog(schema))

    assert list(registry) == [
        RegistryEntry('A', 0),
        RegistryEntry('B', 1),
    ]
    assert len(registry) == 2


def test_registry_initialize(schema):
    registry = build_registry(schema, build_catalog(schema))
    created = []

    def factory(entry):
        created.append(entry.name)
        return entry.name.lower()

    tables = registry.initialize(factory)

    assert isinstance(tables, Tables)
    assert created == ['A', 'B']
    assert tables[0] == 'a'
    assert tables[1] == 'b'
    assert tables.get(2) is None
    assert 2 not in tables
    assert tables.by_name('B') == 'b'
    assert list(tables) == ['a', 'b']
    assert len(tables) == 2

    with pytest.raises(KeyError):
        tables[2]


def test_tables_coded_table(schema, schemes):
    tables = generate(schema, schemes).tables()

    assert tables.coded_table(CodedIndex(1, 3)).name == 'B'
    assert tables.coded_table(CodedIndex(2, 3)) is None
    assert tables.coded_table(CodedIndex(3, 3)) is None


def test_table_accessor(schema, schemes, small_layout):
    accessor = generate(schema, schemes).tables().by_name('B')
    data = b'\x01\x00\x00\x00\x02\x00\x00\x00'

    assert accessor.id == 1
    assert accessor.width(small_layout) == 4
    assert accessor.count(data, small_layout) == 2
    assert accessor.record(data, small_layout, 1).value == 2
    assert [_.value for _ in accessor.records(data, small_layout)] == [1, 2]

    with pytest.raises(IndexError):
        accessor.record(data, small_layout, 2)


def test_table_accessor_layout_dependent(schema, schemes, small_layout, large_layout):
    accessor = generate(schema, schemes).tables()[0]
    record = bytes(range(18))

    assert accessor.count(record, small_layout) == 1
    assert accessor.count(record, large_layout) == 1
    assert accessor.record(record, small_layout, 0).b == 0x0504
    assert accessor.record(record, large_layout, 0).b == 0x09080706
