import pytest

from tablayout.core import CodeScheme
from tablayout.enum import Heap
from tablayout.layout import LayoutContext


def test_layout_context(small_layout):
    assert small_layout.heap_index_width(Heap.STRING) == 2
    assert small_layout.table_index_width('A') == 2
    assert small_layout.coded_index_width('AOrB') == 2

    with pytest.raises(KeyError):
        small_layout.table_index_width('Missing')

    with pytest.raises(KeyError):
        small_layout.coded_index_width('Missing')


def test_layout_heap_sizes():
    layout = LayoutContext.from_counts(0x00, {})

    assert [layout.heap_index_width(_) for _ in Heap] == [2, 2, 2]

    layout = LayoutContext.from_counts(0x01, {})

    assert layout.heap_index_width(Heap.STRING) == 4
    assert layout.heap_index_width(Heap.GUID) == 2
    assert layout.heap_index_width(Heap.BLOB) == 2

    layout = LayoutContext.from_counts(0x06, {})

    assert layout.heap_index_width(Heap.STRING) == 2
    assert layout.heap_index_width(Heap.GUID) == 4
    assert layout.heap_index_width(Heap.BLOB) == 4


def test_layout_table_widths(schema):
    layout = LayoutContext.from_counts(0x00, {'A': 0xffff, 'B': 0x10000}, schema=schema)

    assert layout.table_index_width('A') == 2
    assert layout.table_index_width('B') == 4
    # not counted means empty
    assert layout.table_index_width('Hidden') == 2

    layout = LayoutContext.from_counts(0x00, {'A': 1})

    with pytest.raises(KeyError):
        layout.table_index_width('B')


def test_layout_coded_widths():
    schemes = [
        CodeScheme('OneBit', ['A', 'B']),
        CodeScheme('TwoBits', ['A', 'B', 'C']),
        CodeScheme('Reserved', [None, 'C']),
    ]

    # 1 << 15 rows don't fit in 15 bits, 1 << 14 don't fit in 14
    layout = LayoutContext.from_counts(0x00, {'A': (1 << 14), 'B': 10, 'C': (1 << 15) - 1}, schemes)

    assert layout.coded_index_width('OneBit') == 2
    assert layout.coded_index_width('TwoBits') == 4
    assert layout.coded_index_width('Reserved') == 2

    layout = LayoutContext.from_counts(0x00, {'B': 1 << 15}, schemes)

    assert layout.coded_index_width('OneBit') == 4
    assert layout.coded_index_width('TwoBits') == 4
    assert layout.coded_index_width('Reserved') == 2
