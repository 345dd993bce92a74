import pytest

from tablayout.core import CodeScheme, Schema, TableDefinition
from tablayout.enum import Heap
from tablayout.fields import FixedInt, HeapIndex, TableRef, CodedRef, RowRange
from tablayout.layout import LayoutContext


@pytest.fixture
def schema():
    return Schema([
        TableDefinition('A', 0, [
            FixedInt(2, name='flags'),
            HeapIndex(Heap.STRING, name='name'),
            TableRef('B', name='b'),
            CodedRef('AOrB', name='owner'),
            RowRange('B', name='children'),
        ]),
        TableDefinition('B', 1, [
            FixedInt(4, name='value'),
        ]),
        TableDefinition('Hidden', 2, [
            FixedInt(1, name='x'),
        ], visible=False),
    ])


@pytest.fixture
def schemes():
    return [CodeScheme('AOrB', ['A', 'B', 'Hidden', None])]


def _layout(width):
    return LayoutContext(
        {heap: width for heap in Heap},
        {'A': width, 'B': width, 'Hidden': width},
        {'AOrB': width},
    )


@pytest.fixture
def small_layout():
    return _layout(2)


@pytest.fixture
def large_layout():
    return _layout(4)
