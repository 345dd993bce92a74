"""
Widths of the indexes of a specific container.

The same schema produces records of different sizes: a container with small
heaps and tables uses 2 bytes indexes, a big one uses 4 bytes for the indexes
that don't fit. These widths are known only when the container is opened, so
the width formulas and the decode plans are evaluated against a LayoutContext.
"""
import logging
from typing import Dict, Mapping, Optional

from .core import schemes_by_name
from .enum import Heap


logger = logging.getLogger(__name__)

# bits of the HeapSizes byte of the tables stream header
HEAP_SIZE_FLAGS = {
    Heap.STRING: 0x01,
    Heap.GUID:   0x02,
    Heap.BLOB:   0x04,
}

SMALL_INDEX = 2
LARGE_INDEX = 4


class LayoutContext(object):

    def __init__(self, heap_widths: Mapping[Heap, int], table_widths: Mapping[str, int],
                 coded_widths: Mapping[str, int]):
        self._heap_widths: Dict[Heap, int] = dict(heap_widths)
        self._table_widths: Dict[str, int] = dict(table_widths)
        self._coded_widths: Dict[str, int] = dict(coded_widths)

    def __repr__(self):
        heaps = ','.join(f'{_.name.lower()}={w}' for _, w in self._heap_widths.items())
        return f'<{self.__class__.__name__}({heaps})>'

    @classmethod
    def from_counts(cls, heap_sizes: int, row_counts: Mapping[str, int], schemes=(), schema=None) -> "LayoutContext":
        '''Resolve the widths from the HeapSizes byte and the number of rows of each table.

        A table missing from "row_counts" has no rows; passing the schema gives
        a width to all its tables, otherwise only to the ones counted.'''
        heap_widths = {
            heap: LARGE_INDEX if heap_sizes & flag else SMALL_INDEX
            for heap, flag in HEAP_SIZE_FLAGS.items()
        }

        names = list(row_counts)
        if schema is not None:
            names += [_.name for _ in schema if _.name not in row_counts]

        def rows(name: Optional[str]) -> int:
            return row_counts.get(name, 0) if name is not None else 0

        table_widths = {
            name: LARGE_INDEX if rows(name) >= 1 << 16 else SMALL_INDEX
            for name in names
        }

        coded_widths = {}
        for scheme in schemes_by_name(schemes).values():
            limit = 1 << (16 - scheme.tag_bits)
            largest = max(rows(_) for _ in scheme.tables)
            coded_widths[scheme.name] = LARGE_INDEX if largest >= limit else SMALL_INDEX

        logger.debug('layout from heap sizes 0x%02x and %d tables', heap_sizes, len(row_counts))

        return cls(heap_widths, table_widths, coded_widths)

    def heap_index_width(self, heap: Heap) -> int:
        return self._heap_widths[heap]

    def table_index_width(self, name: str) -> int:
        return self._table_widths[name]

    def coded_index_width(self, scheme: str) -> int:
        return self._coded_widths[scheme]
