"""
The registry lists the tables visible from the outside, in increasing id
order, so that an accessor object can be created for each one of them.
"""
import logging
from typing import Callable, Dict, Iterator, NamedTuple, Optional, Tuple

from .catalog import Catalog
from .core import Schema
from .streams import RecordCursor


logger = logging.getLogger(__name__)


class RegistryEntry(NamedTuple):
    name: str
    id: int


class TableAccessor(object):
    '''Gives access to the records of a table stored contiguously in a buffer.'''

    def __init__(self, entry: RegistryEntry, formula, plan):
        self.entry = entry
        self.formula = formula
        self.plan = plan

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name},{self.id})>'

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def id(self) -> int:
        return self.entry.id

    def width(self, layout) -> int:
        return self.formula.evaluate(layout)

    def count(self, data: bytes, layout) -> int:
        width = self.width(layout)
        return len(data) // width if width else 0

    def record(self, data: bytes, layout, row: int):
        '''Decode the record at index "row" (zero based) of the table contained in "data".'''
        width = self.width(layout)
        if not 0 <= row < self.count(data, layout):
            raise IndexError(f'row {row} out of range for table {self.name}')

        # the cursor sees only this record
        cursor = RecordCursor(data[row * width:(row + 1) * width], layout)

        return self.plan.apply(cursor)

    def records(self, data: bytes, layout):
        for row in range(self.count(data, layout)):
            yield self.record(data, layout, row)


class Tables(object):
    '''The accessors created from a registry, indexed by table id.'''

    def __init__(self, accessors):
        self._by_id: Dict[int, object] = {}
        self._by_name: Dict[str, object] = {}
        for entry, accessor in accessors:
            self._by_id[entry.id] = accessor
            self._by_name[entry.name] = accessor

    def __repr__(self):
        return f'<{self.__class__.__name__}({",".join(self._by_name)})>'

    def __getitem__(self, table_id: int):
        return self._by_id[table_id]

    def __contains__(self, table_id):
        return table_id in self._by_id

    def __iter__(self):
        return iter(self._by_id.values())

    def __len__(self):
        return len(self._by_id)

    def get(self, table_id: int):
        return self._by_id.get(table_id)

    def by_name(self, name: str):
        return self._by_name[name]

    def coded_table(self, coded_index) -> Optional[object]:
        '''Returns the accessor of the table a coded index points into, None for hidden tables.'''
        return self._by_id.get(coded_index.table)


class Registry(object):

    def __init__(self, entries):
        self.entries: Tuple[RegistryEntry, ...] = tuple(sorted(entries, key=lambda _: _.id))

    def __repr__(self):
        return f'<{self.__class__.__name__}({",".join(_.name for _ in self.entries)})>'

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def initialize(self, factory: Callable[[RegistryEntry], object]) -> Tables:
        '''Create one accessor for each visible table calling "factory" in id order.'''
        accessors = []
        for entry in self.entries:
            logger.debug('initializing table %s (%d)', entry.name, entry.id)
            accessors.append((entry, factory(entry)))

        return Tables(accessors)


def build_registry(schema: Schema, catalog: Catalog) -> Registry:
    return Registry(
        RegistryEntry(entry.name, entry.id)
        for entry in catalog if schema[entry.name].visible
    )
