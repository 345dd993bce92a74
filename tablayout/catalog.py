"""
The catalog assigns to each table its numeric id.

The ids are the codes declared in the schema, the catalog only checks them and
sorts the tables so that anything derived from it has an increasing order. The
number of tables is the largest code plus one and it's used also as sentinel
for "no table".
"""
import logging
from collections import defaultdict
from typing import Dict, Iterator, NamedTuple, Tuple

from .core import Schema
from .exceptions import DuplicateCodeException


logger = logging.getLogger(__name__)


class CatalogEntry(NamedTuple):
    name: str
    id: int


class Catalog(object):

    def __init__(self, entries):
        self.entries: Tuple[CatalogEntry, ...] = tuple(sorted(entries, key=lambda _: _.id))
        self._by_name: Dict[str, CatalogEntry] = {_.name: _ for _ in self.entries}
        self._by_id: Dict[int, CatalogEntry] = {_.id: _ for _ in self.entries}

    def __repr__(self):
        return f'<{self.__class__.__name__}(tables={len(self)},none={self.none})>'

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __contains__(self, name):
        return name in self._by_name

    @property
    def table_count(self) -> int:
        return self.entries[-1].id + 1 if self.entries else 0

    @property
    def none(self) -> int:
        '''Sentinel id for "no table"'''
        return self.table_count

    def id_of(self, name: str) -> int:
        return self._by_name[name].id

    def name_of(self, table_id: int) -> str:
        return self._by_id[table_id].name

    def entry(self, name: str) -> CatalogEntry:
        return self._by_name[name]


def build_catalog(schema: Schema) -> Catalog:
    by_code = defaultdict(list)

    for table in schema:
        table.check_code()
        by_code[table.code].append(table.name)

    for code, names in sorted(by_code.items()):
        if len(names) > 1:
            raise DuplicateCodeException(code, names)

    catalog = Catalog(CatalogEntry(table.name, table.code) for table in schema)

    logger.debug('catalog with %d tables, sentinel is %d', len(catalog), catalog.none)

    return catalog
