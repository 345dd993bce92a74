import logging
from typing import Dict, Optional

from .catalog import Catalog, CatalogEntry
from .core import Schema, schemes_by_name


logger = logging.getLogger(__name__)


class CodedDispatch(object):
    '''Maps the tags of a coded scheme to the visible tables they point into.

    Lookups never fail: a tag of a hidden table, of a reserved slot or outside
    of the scheme gives None.'''

    def __init__(self, scheme: str, tags: Dict[int, CatalogEntry]):
        self.scheme = scheme
        self._tags = dict(sorted(tags.items()))
        self._ids = {entry.id: entry for entry in self._tags.values()}

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.scheme},{list(self._tags)})>'

    def __len__(self):
        return len(self._tags)

    def items(self):
        return self._tags.items()

    def lookup(self, tag: int) -> Optional[CatalogEntry]:
        return self._tags.get(tag)

    def resolve(self, table_id: int) -> Optional[CatalogEntry]:
        '''Same as lookup() but from the table id of an already decoded coded index.'''
        return self._ids.get(table_id)


def build_coded_dispatch(schema: Schema, catalog: Catalog, schemes) -> Dict[str, CodedDispatch]:
    dispatch = {}
    for scheme in schemes_by_name(schemes).values():
        tags = {}
        for tag, name in scheme.tags():
            if not schema[name].visible:
                logger.warning('coded scheme %s: table %s is not visible', scheme.name, name)
                continue
            tags[tag] = catalog.entry(name)

        dispatch[scheme.name] = CodedDispatch(scheme.name, tags)

    return dispatch
