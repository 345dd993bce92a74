"""
Core module for the description of a table-based file format

"""
import inspect
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .fields import Field, TableRef, CodedRef
from .meta import MetaTable
from .exceptions import (
    SchemaException,
    InvalidCodeException,
    UnresolvedReferenceException,
)


logger = logging.getLogger(__name__)

MAX_CODE = 0xff

# attributes of a decoded Record
RESERVED_FIELD_NAMES = ('table', 'get', 'keys', 'items', 'values')


class TableDefinition(object):
    """A table of the container: its name, its on-disk code and the columns in on-disk order."""

    def __init__(self, name: str, code: int, fields: Iterable[Field], visible: bool = True):
        self.name = name
        self.code = code
        self.visible = visible
        self.fields: Tuple[Field, ...] = tuple(fields)

        names = [_.name for _ in self.fields]
        if None in names:
            raise SchemaException(f'table {name} has a field without a name')
        duplicated = sorted({_ for _ in names if names.count(_) > 1})
        if duplicated:
            raise SchemaException(f'table {name} has duplicated fields {", ".join(duplicated)}')
        reserved = [_ for _ in names if _ in RESERVED_FIELD_NAMES]
        if reserved:
            raise SchemaException(f'table {name} uses reserved field names {", ".join(reserved)}')


    def __repr__(self):
        return '<%s(%s,0x%02x%s)>' % (
            self.__class__.__name__,
            self.name,
            self.code,
            '' if self.visible else ',hidden',
        )

    def __eq__(self, other):
        if not isinstance(other, TableDefinition):
            return NotImplemented

        return (self.name, self.code, self.visible, self.fields) == \
            (other.name, other.code, other.visible, other.fields)

    def __hash__(self):
        return hash((self.name, self.code, self.visible, self.fields))

    def get_ordered_fields_name(self) -> List[str]:
        return [_.name for _ in self.fields]

    def check_code(self) -> None:
        if not isinstance(self.code, int) or not 0 <= self.code <= MAX_CODE:
            raise InvalidCodeException(f'table {self.name} has code {self.code!r} out of range')



class Table(metaclass=MetaTable):
    """
    Base class to declare a table: the attributes that are fields become the
    columns, in the order they are written.

        class TypeRef(Table):
            ResolutionScope = fields.CodedRef('ResolutionScope')
            TypeName        = fields.HeapIndex(Heap.STRING)
            TypeNamespace   = fields.HeapIndex(Heap.STRING)

            class Meta:
                code = 0x01

    A class without a code is abstract and can be used to share columns.
    """

    @classmethod
    def definition(cls) -> TableDefinition:
        if cls._meta.abstract:
            raise SchemaException(f'table {cls.__name__} has no code')

        return TableDefinition(
            cls._meta.name,
            cls._meta.code,
            cls._meta.fields.values(),
            visible=cls._meta.visible,
        )


class CodeScheme(object):
    '''A coded index: the low "tag_bits" bits select one of "tables", the rest is the row index.

    A None in "tables" is a tag that is reserved and doesn't point to any table.'''

    def __init__(self, name: str, tables: Iterable[Optional[str]], tag_bits: Optional[int] = None):
        self.name = name
        self.tables: Tuple[Optional[str], ...] = tuple(tables)

        if not self.tables:
            raise SchemaException(f'coded scheme {name} has no tables')

        needed = max(1, (len(self.tables) - 1).bit_length())
        if tag_bits is None:
            tag_bits = needed
        elif tag_bits < needed:
            raise SchemaException(f'coded scheme {name} needs {needed} bits for {len(self.tables)} tables')

        self.tag_bits = tag_bits

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name},{self.tag_bits})>'

    @property
    def mask(self) -> int:
        return (1 << self.tag_bits) - 1

    def table_for_tag(self, tag: int) -> Optional[str]:
        '''Returns the table name for the tag, None for reserved or unknown tags.'''
        if 0 <= tag < len(self.tables):
            return self.tables[tag]

        return None

    def tags(self) -> List[Tuple[int, str]]:
        return [(tag, name) for tag, name in enumerate(self.tables) if name is not None]


def schemes_by_name(schemes) -> Dict[str, CodeScheme]:
    '''Normalize an iterable or a mapping of schemes into a mapping keyed by name.'''
    if isinstance(schemes, dict):
        return dict(schemes)

    result = {}
    for scheme in schemes:
        if scheme.name in result:
            raise SchemaException(f'coded scheme {scheme.name} defined twice')
        result[scheme.name] = scheme

    return result


class Schema(object):
    """The ordered set of tables of a container.

    It's built once and never modified: all the builders read from it.
    """

    def __init__(self, tables: Iterable[TableDefinition]):
        self.tables: Tuple[TableDefinition, ...] = tuple(tables)
        self._by_name: Dict[str, TableDefinition] = {}

        for table in self.tables:
            if table.name in self._by_name:
                raise SchemaException(f'table {table.name} defined twice')
            self._by_name[table.name] = table

    @classmethod
    def from_tables(cls, tables) -> "Schema":
        '''Build the schema from Table subclasses and/or TableDefinition instances.'''
        return cls([_.definition() if inspect.isclass(_) else _ for _ in tables])

    @classmethod
    def from_module(cls, module) -> "Schema":
        '''Collect every concrete Table subclass defined in the module, in definition order.'''
        tables = [
            obj for obj in vars(module).values()
            if inspect.isclass(obj) and issubclass(obj, Table) and not obj._meta.abstract
            and obj.__module__ == module.__name__
        ]
        logger.debug('found %d tables in module %s', len(tables), module.__name__)

        return cls.from_tables(tables)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(_.name for _ in self.tables))

    def __iter__(self):
        return iter(self.tables)

    def __len__(self):
        return len(self.tables)

    def __contains__(self, name):
        return name in self._by_name

    def __getitem__(self, name) -> TableDefinition:
        return self._by_name[name]

    def get(self, name) -> Optional[TableDefinition]:
        return self._by_name.get(name)

    def validate(self, schemes=()) -> None:
        '''Check that codes are in range and every reference resolves.

        It doesn't check the uniqueness of the codes, that is a job for the catalog.'''
        schemes = schemes_by_name(schemes)

        for table in self.tables:
            table.check_code()

            for field in table.fields:
                if isinstance(field, TableRef) and field.target not in self:
                    raise UnresolvedReferenceException(table.name, field.name, field.target)
                if isinstance(field, CodedRef) and field.scheme not in schemes:
                    raise UnresolvedReferenceException(table.name, field.name, field.scheme)

        for scheme in schemes.values():
            for name in scheme.tables:
                if name is not None and name not in self:
                    raise UnresolvedReferenceException(scheme.name, '<tag>', name)
