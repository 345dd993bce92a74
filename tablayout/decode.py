"""
Decode plans: the list of reads that turn the bytes of a record into a Record.

The steps follow the order of the columns and each one reads from the cursor
exactly the width the corresponding term of the width formula evaluates to,
otherwise all the following columns would be read at the wrong offset.
"""
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Tuple

from .catalog import Catalog
from .core import Schema, schemes_by_name
from .enum import Kind, Read
from .exceptions import CursorException, UnresolvedReferenceException, UnsupportedKindException
from .streams import CodedTarget


logger = logging.getLogger(__name__)

UINT_READS = {
    1: Read.UINT8,
    2: Read.UINT16,
    4: Read.UINT32,
}


class Record(Mapping):
    '''The decoded values of a row, accessible both as mapping and as attributes.'''

    def __init__(self, table: str, values: Dict[str, Any]):
        self.__dict__['_table'] = table
        self.__dict__['_values'] = dict(values)

    @property
    def table(self) -> str:
        return self._table

    def __getitem__(self, key):
        return self._values[key]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __getattr__(self, name):
        values = self.__dict__.get('_values', {})
        if name not in values:
            raise AttributeError(f'{self.__dict__.get("_table")} has no field named \'{name}\'')

        return values[name]

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is read-only')

    def __eq__(self, other):
        if isinstance(other, Record):
            return self._table == other._table and self._values == other._values

        return super().__eq__(other)

    def __hash__(self):
        return hash((self._table, tuple(self._values.items())))

    def __repr__(self):
        msg = []
        for field_name, value in self._values.items():
            msg.append('%s=%s' % (field_name, repr(value)))
        return '<%s(%s)>' % (self._table, ','.join(msg))


class DecodeStep(object):
    '''Populate "field" with the result of the cursor method named by "read".'''

    def __init__(self, field: str, read: Read, argument=None, convert: Optional[Callable] = None):
        self.field = field
        self.read = read
        self.argument = argument
        self.convert = convert

    def __repr__(self):
        argument = '' if self.argument is None else repr(self.argument)
        return f'<{self.__class__.__name__}({self.field}={self.read.value}({argument}))>'

    def __eq__(self, other):
        if not isinstance(other, DecodeStep):
            return NotImplemented

        return (self.field, self.read, self.argument, self.convert) == \
            (other.field, other.read, other.argument, other.convert)

    def __hash__(self):
        return hash((self.field, self.read, self.argument))

    def apply(self, cursor):
        method = getattr(cursor, self.read.value)
        value = method() if self.argument is None else method(self.argument)

        if self.convert is None:
            return value

        # a strict enum.Flag refuses undeclared bits
        try:
            return self.convert(value)
        except ValueError as e:
            raise cursor._fail(f'invalid {self.convert.__name__} value {value:#x}') from e


class DecodePlan(object):

    def __init__(self, table: str, steps):
        self.table = table
        self.steps: Tuple[DecodeStep, ...] = tuple(steps)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.table},{len(self.steps)} steps)>'

    def __iter__(self):
        return iter(self.steps)

    def __len__(self):
        return len(self.steps)

    def apply(self, cursor) -> Record:
        '''Read a record from the cursor: if any step fails nothing is returned
        and the exception has the chain of the field that failed.'''
        values = {}
        for step in self.steps:
            logger.debug('decoding %s.%s at offset %d', self.table, step.field, cursor.tell())
            try:
                values[step.field] = step.apply(cursor)
            except CursorException as e:
                e.chain.extend([step.field, self.table])
                cursor.error = e
                raise

        return Record(self.table, values)


def _coded_target(scheme, catalog: Catalog) -> CodedTarget:
    ids = tuple(catalog.id_of(_) if _ is not None else catalog.none for _ in scheme.tables)

    return CodedTarget(scheme.name, scheme.tag_bits, ids)


def build_decode_plan(table, catalog: Catalog, schemes) -> DecodePlan:
    schemes = schemes_by_name(schemes)

    steps = []
    for field in table.fields:
        if field.kind == Kind.FIXED_INT:
            step = DecodeStep(field.name, UINT_READS[field.size], convert=field.flag_type)
        elif field.kind == Kind.HEAP:
            step = DecodeStep(field.name, Read.HEAP, field.heap)
        elif field.kind == Kind.TABLE:
            step = DecodeStep(field.name, Read.INDEX, field.target)
        elif field.kind == Kind.ROW_RANGE:
            step = DecodeStep(field.name, Read.ROW_RANGE, field.target)
        elif field.kind == Kind.CODED:
            if field.scheme not in schemes:
                raise UnresolvedReferenceException(table.name, field.name, field.scheme)
            step = DecodeStep(field.name, Read.CODED, _coded_target(schemes[field.scheme], catalog))
        else:
            raise UnsupportedKindException(table.name, field.name, field.kind)

        steps.append(step)

    return DecodePlan(table.name, steps)


def build_decode_plans(schema: Schema, catalog: Catalog, schemes=()) -> Dict[str, DecodePlan]:
    schemes = schemes_by_name(schemes)

    plans = {}
    for entry in catalog:
        plans[entry.name] = build_decode_plan(schema[entry.name], catalog, schemes)
        logger.debug('decode plan of %s has %d steps', entry.name, len(plans[entry.name]))

    return plans
