"""
Width formulas: the size in bytes of a record as a function of the layout.

A formula is a list of terms, one for each column and in the same order; the
fixed integers are constant terms, all the others ask the layout.
"""
import logging
from typing import Dict, Tuple

from .catalog import Catalog
from .core import Schema
from .enum import Kind, Heap
from .exceptions import UnsupportedKindException


logger = logging.getLogger(__name__)


class WidthTerm(object):
    '''Width of a single column'''

    def __init__(self, field):
        self.field = field

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.field}={self.expression})>'

    def __eq__(self, other):
        if not isinstance(other, WidthTerm):
            return NotImplemented

        return (self.__class__, self.field, self.expression) == (other.__class__, other.field, other.expression)

    def __hash__(self):
        return hash((self.__class__, self.field, self.expression))

    @property
    def expression(self) -> str:
        raise NotImplementedError(f"method {self.__class__.__name__}.expression not implemented")

    def evaluate(self, layout) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.evaluate() not implemented")


class ConstantTerm(WidthTerm):

    def __init__(self, field, size: int):
        super().__init__(field)
        self.size = size

    @property
    def expression(self):
        return str(self.size)

    def evaluate(self, layout):
        return self.size


class HeapTerm(WidthTerm):

    def __init__(self, field, heap: Heap):
        super().__init__(field)
        self.heap = heap

    @property
    def expression(self):
        return f'heap_index_width({self.heap.name})'

    def evaluate(self, layout):
        return layout.heap_index_width(self.heap)


class TableTerm(WidthTerm):

    def __init__(self, field, target: str):
        super().__init__(field)
        self.target = target

    @property
    def expression(self):
        return f'table_index_width({self.target})'

    def evaluate(self, layout):
        return layout.table_index_width(self.target)


class CodedTerm(WidthTerm):

    def __init__(self, field, scheme: str):
        super().__init__(field)
        self.scheme = scheme

    @property
    def expression(self):
        return f'coded_index_width({self.scheme})'

    def evaluate(self, layout):
        return layout.coded_index_width(self.scheme)


class WidthFormula(object):

    def __init__(self, table: str, terms):
        self.table = table
        self.terms: Tuple[WidthTerm, ...] = tuple(terms)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.table}={self})>'

    def __str__(self):
        return ' + '.join(_.expression for _ in self.terms) or '0'

    @property
    def constant(self) -> int:
        '''Sum of the terms that don't depend on the layout'''
        return sum(_.size for _ in self.terms if isinstance(_, ConstantTerm))

    @property
    def is_constant(self) -> bool:
        return all(isinstance(_, ConstantTerm) for _ in self.terms)

    def evaluate(self, layout) -> int:
        return sum(_.evaluate(layout) for _ in self.terms)


TERMS = {
    Kind.FIXED_INT: lambda field: ConstantTerm(field.name, field.size),
    Kind.HEAP:      lambda field: HeapTerm(field.name, field.heap),
    Kind.TABLE:     lambda field: TableTerm(field.name, field.target),
    Kind.ROW_RANGE: lambda field: TableTerm(field.name, field.target),
    Kind.CODED:     lambda field: CodedTerm(field.name, field.scheme),
}


def build_width_formula(table) -> WidthFormula:
    terms = []
    for field in table.fields:
        term = TERMS.get(field.kind)
        if term is None:
            raise UnsupportedKindException(table.name, field.name, field.kind)
        terms.append(term(field))

    return WidthFormula(table.name, terms)


def build_width_formulas(schema: Schema, catalog: Catalog) -> Dict[str, WidthFormula]:
    formulas = {}
    for entry in catalog:
        formulas[entry.name] = build_width_formula(schema[entry.name])
        logger.debug('width of %s: %s', entry.name, formulas[entry.name])

    return formulas
