"""
A field is a column of a table: it doesn't hold any value by itself, it only
describes how many bytes the column takes on disk and how to read them.

Only the fixed size integers have a width known in advance, all the other
kinds depend on the sizes of the heaps and of the tables of the container
being decoded.
"""
from .enum import Kind, Heap
from .meta import FieldBase


class Field(FieldBase):
    """Base class to subclass from"""
    kind = None

    def __init__(self, name=None):
        self.name = name

    def _key(self):
        return ()

    def __repr__(self):
        args = [repr(_) for _ in self._key()]
        return '<%s(%s)>' % (self.__class__.__name__, ','.join([str(self.name)] + args))

    def __eq__(self, other):
        if not isinstance(other, Field):
            return NotImplemented

        return (self.__class__, self.name, self._key()) == (other.__class__, other.name, other._key())

    def __hash__(self):
        return hash((self.__class__, self.name, self._key()))

    @property
    def reference(self):
        '''Name of the table or of the coded scheme this field points to, if any.'''
        return None


class FixedInt(Field):
    """Unsigned little endian integer of 1, 2 or 4 bytes.

    The "flag_type" argument indicates some subclass of enum.Flag so to have
    directly a representation of the integer value of the column.
    """
    kind = Kind.FIXED_INT

    SIZES = (1, 2, 4)

    def __init__(self, size, flag_type=None, **kw):
        if size not in self.SIZES:
            raise ValueError(f'unsupported uint size {size}')

        self.size = size
        self.flag_type = flag_type
        super().__init__(**kw)

    def _key(self):
        return (self.size, self.flag_type) if self.flag_type else (self.size,)

    def convert(self, value):
        return self.flag_type(value) if self.flag_type else value


class HeapIndex(Field):
    """Offset into one of the String, Blob or GUID heaps."""
    kind = Kind.HEAP

    def __init__(self, heap, **kw):
        if not isinstance(heap, Heap):
            raise ValueError(f'\'{heap}\' is not a heap')

        self.heap = heap
        super().__init__(**kw)

    def _key(self):
        return (self.heap,)


class TableRef(Field):
    """Row index into the table named "target"."""
    kind = Kind.TABLE

    def __init__(self, target, **kw):
        self.target = target
        super().__init__(**kw)

    def _key(self):
        return (self.target,)

    @property
    def reference(self):
        return self.target


class RowRange(TableRef):
    """First row of a run of rows into the table named "target".

    The end of the run is the value of the same column in the next record,
    that's something for who consumes the records: here we read only the index.
    """
    kind = Kind.ROW_RANGE


class CodedRef(Field):
    """Reference tagged with the table it points into, following the coded scheme named "scheme"."""
    kind = Kind.CODED

    def __init__(self, scheme, **kw):
        self.scheme = scheme
        super().__init__(**kw)

    def _key(self):
        return (self.scheme,)

    @property
    def reference(self):
        return self.scheme
