import logging
from typing import NamedTuple, Optional, Tuple

from bitstring import ConstBitStream

from .enum import Heap
from .exceptions import CursorException


logger = logging.getLogger(__name__)


class CodedIndex(NamedTuple):
    '''A decoded coded index: the catalog id of the table and the row index into it.'''
    table: int
    index: int


class CodedTarget(NamedTuple):
    '''A coded scheme resolved against a catalog: "ids" has one table id for each tag.'''
    scheme: str
    tag_bits: int
    ids: Tuple[int, ...]


class RecordCursor(object):
    '''Sequential reader of records: every read consumes exactly the width
    the layout resolves for it, integers are little endian.

    When a read fails the exception is raised and kept in the "error" attribute.'''

    def __init__(self, data: bytes, layout, offset: int = 0):
        self.layout = layout
        self.error: Optional[CursorException] = None
        self._bits = ConstBitStream(bytes=bytes(data))
        self.seek(offset)

    def __repr__(self):
        return f'<{self.__class__.__name__}(offset={self.tell()},remaining={self.remaining})>'

    def __len__(self):
        return self._bits.len // 8

    def tell(self) -> int:
        return self._bits.bytepos

    def seek(self, offset: int) -> None:
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)
        if not 0 <= offset <= len(self):
            raise ValueError(f'offset {offset} outside of {len(self)} bytes')

        self._bits.bytepos = offset

    @property
    def remaining(self) -> int:
        return len(self) - self.tell()

    def _fail(self, reason) -> CursorException:
        self.error = CursorException(chain=[], reason=reason)
        return self.error

    def _read(self, width: int) -> int:
        if width not in (1, 2, 4):
            raise self._fail(f'invalid width {width}')
        if width > self.remaining:
            raise self._fail(f'reading {width} bytes at offset {self.tell()} with {self.remaining} left')

        return self._bits.read(f'uintle:{width * 8}')

    def uint8(self) -> int:
        return self._read(1)

    def uint16(self) -> int:
        return self._read(2)

    def uint32(self) -> int:
        return self._read(4)

    def heap(self, heap: Heap) -> int:
        return self._read(self.layout.heap_index_width(heap))

    def index(self, table: str) -> int:
        return self._read(self.layout.table_index_width(table))

    def row_range(self, table: str) -> int:
        return self.index(table)

    def coded(self, target: CodedTarget) -> CodedIndex:
        value = self._read(self.layout.coded_index_width(target.scheme))

        tag = value & ((1 << target.tag_bits) - 1)
        if tag >= len(target.ids):
            raise self._fail(f'invalid tag {tag} for coded index {target.scheme}')

        return CodedIndex(target.ids[tag], value >> target.tag_bits)
