from enum import Enum, auto


class Heap(Enum):
    '''The shared variable-length data pools referenced by offset'''
    STRING = auto()
    BLOB   = auto()
    GUID   = auto()


class Kind(Enum):
    '''Column kinds a table can be built from'''
    FIXED_INT = auto()
    HEAP      = auto()
    TABLE     = auto()
    CODED     = auto()
    ROW_RANGE = auto()


class Read(Enum):
    '''Primitive reads performed against a record cursor'''
    UINT8     = 'uint8'
    UINT16    = 'uint16'
    UINT32    = 'uint32'
    HEAP      = 'heap'
    INDEX     = 'index'
    CODED     = 'coded'
    ROW_RANGE = 'row_range'
