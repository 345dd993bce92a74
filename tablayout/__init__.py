"""
# Tablayout: record layouts for table-based binary formats.

Some binary formats (the ECMA-335 metadata tables being the main example)
store a relational schema inside a blob: a list of tables, each with a fixed
sequence of columns. The catch is that a lot of columns are indexes whose width
is not known until the data is at hand: an index into a table with less than
65536 rows takes 2 bytes, otherwise 4.

From the description of the tables this package derives

 1. catalog: the numeric id of each table, the number of tables and the
    sentinel id meaning "no table".

 2. width formulas: the size of a record as a function of a LayoutContext,
    i.e. of the widths of the indexes of a specific container.

 3. decode plans: the ordered reads that transform the bytes of a record into
    a Record.

 4. coded dispatch: for each coded index scheme, which visible table a tag
    points into.

 5. registry: the visible tables in id order, ready to be wired to accessors.

All the artifacts are plain objects: generate() builds all of them or raises.
"""
from .core import Table, TableDefinition, Schema, CodeScheme
from .generator import generate, Artifacts
from .layout import LayoutContext
from .streams import RecordCursor, CodedIndex
