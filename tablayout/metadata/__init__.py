'''
# ECMA-335 metadata

The tables stream of a .NET/WinMD assembly is the format this package was born
for: 45 tables whose index columns are 2 or 4 bytes wide depending on the size
of the heaps and on the number of rows.

    from tablayout.generator import generate
    from tablayout.metadata import SCHEMA, SCHEMES

    artifacts = generate(SCHEMA, SCHEMES)
'''
from ..core import Schema
from . import tables
from .coded import SCHEMES


SCHEMA = Schema.from_module(tables)
