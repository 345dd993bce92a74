class TablayoutException(Exception):
    '''Base class to extend in order to throw exception in tablayout.'''
    pass


class SchemaException(TablayoutException):
    '''The schema is malformed: the generation run must stop.'''
    pass


class InvalidCodeException(SchemaException):
    pass


class DuplicateCodeException(SchemaException):
    '''Two or more tables share the same on-disk code.'''

    def __init__(self, code, tables):
        self.code = code
        self.tables = list(tables)
        super().__init__(f'code 0x{code:02x} is used by tables {", ".join(self.tables)}')


class UnresolvedReferenceException(SchemaException):
    '''A field references a table or a coded scheme that doesn't exist.'''

    def __init__(self, table, field, reference):
        self.table = table
        self.field = field
        self.reference = reference
        super().__init__(f'{table}.{field} references unknown \'{reference}\'')


class UnsupportedKindException(SchemaException):

    def __init__(self, table, field, kind):
        self.table = table
        self.field = field
        self.kind = kind
        super().__init__(f'{table}.{field} has unsupported kind {kind!r}')


class CursorException(TablayoutException):
    '''Raised at decode time when a record cannot be read.

    It takes a single argument that represents the chain of the fields that
    caused the exception, innermost first.
    '''

    def __init__(self, chain, reason=None):
        self.chain = chain
        self.reason = reason
        super().__init__(reason)

    def __str__(self):
        where = '.'.join(reversed(self.chain))
        return f'{where}: {self.reason}' if where else str(self.reason)
