'''
# Metadata tables

The physical tables of the #~ stream (ECMA-335 II.22), each one with its
columns in on-disk order.

The *Ptr tables, the edit-and-continue tables and the processor/OS tables
must be ignored by the readers, so they are declared but not visible.
'''
from ..core import Table
from ..enum import Heap
from ..fields import FixedInt, HeapIndex, TableRef, CodedRef, RowRange
from .flags import (
    TypeAttributes,
    FieldAttributes,
    MethodAttributes,
    MethodImplAttributes,
    ParamAttributes,
    EventAttributes,
    PropertyAttributes,
    MethodSemanticsAttributes,
    PInvokeAttributes,
    AssemblyFlags,
    AssemblyHashAlgorithm,
    FileAttributes,
    ManifestResourceAttributes,
    GenericParamAttributes,
)


class Module(Table):
    Generation = FixedInt(2)
    Name       = HeapIndex(Heap.STRING)
    Mvid       = HeapIndex(Heap.GUID)
    EncId      = HeapIndex(Heap.GUID)
    EncBaseId  = HeapIndex(Heap.GUID)

    class Meta:
        code = 0x00


class TypeRef(Table):
    ResolutionScope = CodedRef('ResolutionScope')
    TypeName        = HeapIndex(Heap.STRING)
    TypeNamespace   = HeapIndex(Heap.STRING)

    class Meta:
        code = 0x01


class TypeDef(Table):
    Flags         = FixedInt(4, flag_type=TypeAttributes)
    TypeName      = HeapIndex(Heap.STRING)
    TypeNamespace = HeapIndex(Heap.STRING)
    Extends       = CodedRef('TypeDefOrRef')
    FieldList     = RowRange('Field')
    MethodList    = RowRange('MethodDef')

    class Meta:
        code = 0x02


class FieldPtr(Table):
    Field = TableRef('Field')

    class Meta:
        code = 0x03
        visible = False


class Field(Table):
    Flags     = FixedInt(2, flag_type=FieldAttributes)
    Name      = HeapIndex(Heap.STRING)
    Signature = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x04


class MethodPtr(Table):
    Method = TableRef('MethodDef')

    class Meta:
        code = 0x05
        visible = False


class MethodDef(Table):
    RVA       = FixedInt(4)
    ImplFlags = FixedInt(2, flag_type=MethodImplAttributes)
    Flags     = FixedInt(2, flag_type=MethodAttributes)
    Name      = HeapIndex(Heap.STRING)
    Signature = HeapIndex(Heap.BLOB)
    ParamList = RowRange('Param')

    class Meta:
        code = 0x06


class ParamPtr(Table):
    Param = TableRef('Param')

    class Meta:
        code = 0x07
        visible = False


class Param(Table):
    Flags    = FixedInt(2, flag_type=ParamAttributes)
    Sequence = FixedInt(2)
    Name     = HeapIndex(Heap.STRING)

    class Meta:
        code = 0x08


class InterfaceImpl(Table):
    Class     = TableRef('TypeDef')
    Interface = CodedRef('TypeDefOrRef')

    class Meta:
        code = 0x09


class MemberRef(Table):
    Class     = CodedRef('MemberRefParent')
    Name      = HeapIndex(Heap.STRING)
    Signature = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x0a


class Constant(Table):
    Type    = FixedInt(1)
    Padding = FixedInt(1)
    Parent  = CodedRef('HasConstant')
    Value   = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x0b


class CustomAttribute(Table):
    Parent = CodedRef('HasCustomAttribute')
    Type   = CodedRef('CustomAttributeType')
    Value  = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x0c


class FieldMarshal(Table):
    Parent     = CodedRef('HasFieldMarshal')
    NativeType = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x0d


class DeclSecurity(Table):
    Action        = FixedInt(2)
    Parent        = CodedRef('HasDeclSecurity')
    PermissionSet = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x0e


class ClassLayout(Table):
    PackingSize = FixedInt(2)
    ClassSize   = FixedInt(4)
    Parent      = TableRef('TypeDef')

    class Meta:
        code = 0x0f


class FieldLayout(Table):
    Offset = FixedInt(4)
    Field  = TableRef('Field')

    class Meta:
        code = 0x10


class StandAloneSig(Table):
    Signature = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x11


class EventMap(Table):
    Parent    = TableRef('TypeDef')
    EventList = RowRange('Event')

    class Meta:
        code = 0x12


class EventPtr(Table):
    Event = TableRef('Event')

    class Meta:
        code = 0x13
        visible = False


class Event(Table):
    EventFlags = FixedInt(2, flag_type=EventAttributes)
    Name       = HeapIndex(Heap.STRING)
    EventType  = CodedRef('TypeDefOrRef')

    class Meta:
        code = 0x14


class PropertyMap(Table):
    Parent       = TableRef('TypeDef')
    PropertyList = RowRange('Property')

    class Meta:
        code = 0x15


class PropertyPtr(Table):
    Property = TableRef('Property')

    class Meta:
        code = 0x16
        visible = False


class Property(Table):
    Flags = FixedInt(2, flag_type=PropertyAttributes)
    Name  = HeapIndex(Heap.STRING)
    Type  = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x17


class MethodSemantics(Table):
    Semantics   = FixedInt(2, flag_type=MethodSemanticsAttributes)
    Method      = TableRef('MethodDef')
    Association = CodedRef('HasSemantics')

    class Meta:
        code = 0x18


class MethodImpl(Table):
    Class             = TableRef('TypeDef')
    MethodBody        = CodedRef('MethodDefOrRef')
    MethodDeclaration = CodedRef('MethodDefOrRef')

    class Meta:
        code = 0x19


class ModuleRef(Table):
    Name = HeapIndex(Heap.STRING)

    class Meta:
        code = 0x1a


class TypeSpec(Table):
    Signature = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x1b


class ImplMap(Table):
    MappingFlags    = FixedInt(2, flag_type=PInvokeAttributes)
    MemberForwarded = CodedRef('MemberForwarded')
    ImportName      = HeapIndex(Heap.STRING)
    ImportScope     = TableRef('ModuleRef')

    class Meta:
        code = 0x1c


class FieldRVA(Table):
    RVA   = FixedInt(4)
    Field = TableRef('Field')

    class Meta:
        code = 0x1d


class ENCLog(Table):
    Token    = FixedInt(4)
    FuncCode = FixedInt(4)

    class Meta:
        code = 0x1e
        visible = False


class ENCMap(Table):
    Token = FixedInt(4)

    class Meta:
        code = 0x1f
        visible = False


class Assembly(Table):
    HashAlgId      = FixedInt(4, flag_type=AssemblyHashAlgorithm)
    MajorVersion   = FixedInt(2)
    MinorVersion   = FixedInt(2)
    BuildNumber    = FixedInt(2)
    RevisionNumber = FixedInt(2)
    Flags          = FixedInt(4, flag_type=AssemblyFlags)
    PublicKey      = HeapIndex(Heap.BLOB)
    Name           = HeapIndex(Heap.STRING)
    Culture        = HeapIndex(Heap.STRING)

    class Meta:
        code = 0x20


class AssemblyProcessor(Table):
    Processor = FixedInt(4)

    class Meta:
        code = 0x21
        visible = False


class AssemblyOS(Table):
    OSPlatformID   = FixedInt(4)
    OSMajorVersion = FixedInt(4)
    OSMinorVersion = FixedInt(4)

    class Meta:
        code = 0x22
        visible = False


class AssemblyRef(Table):
    MajorVersion     = FixedInt(2)
    MinorVersion     = FixedInt(2)
    BuildNumber      = FixedInt(2)
    RevisionNumber   = FixedInt(2)
    Flags            = FixedInt(4, flag_type=AssemblyFlags)
    PublicKeyOrToken = HeapIndex(Heap.BLOB)
    Name             = HeapIndex(Heap.STRING)
    Culture          = HeapIndex(Heap.STRING)
    HashValue        = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x23


class AssemblyRefProcessor(Table):
    Processor   = FixedInt(4)
    AssemblyRef = TableRef('AssemblyRef')

    class Meta:
        code = 0x24
        visible = False


class AssemblyRefOS(Table):
    OSPlatformID   = FixedInt(4)
    OSMajorVersion = FixedInt(4)
    OSMinorVersion = FixedInt(4)
    AssemblyRef    = TableRef('AssemblyRef')

    class Meta:
        code = 0x25
        visible = False


class File(Table):
    Flags     = FixedInt(4, flag_type=FileAttributes)
    Name      = HeapIndex(Heap.STRING)
    HashValue = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x26


class ExportedType(Table):
    Flags          = FixedInt(4, flag_type=TypeAttributes)
    TypeDefId      = FixedInt(4)
    TypeName       = HeapIndex(Heap.STRING)
    TypeNamespace  = HeapIndex(Heap.STRING)
    Implementation = CodedRef('Implementation')

    class Meta:
        code = 0x27


class ManifestResource(Table):
    Offset         = FixedInt(4)
    Flags          = FixedInt(4, flag_type=ManifestResourceAttributes)
    Name           = HeapIndex(Heap.STRING)
    Implementation = CodedRef('Implementation')

    class Meta:
        code = 0x28


class NestedClass(Table):
    NestedClass    = TableRef('TypeDef')
    EnclosingClass = TableRef('TypeDef')

    class Meta:
        code = 0x29


class GenericParam(Table):
    Number = FixedInt(2)
    Flags  = FixedInt(2, flag_type=GenericParamAttributes)
    Owner  = CodedRef('TypeOrMethodDef')
    Name   = HeapIndex(Heap.STRING)

    class Meta:
        code = 0x2a


class MethodSpec(Table):
    Method        = CodedRef('MethodDefOrRef')
    Instantiation = HeapIndex(Heap.BLOB)

    class Meta:
        code = 0x2b


class GenericParamConstraint(Table):
    Owner      = TableRef('GenericParam')
    Constraint = CodedRef('TypeDefOrRef')

    class Meta:
        code = 0x2c
