'''
This module contains the flag values used by the columns of the metadata tables
(ECMA-335 II.23.1).

Note: the masks are members too, since a lot of these values are small enums
packed inside the flags.
'''
from enum import IntFlag


class TypeAttributes(IntFlag):
    VisibilityMask     = 0x00000007
    NotPublic          = 0x00000000
    Public             = 0x00000001
    NestedPublic       = 0x00000002
    NestedPrivate      = 0x00000003
    NestedFamily       = 0x00000004
    NestedAssembly     = 0x00000005
    NestedFamANDAssem  = 0x00000006
    NestedFamORAssem   = 0x00000007
    LayoutMask         = 0x00000018
    SequentialLayout   = 0x00000008
    ExplicitLayout     = 0x00000010
    Interface          = 0x00000020
    Abstract           = 0x00000080
    Sealed             = 0x00000100
    SpecialName        = 0x00000400
    Import             = 0x00001000
    Serializable       = 0x00002000
    WindowsRuntime     = 0x00004000
    StringFormatMask   = 0x00030000
    UnicodeClass       = 0x00010000
    AutoClass          = 0x00020000
    BeforeFieldInit    = 0x00100000
    RTSpecialName      = 0x00000800
    HasSecurity        = 0x00040000


class FieldAttributes(IntFlag):
    FieldAccessMask = 0x0007
    CompilerControlled = 0x0000
    Private         = 0x0001
    FamANDAssem     = 0x0002
    Assembly        = 0x0003
    Family          = 0x0004
    FamORAssem      = 0x0005
    Public          = 0x0006
    Static          = 0x0010
    InitOnly        = 0x0020
    Literal         = 0x0040
    NotSerialized   = 0x0080
    SpecialName     = 0x0200
    PinvokeImpl     = 0x2000
    RTSpecialName   = 0x0400
    HasFieldMarshal = 0x1000
    HasDefault      = 0x8000
    HasFieldRVA     = 0x0100


class MethodAttributes(IntFlag):
    MemberAccessMask = 0x0007
    CompilerControlled = 0x0000
    Private         = 0x0001
    FamANDAssem     = 0x0002
    Assem           = 0x0003
    Family          = 0x0004
    FamORAssem      = 0x0005
    Public          = 0x0006
    Static          = 0x0010
    Final           = 0x0020
    Virtual         = 0x0040
    HideBySig       = 0x0080
    NewSlot         = 0x0100
    Strict          = 0x0200
    Abstract        = 0x0400
    SpecialName     = 0x0800
    PInvokeImpl     = 0x2000
    UnmanagedExport = 0x0008
    RTSpecialName   = 0x1000
    HasSecurity     = 0x4000
    RequireSecObject = 0x8000


class MethodImplAttributes(IntFlag):
    CodeTypeMask   = 0x0003
    IL             = 0x0000
    Native         = 0x0001
    OPTIL          = 0x0002
    Runtime        = 0x0003
    Unmanaged      = 0x0004
    NoInlining     = 0x0008
    ForwardRef     = 0x0010
    Synchronized   = 0x0020
    NoOptimization = 0x0040
    PreserveSig    = 0x0080
    InternalCall   = 0x1000


class ParamAttributes(IntFlag):
    In              = 0x0001
    Out             = 0x0002
    Optional        = 0x0010
    HasDefault      = 0x1000
    HasFieldMarshal = 0x2000


class EventAttributes(IntFlag):
    SpecialName   = 0x0200
    RTSpecialName = 0x0400


class PropertyAttributes(IntFlag):
    SpecialName   = 0x0200
    RTSpecialName = 0x0400
    HasDefault    = 0x1000


class MethodSemanticsAttributes(IntFlag):
    Setter   = 0x0001
    Getter   = 0x0002
    Other    = 0x0004
    AddOn    = 0x0008
    RemoveOn = 0x0010
    Fire     = 0x0020


class PInvokeAttributes(IntFlag):
    NoMangle              = 0x0001
    CharSetMask           = 0x0006
    CharSetNotSpec        = 0x0000
    CharSetAnsi           = 0x0002
    CharSetUnicode        = 0x0004
    CharSetAuto           = 0x0006
    SupportsLastError     = 0x0040
    CallConvMask          = 0x0700
    CallConvPlatformapi   = 0x0100
    CallConvCdecl         = 0x0200
    CallConvStdcall       = 0x0300
    CallConvThiscall      = 0x0400
    CallConvFastcall      = 0x0500


class AssemblyFlags(IntFlag):
    PublicKey                  = 0x0001
    Retargetable               = 0x0100
    WindowsRuntime             = 0x0200
    DisableJITcompileOptimizer = 0x4000
    EnableJITcompileTracking   = 0x8000


class AssemblyHashAlgorithm(IntFlag):
    NONE     = 0x0000
    MD5      = 0x8003
    SHA1     = 0x8004


class FileAttributes(IntFlag):
    ContainsMetaData   = 0x0000
    ContainsNoMetaData = 0x0001


class ManifestResourceAttributes(IntFlag):
    VisibilityMask = 0x0007
    Public         = 0x0001
    Private        = 0x0002


class GenericParamAttributes(IntFlag):
    VarianceMask                   = 0x0003
    NONE                           = 0x0000
    Covariant                      = 0x0001
    Contravariant                  = 0x0002
    SpecialConstraintMask          = 0x001c
    ReferenceTypeConstraint        = 0x0004
    NotNullableValueTypeConstraint = 0x0008
    DefaultConstructorConstraint   = 0x0010
