'''
Coded index schemes (ECMA-335 II.24.2.6).

The position in the list is the tag; None marks a tag that is reserved.
'''
from ..core import CodeScheme


TypeDefOrRef = CodeScheme('TypeDefOrRef', ['TypeDef', 'TypeRef', 'TypeSpec'])

HasConstant = CodeScheme('HasConstant', ['Field', 'Param', 'Property'])

HasCustomAttribute = CodeScheme('HasCustomAttribute', [
    'MethodDef',
    'Field',
    'TypeRef',
    'TypeDef',
    'Param',
    'InterfaceImpl',
    'MemberRef',
    'Module',
    'DeclSecurity',
    'Property',
    'Event',
    'StandAloneSig',
    'ModuleRef',
    'TypeSpec',
    'Assembly',
    'AssemblyRef',
    'File',
    'ExportedType',
    'ManifestResource',
    'GenericParam',
    'GenericParamConstraint',
    'MethodSpec',
], tag_bits=5)

HasFieldMarshal = CodeScheme('HasFieldMarshal', ['Field', 'Param'])

HasDeclSecurity = CodeScheme('HasDeclSecurity', ['TypeDef', 'MethodDef', 'Assembly'])

MemberRefParent = CodeScheme('MemberRefParent', ['TypeDef', 'TypeRef', 'ModuleRef', 'MethodDef', 'TypeSpec'])

HasSemantics = CodeScheme('HasSemantics', ['Event', 'Property'])

MethodDefOrRef = CodeScheme('MethodDefOrRef', ['MethodDef', 'MemberRef'])

MemberForwarded = CodeScheme('MemberForwarded', ['Field', 'MethodDef'])

Implementation = CodeScheme('Implementation', ['File', 'AssemblyRef', 'ExportedType'])

CustomAttributeType = CodeScheme('CustomAttributeType', [None, None, 'MethodDef', 'MemberRef', None])

ResolutionScope = CodeScheme('ResolutionScope', ['Module', 'ModuleRef', 'AssemblyRef', 'TypeRef'])

TypeOrMethodDef = CodeScheme('TypeOrMethodDef', ['TypeDef', 'MethodDef'])


SCHEMES = {
    _.name: _ for _ in (
        TypeDefOrRef,
        HasConstant,
        HasCustomAttribute,
        HasFieldMarshal,
        HasDeclSecurity,
        MemberRefParent,
        HasSemantics,
        MethodDefOrRef,
        MemberForwarded,
        Implementation,
        CustomAttributeType,
        ResolutionScope,
        TypeOrMethodDef,
    )
}
