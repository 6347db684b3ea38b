"""
WebIDL to MoonBit Code Generator Package

Reads WebIDL definitions (as the JSON AST produced by webidl2) and generates:
  1. Opaque MoonBit handle types for interfaces and dictionaries
  2. Capability traits whose default methods call typed FFI declarations
  3. Dictionary constructors with optional parameters and default values
"""

from .types import (
    IDLType, Generic, DefaultValue, ExtendedAttribute,
    Argument, Attribute, Operation, Constant, Constructor, Field, OtherMember,
    Definition, Interface, Mixin, CallbackInterface, Dictionary, Namespace,
    Enumeration, Callback, Typedef, Includes, OtherDefinition,
    Diagnostic, MergeResult, DefinitionResult, GenerationResult,
)
from .parser import ASTParser, ASTError
from .type_mapper import TypeMapper
from .naming import to_snake_case, escape_keyword, to_identifier
from .default_values import DefaultValueMapper
from .merger import merge_partials, resolve_includes
from .interface_generator import InterfaceGenerator
from .dictionary_generator import DictionaryGenerator
from .common_generator import CommonGenerator
from .moonbit_generator import MoonBitGenerator

__all__ = [
    'IDLType', 'Generic', 'DefaultValue', 'ExtendedAttribute',
    'Argument', 'Attribute', 'Operation', 'Constant', 'Constructor', 'Field', 'OtherMember',
    'Definition', 'Interface', 'Mixin', 'CallbackInterface', 'Dictionary', 'Namespace',
    'Enumeration', 'Callback', 'Typedef', 'Includes', 'OtherDefinition',
    'Diagnostic', 'MergeResult', 'DefinitionResult', 'GenerationResult',
    'ASTParser', 'ASTError', 'TypeMapper', 'DefaultValueMapper',
    'to_snake_case', 'escape_keyword', 'to_identifier',
    'merge_partials', 'resolve_includes',
    'InterfaceGenerator', 'DictionaryGenerator', 'CommonGenerator',
    'MoonBitGenerator',
]
