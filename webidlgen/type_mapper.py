"""Type mapping from WebIDL types to MoonBit types"""

from typing import Optional
from .types import IDLType, Generic


# Placeholder for shapes that cannot cross the FFI boundary as typed values
DYNAMIC = "JsValue"

INTEGER_TYPES = frozenset([
    'byte',
    'octet',
    'short',
    'unsigned short',
    'long',
    'unsigned long',
    'long long',
    'unsigned long long',
])

FLOAT_TYPES = frozenset([
    'float',
    'unrestricted float',
    'double',
    'unrestricted double',
])

STRING_TYPES = frozenset([
    'DOMString',
    'USVString',
    'ByteString',
])


class TypeMapper:
    """Maps WebIDL types to MoonBit semantic and FFI types"""

    PRIMITIVES = {
        'boolean': 'Bool',
        'byte': 'Int',
        'octet': 'Int',
        'short': 'Int',
        'unsigned short': 'Int',
        'long': 'Int',
        'unsigned long': 'Int',
        'long long': 'Int64',
        'unsigned long long': 'Int64',
        'float': 'Double',
        'double': 'Double',
        'unrestricted float': 'Double',
        'unrestricted double': 'Double',
        'bigint': 'BigInt',
        'DOMString': 'String',
        'USVString': 'String',
        'ByteString': 'String',
        'undefined': 'Unit',
        'void': 'Unit',
        'any': DYNAMIC,
        'object': DYNAMIC,
        'symbol': DYNAMIC,
    }

    @classmethod
    def to_moonbit(cls, idl_type: IDLType) -> str:
        """Convert IDL type to the MoonBit type used in public signatures"""
        if idl_type.union:
            return DYNAMIC

        # Absence is a runtime sentinel, not an Option wrapper
        if idl_type.nullable:
            return cls.to_moonbit(cls.non_nullable(idl_type))

        if idl_type.generic == Generic.SEQUENCE:
            if idl_type.element_type is None:
                return f'Array[{DYNAMIC}]'
            return f'Array[{cls.to_moonbit(idl_type.element_type)}]'

        if idl_type.generic in (Generic.PROMISE, Generic.RECORD):
            return DYNAMIC

        return cls._named(idl_type.base_name)

    @classmethod
    def to_ffi(cls, idl_type: IDLType) -> str:
        """Convert IDL type to the MoonBit type used in FFI declarations"""
        if idl_type.union:
            return DYNAMIC

        if idl_type.nullable:
            return cls.to_ffi(cls.non_nullable(idl_type))

        # FFI declarations cannot express containers or async results
        if idl_type.generic != Generic.NONE:
            return DYNAMIC

        return cls._named(idl_type.base_name)

    @classmethod
    def _named(cls, base_name: str) -> str:
        if not base_name:
            return DYNAMIC
        # Interface and dictionary names pass through as opaque handles
        return cls.PRIMITIVES.get(base_name, base_name)

    @staticmethod
    def non_nullable(idl_type: IDLType) -> IDLType:
        """Copy of the type with nullability stripped"""
        return IDLType(
            base_name=idl_type.base_name,
            union=idl_type.union,
            members=idl_type.members,
            generic=idl_type.generic,
            element_type=idl_type.element_type,
        )

    @classmethod
    def plain_name(cls, idl_type: Optional[IDLType]) -> Optional[str]:
        """Base name of a non-union, non-generic type, else None"""
        if idl_type is None or idl_type.union or idl_type.generic != Generic.NONE:
            return None
        return idl_type.base_name

    @classmethod
    def is_boolean(cls, idl_type: Optional[IDLType]) -> bool:
        return cls.plain_name(idl_type) == 'boolean'

    @classmethod
    def is_string(cls, idl_type: Optional[IDLType]) -> bool:
        return cls.plain_name(idl_type) in STRING_TYPES

    @classmethod
    def is_integer(cls, idl_type: Optional[IDLType]) -> bool:
        return cls.plain_name(idl_type) in INTEGER_TYPES

    @classmethod
    def is_float(cls, idl_type: Optional[IDLType]) -> bool:
        return cls.plain_name(idl_type) in FLOAT_TYPES
