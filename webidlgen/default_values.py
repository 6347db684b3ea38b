"""Default value literals for optional parameters and dictionary fields"""

from typing import Optional
from .types import IDLType, DefaultValue
from .type_mapper import TypeMapper

# MoonBit literal for an absent value
ABSENT = 'None'


class DefaultValueMapper:
    """Maps IDL default descriptors and types to MoonBit literals"""

    @classmethod
    def to_literal(cls, idl_type: Optional[IDLType], default: Optional[DefaultValue] = None) -> str:
        """Literal for an explicit default, else the zero value of the type"""
        if default is not None:
            return cls.from_default(default)
        return cls.zero_value(idl_type)

    @classmethod
    def from_default(cls, default: DefaultValue) -> str:
        if default.type == 'boolean':
            return 'true' if default.value else 'false'
        if default.type == 'number':
            return str(default.value)
        if default.type == 'string':
            # Raw source text, quotes and backslashes are not escaped
            return f'"{default.value}"'
        # null, sequence ([]), dictionary ({}), Infinity, NaN
        return ABSENT

    @classmethod
    def zero_value(cls, idl_type: Optional[IDLType]) -> str:
        if idl_type is None:
            return ABSENT
        if idl_type.nullable:
            idl_type = TypeMapper.non_nullable(idl_type)

        if TypeMapper.is_boolean(idl_type):
            return 'false'
        if TypeMapper.is_string(idl_type):
            return '""'
        if TypeMapper.is_integer(idl_type):
            return '0'
        if TypeMapper.is_float(idl_type):
            return '0.0'
        return ABSENT
