"""Dictionary Generator - generates MoonBit constructors for IDL dictionaries"""

from typing import Mapping, Optional
from .types import Definition, Dictionary, Field
from .type_mapper import TypeMapper
from .default_values import DefaultValueMapper
from .naming import to_identifier
from .merger import inheritance_chain


class DictionaryGenerator:
    """Generates an opaque type, an FFI constructor, a smart constructor and a default factory"""

    def __init__(self, lookup: Optional[Mapping[str, Definition]] = None, prefix: str = "webapi"):
        self.lookup = lookup or {}
        self.prefix = prefix

    def generate(self, dictionary: Dictionary) -> str:
        name = dictionary.name
        func_name = to_identifier(name)
        ffi_name = f"{func_name}_ffi"
        fields = self.fields(dictionary)

        lines = [
            f"///| {name} dictionary",
            "",
            "#external",
            f"pub type {name}",
            "",
        ]

        ffi_params = []
        pub_params = []
        forward_args = []
        for f in fields:
            param = to_identifier(f.name)
            semantic = TypeMapper.to_moonbit(f.idl_type)
            foreign = TypeMapper.to_ffi(f.idl_type)

            ffi_params.append(f"{param} : {foreign}")

            marker = "" if f.required else "?"
            default = f" = {DefaultValueMapper.to_literal(f.idl_type, f.default)}" if f.default is not None else ""
            pub_params.append(f"{param}{marker} : {semantic}{default}")

            forward_args.append(f"{param}.to_js()" if foreign != semantic else param)

        lines.append(f'fn {ffi_name}({", ".join(ffi_params)}) -> {name} = "{self.prefix}_{name}" "new"')
        lines.append("")

        lines.append(f"pub fn {func_name}({', '.join(pub_params)}) -> {name} {{")
        lines.append(f"  {ffi_name}({', '.join(forward_args)})")
        lines.append("}")
        lines.append("")

        lines.append(f'pub fn default_{func_name}() -> {name} = "{self.prefix}_Dictionary" "empty"')
        lines.append("")

        return "\n".join(lines)

    def fields(self, dictionary: Dictionary) -> list[Field]:
        """Inherited fields (furthest ancestor first) followed by the dictionary's own"""
        ancestors = [
            self.lookup[n] for n in inheritance_chain(dictionary, self.lookup)
            if isinstance(self.lookup.get(n), Dictionary)
        ]
        fields = []
        for ancestor in reversed(ancestors):
            fields.extend(m for m in ancestor.members if isinstance(m, Field))
        fields.extend(m for m in dictionary.members if isinstance(m, Field))
        return fields
