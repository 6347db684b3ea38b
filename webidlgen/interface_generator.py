"""Interface Generator - generates MoonBit traits and FFI glue for IDL interfaces"""

from typing import Mapping, Optional
from .types import Definition, Interface, Attribute, Operation, Constructor, Argument
from .type_mapper import TypeMapper, DYNAMIC
from .default_values import DefaultValueMapper
from .naming import to_identifier
from .merger import inheritance_chain


class InterfaceGenerator:
    """Generates an opaque handle type, a capability trait and its FFI-backed impl"""

    def __init__(self, lookup: Optional[Mapping[str, Definition]] = None, prefix: str = "webapi"):
        self.lookup = lookup or {}
        self.prefix = prefix

    def generate(self, iface: Interface) -> str:
        name = iface.name
        trait = f"T{name}"
        members = [m for m in iface.members if not isinstance(m, Constructor)]

        lines = [f"///| {name} interface", ""]
        lines.extend(self._handle_type(name))
        lines.extend(self._trait(iface, trait, members))
        lines.extend(self._trait_impls(iface, trait))

        for member in members:
            if isinstance(member, Attribute):
                lines.extend(self._attribute(name, trait, member))
            elif isinstance(member, Operation) and member.name:
                lines.extend(self._operation(name, trait, member))
            # Constants and iterable/maplike/setlike declarations are not generated

        return "\n".join(lines)

    def _module(self, iface_name: str) -> str:
        return f"{self.prefix}_{iface_name}"

    def _handle_type(self, name: str) -> list[str]:
        return [
            "#external",
            f"pub type {name}",
            "",
            f'pub impl TJsValue for {name} with to_js(self : {name}) -> JsValue = "%identity"',
            "",
        ]

    def _trait(self, iface: Interface, trait: str, members: list) -> list[str]:
        """Trait with one abstract signature per accessor and named operation"""
        # An undefined parent has no trait to extend
        chain = inheritance_chain(iface, self.lookup)
        supertrait = f"T{chain[0]}" if chain else "TJsValue"
        lines = [f"pub trait {trait}: {supertrait} {{"]

        for member in members:
            if isinstance(member, Attribute):
                attr = to_identifier(member.name)
                ret = self._attribute_type(member)
                lines.append(f"  {attr}(self : Self) -> {ret} = _")
                if not member.readonly:
                    lines.append(f"  set_{attr}(self : Self, value : {ret}) -> Unit = _")
            elif isinstance(member, Operation) and member.name:
                method = to_identifier(member.name)
                params = self._params(member.arguments)
                ret = self._return_type(member)
                lines.append(f"  {method}({params}) -> {ret} = _")

        lines.append("}")
        lines.append("")
        return lines

    def _trait_impls(self, iface: Interface, trait: str) -> list[str]:
        """Bind the trait, and every inherited trait, to the handle type"""
        lines = [f"pub impl {trait} for {iface.name}"]
        for ancestor in inheritance_chain(iface, self.lookup):
            lines.append(f"pub impl T{ancestor} for {iface.name}")
        lines.append("")
        return lines

    def _attribute(self, iface_name: str, trait: str, attr: Attribute) -> list[str]:
        """FFI getter/setter and the trait methods delegating to them"""
        attr_name = to_identifier(attr.name)
        ret = self._attribute_type(attr)
        ffi_type = TypeMapper.to_ffi(attr.idl_type) if attr.idl_type else DYNAMIC
        module = self._module(iface_name)

        ffi_name = f"{attr_name}_ffi"
        lines = [
            f'fn {ffi_name}(obj : JsValue) -> {ffi_type} = "{module}" "{attr.name}"',
            "",
            f"impl {trait} with {attr_name}(self : Self) -> {ret} {{",
            f"  {self._from_ffi(f'{ffi_name}(self.to_js())', ffi_type, ret)}",
            "}",
            "",
        ]

        if not attr.readonly:
            setter_ffi = f"set_{attr_name}_ffi"
            lines.extend([
                f'fn {setter_ffi}(obj : JsValue, value : {ffi_type}) -> Unit = "{module}" "set_{attr.name}"',
                "",
                f"impl {trait} with set_{attr_name}(self : Self, value : {ret}) -> Unit {{",
                f"  {setter_ffi}(self.to_js(), {self._to_ffi('value', ffi_type, ret)})",
                "}",
                "",
            ])

        return lines

    def _operation(self, iface_name: str, trait: str, op: Operation) -> list[str]:
        """FFI function for an operation and the trait method delegating to it"""
        method = to_identifier(op.name)
        ret = self._return_type(op)
        ffi_ret = TypeMapper.to_ffi(op.idl_type) if op.idl_type else "Unit"
        ffi_name = f"{method}_ffi"

        # FFI parameters are always required
        ffi_params = ["obj : JsValue"]
        call_args = ["self.to_js()"]
        for arg in op.arguments:
            param = to_identifier(arg.name)
            semantic = TypeMapper.to_moonbit(arg.idl_type)
            foreign = TypeMapper.to_ffi(arg.idl_type)
            ffi_params.append(f"{param} : {foreign}")

            value = param
            if arg.optional:
                value = f"{param}.or({DefaultValueMapper.to_literal(arg.idl_type, arg.default)})"
            call_args.append(self._to_ffi(value, foreign, semantic))

        call = f"{ffi_name}({', '.join(call_args)})"
        return [
            f'fn {ffi_name}({", ".join(ffi_params)}) -> {ffi_ret} = "{self._module(iface_name)}" "{op.name}"',
            "",
            f"impl {trait} with {method}({self._params(op.arguments)}) -> {ret} {{",
            f"  {self._from_ffi(call, ffi_ret, ret)}",
            "}",
            "",
        ]

    def _params(self, arguments: list[Argument]) -> str:
        """Public parameter list; optional arguments keep their `?` marker"""
        params = ["self : Self"]
        for arg in arguments:
            marker = "?" if arg.optional else ""
            params.append(f"{to_identifier(arg.name)}{marker} : {TypeMapper.to_moonbit(arg.idl_type)}")
        return ", ".join(params)

    def _attribute_type(self, attr: Attribute) -> str:
        return TypeMapper.to_moonbit(attr.idl_type) if attr.idl_type else DYNAMIC

    def _return_type(self, op: Operation) -> str:
        return TypeMapper.to_moonbit(op.idl_type) if op.idl_type else "Unit"

    @staticmethod
    def _from_ffi(expr: str, ffi_type: str, moonbit_type: str) -> str:
        """Wrap a raw FFI result into the public type when the two differ"""
        if ffi_type != moonbit_type:
            return f"{expr} |> {moonbit_type}::from_js"
        return expr

    @staticmethod
    def _to_ffi(expr: str, ffi_type: str, moonbit_type: str) -> str:
        """Unwrap a public value before it crosses the FFI boundary"""
        if ffi_type != moonbit_type:
            return f"{expr}.to_js()"
        return expr
