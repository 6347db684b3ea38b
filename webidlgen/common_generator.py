"""Common Generator - generates the file header and shared prelude for MoonBit bindings"""

from .type_mapper import DYNAMIC


class CommonGenerator:
    """Generates text shared by every generated MoonBit file"""

    # MoonBit types the type mapper produces that cross the boundary unchanged
    IDENTITY_TYPES = ["Bool", "Int", "Int64", "Double", "String", "BigInt"]

    def generate_file_header(self) -> str:
        """Header placed at the top of every generated bindings file"""
        lines = [
            "///| Generated WebIDL bindings",
            "///| DO NOT EDIT - auto-generated from WebIDL",
            "",
        ]
        return "\n".join(lines)

    def generate_prelude(self) -> str:
        """Generate js_value.mbt with the JsValue type and the conversion traits.

        Every generated interface implements TJsValue, and every trait
        default method reaches the FFI through `to_js`. Sequence values cross
        the boundary as JsValue, so Array gets both `to_js` and the
        `from_js` entry point the generated impls pipe results through.
        """
        lines = [
            "///| Shared JavaScript value bridge",
            "///| DO NOT EDIT - auto-generated from WebIDL",
            "",
            "#external",
            f"pub type {DYNAMIC}",
            "",
            "pub trait TJsValue {",
            f"  to_js(Self) -> {DYNAMIC}",
            "}",
            "",
            "pub trait TFromJs {",
            f"  from_js({DYNAMIC}) -> Self",
            "}",
            "",
            f'pub impl TJsValue for {DYNAMIC} with to_js(self : {DYNAMIC}) -> {DYNAMIC} = "%identity"',
            "",
        ]
        for type_name in self.IDENTITY_TYPES:
            lines.append(
                f'pub impl TJsValue for {type_name} with to_js(self : {type_name}) -> {DYNAMIC} = "%identity"'
            )
            lines.append("")
        lines.extend([
            f'pub impl[T : TJsValue] TJsValue for Array[T] with to_js(self : Array[T]) -> {DYNAMIC} = "%identity"',
            "",
            f'pub impl[T] TFromJs for Array[T] with from_js(value : {DYNAMIC}) -> Array[T] = "%identity"',
            "",
        ])
        return "\n".join(lines)
