#!/usr/bin/env python3
"""
WebIDL to MoonBit Binding Generator

Reads the JSON AST emitted by webidl2 and generates MoonBit bindings:
  1. An opaque #external type per interface and dictionary
  2. A capability trait per interface with FFI-backed default methods
  3. Constructor functions and a default factory per dictionary

Usage:
    python generate_bindings.py idl_json/dom.json --output-dir generated/
    python generate_bindings.py idl_json/dom.json idl_json/html.json --only Event --only EventTarget
"""

import sys
from pathlib import Path

# Add parent directory to path so webidlgen package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from webidlgen.cli import main


if __name__ == "__main__":
    sys.exit(main())
