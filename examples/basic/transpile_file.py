"""Transpile a Rust file and print the first line of TypeScript.

    echo "const FOUR: u8 = 4;" > four.rs
    python examples/basic/transpile_file.py four.rs
"""

import sys
from pathlib import Path

from rs2ts import transpile

if len(sys.argv) != 2:
    print(f"ERROR: Expected 1 arg, got {len(sys.argv) - 1}", file=sys.stderr)
    sys.exit(1)

try:
    contents = Path(sys.argv[1]).read_text(encoding="utf-8")
except OSError as e:
    print(f"ERROR: Problem reading the file:\n    {e}", file=sys.stderr)
    sys.exit(2)

result = transpile(contents)
print(result.main_lines[0] if result.main_lines else "")
