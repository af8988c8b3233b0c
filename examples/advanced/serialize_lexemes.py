"""Cache lexemes to disk: JSON round-trip."""

from rs2ts import lexemize
from rs2ts.serialization import from_json, to_json

result = lexemize('fn main() {\n    println!("Hello, {}!", r#"Rust"#);\n}\n')

json_str = to_json(result)
restored = from_json(json_str)

print("Original == restored:", result == restored)
print("JSON length:", len(json_str), "chars")
