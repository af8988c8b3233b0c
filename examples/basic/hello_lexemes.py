"""Lexemize a line of Rust and print the debug listing."""

from rs2ts import lexemize

result = lexemize("let x: u8 = 4; // four")
print(result)
