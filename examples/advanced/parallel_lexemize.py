"""Thread safe: lexemize 1000 sources in parallel."""

from concurrent.futures import ThreadPoolExecutor

from rs2ts import lexemize

sources = [f"const N{i}: u32 = {i};\n" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lexemize, sources))

print(f"Lexemized {len(results)} sources in parallel")
print("First source lexemes:", len(results[0]))
print("Last source lexemes:", len(results[-1]))
