#!/usr/bin/env python3
"""Basic token generation with rndstring.

Builds a few generators, prints tokens, and shows the pool health.

Usage:
    pip install -e .
    python examples/python/basic.py
"""

from rndstring import (
    get_pool,
    join,
    list_generator_names,
    new_alphabet_generator,
    new_generator,
    random_api_token,
    random_password,
    __version__,
)

print(f"rndstring v{__version__}")

names = sorted(list_generator_names())
print(f"\n{len(names)} generators registered:")
for name in names:
    print(f"  - {name:<24} {new_generator(name, 12).generate()}")

# Byte encodings take a byte count; everything else a character count
print(f"\nhex(16):     {new_generator('hex', 16).generate()}")
print(f"hexstr(16):  {new_generator('hexstr', 16).generate()}")

pin = new_alphabet_generator(6, "0123456789")
print(f"\nPIN:         {pin.generate()}")
print(f"Licence key: {join('-', *(new_generator('ucase&digits', 5) for _ in range(4)))}")
print(f"Password:    {random_password()}")
print(f"API token:   {random_api_token()}")

report = get_pool().health_report()
print(f"\nPool: {report['output_bytes']} bytes in {report['fills']} fills "
      f"({report['fallback_fills']} from fallback)")
for s in report["sources"]:
    status = "✓" if s["available"] else "✗"
    print(f"  {status} {s['role']:<8} {s['name']}: {s['fills']} fills, {s['bytes']} bytes")
