# uintcodec

This package helps with fixed-width unsigned integers of the kind found in
blockchain and cryptography code. A value of width `bits` is a plain Python
`int` and must satisfy `0 <= value < 2**bits`.

The package converts these values to and from limbs (little-endian 64-bit
words), byte strings and several wire formats. It needs nothing outside the
standard library.

## Installation

```
pip install uintcodec
```

Install the `test` extra to run the test suite, then run `pytest`:

```
pip install "uintcodec[test]"
pytest
```

## Modules

- `uintcodec.limbs`: width checks and conversions.
  - Width helpers: `nlimbs`, `nbytes` and `mask`, which is the mask of the bits in use in the top limb.
  - `from_int` checks that an `int` fits the width.
  - Limb conversions: `to_limbs`, `from_limbs`, and `overflowing_from_limbs`, which wraps the result and returns `(value, overflowed)`.
  - Byte conversions: `to_be_bytes` and `to_le_bytes` produce fixed-length bytes. `from_be_bytes` and `from_le_bytes` accept input of any length.
  - A value that is too wide raises `ValueTooLargeError`. A negative value raises `ValueNegativeError`. Both are subclasses of `ConversionError`, which is itself a `ValueError`. Each error carries `bits` and the wrapped value in `wrapped`.
- `uintcodec.sampling`: value generation.
  - `random_uint(bits, rng=None)` returns a uniformly random value. It uses the module-level `random` generator unless you pass a `random.Random`.
  - `uint_from_bytes_stream(data, bits)` builds a value from raw bytes. Short input is padded with zeros.
  - `size_hint(bits)` returns the `(lower, upper)` number of bytes such a stream uses.
- `uintcodec.rlp`: Recursive Length Prefix encoding.
  - `encode_uint` and `decode_uint` handle integers with leading zero bytes trimmed.
  - `encode_bits` and `decode_bits` handle fixed-width byte strings of exactly `nbytes(bits)` bytes.
  - `encoded_length` gives the size of `encode_uint`'s output without encoding.
  - Decoding expects exactly one string item and no trailing bytes. It rejects lists and non-canonical forms with `RlpError`.
- `uintcodec.serial`: text and binary forms.
  - `to_hex` writes a `0x`-prefixed, lower-case, zero-padded hex string.
  - `from_hex` accepts any case, an optional `0x`/`0X` prefix and any number of digits.
  - `to_bytes` and `from_bytes` use exactly `nbytes(bits)` big-endian bytes.
  - Errors raise `SerializationError`.
- `uintcodec.scale`: the SCALE codec.
  - `encode` and `decode` use a compact length prefix followed by the little-endian bytes.
  - `encode_compact`, `decode_compact` and `compact_size_hint` use the compact integer form.
  - Compact encoding accepts only widths below 536 bits (`COMPACT_BITS_LIMIT`). Wider widths raise `ValueError`.
  - Malformed input, non-canonical input, out-of-range input or trailing input raises `ScaleError`.
- `uintcodec.utils`: two small helpers.
  - `rem_up(a, b)` is `a % b`, except that it returns `b` where the remainder would be `0`.
  - `trim_end(seq, value)` drops trailing items that are equal to `value`.

## Example

```python
from uintcodec import limbs, rlp, serial, scale

value = limbs.from_int(1024, 256)

rlp.encode_uint(value)                 # b"\x82\x04\x00"
rlp.decode_uint(b"\x82\x04\x00", 256)  # 1024

serial.to_hex(15, 16)                  # "0x000f"
serial.from_hex("0xF", 16)             # 15

data = scale.encode_compact(value, 256)
scale.decode_compact(data, 256)        # 1024
```

## What it does not do

This is a library only. It has no command-line tool. It provides no
fixed-width integer type with arithmetic operators: values are plain `int`s,
and the width is passed to each function.