# vibespace

Helpers for two jobs. One is moving binary payloads around as text. The other
is packing balanced ternary digits (trits) into bytes. Everything lives in the
`vibespace.ternary` module.

## Installation

```
pip install vibespace
```

## Encoding binary data

`DataEncoding` is a string enum with three members:

- `BINARY` (`"binary"`): the data passes through unchanged.
- `BASE64` (`"base64"`): standard, padded base64.
- `HEX` (`"hex"`): lower-case hex.

Any function that takes an encoding accepts either an enum member or its
string value.

```python
from vibespace.ternary import DataEncoding, encode_binary_data, decode_binary_data

encoded = encode_binary_data(b"\x01\x02\x03", DataEncoding.BASE64)   # b"AQID"
decode_binary_data(encoded, "base64")                                # b"\x01\x02\x03"
```

`EncodingError` is a subclass of `ValueError`. These functions raise it in two
cases:

- The encoding is not one of the three above.
- The input is malformed base64 or hex.

When decoding base64, carriage returns and line feeds are removed first. Any
other character outside the base64 alphabet is an error.

### BinaryData records

`create_binary_data(data, encoding, format)` encodes the data and returns a
`BinaryData` dataclass. It has three fields:

- `data`: the encoded bytes.
- `encoding`: always given back as a `DataEncoding` member, even when a string
  was passed in.
- `format`: a free-form label, such as a MIME type.

```python
from vibespace.ternary import DataEncoding, create_binary_data

record = create_binary_data(b"\x01\x02\x03", DataEncoding.HEX, "application/octet-stream")
record.data      # b"010203"
record.encoding  # DataEncoding.HEX
record.format    # "application/octet-stream"
```

## Packing balanced ternary

`ternary_to_bytes(ternary)` packs a sequence of trits into bytes:

- Each trit (-1, 0 or 1) takes two bits, so four trits fit in one byte
  (`TRITS_PER_BYTE`).
- The first trit goes in the lowest bits.
- The bit patterns are `-1 -> 00`, `0 -> 01` and `1 -> 10`.
- Any other value is stored as 0.

`bytes_to_ternary(data, num_trits)` reads `num_trits` trits back as a list of
ints. The packed form does not record its own length, so you pass the count.

```python
from vibespace.ternary import ternary_to_bytes, bytes_to_ternary

packed = ternary_to_bytes([1, 0, -1, 1, 0, -1])   # b"\x86\x01"
bytes_to_ternary(packed, 6)                       # [1, 0, -1, 1, 0, -1]
```

When unpacking:

- The unused pattern `11` reads as 0.
- Positions past the end of the data read as 0.
- Unused slots inside the last byte hold zero bits, which read as -1. For
  example, `bytes_to_ternary(b"\x06", 5)` gives `[1, 0, -1, -1, 0]`.
- Empty data or a count of 0 gives an empty list.
- A negative count raises `ValueError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```