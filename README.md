# stellarkit

Building blocks for working with Stellar data from Python:

- **Key encoding**: Stellar's base32 "strkey" format with a CRC16 checksum
  (`stellarkit.key_encoding`: `encode_stellar_key`, `decode_stellar_key`, `crc16`,
  plus version-byte constants such as `ED25519_PUBLIC_KEY_VERSION_BYTE`).
- **Base32**: unpadded encoding and lenient decoding (`stellarkit.base32.encode`,
  `stellarkit.base32.decode`).
- **Amounts**: lumens, stroops and decimal amount strings
  (`stellarkit.amount`: `into_stroop_amount`, `LumenAmount`, `StroopAmount`,
  `STROOPS_PER_LUMEN`).
- **Binary values**: fixed-length data given raw or as hex
  (`stellarkit.binary`: `Binary`, `Hex`, `as_binary`).
- **Percent encoding**: `stellarkit.percent_encode.percent_encode`.
- **XDR**: big-endian read/write streams (`stellarkit.xdr.streams`), codecs for
  primitive types (`stellarkit.xdr.codec`) and length-limited opaques, strings
  and arrays (`stellarkit.xdr.compound`).

Every error is raised as an exception. SDK errors derive from
`stellarkit.errors.StellarSdkError`; XDR decoding errors derive from
`stellarkit.xdr.streams.DecodeError`. Errors of the same type with the same
fields compare equal.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Amounts (one lumen is 10,000,000 stroops; strings take at most seven decimals):

```python
from stellarkit.amount import LumenAmount, StroopAmount, into_stroop_amount

into_stroop_amount("14.2324426", allow_zero=True)      # 142324426
into_stroop_amount(StroopAmount(5), allow_zero=False)  # 5
LumenAmount(1.5).to_stroops()                          # StroopAmount(value=15000000)
```

Malformed strings raise `InvalidAmountString`. Values beyond a signed 64-bit
integer raise `AmountOverflow`. Zero raises `AmountNonPositive` unless
`allow_zero` is true. A negative `StroopAmount` raises `AmountNegative` when
`allow_zero` is true and `AmountNonPositive` when it is not.

Key encoding:

```python
from stellarkit.key_encoding import (
    ED25519_PUBLIC_KEY_BYTE_LENGTH,
    ED25519_PUBLIC_KEY_VERSION_BYTE,
    decode_stellar_key,
    encode_stellar_key,
)

raw = bytes(ED25519_PUBLIC_KEY_BYTE_LENGTH)
encoded = encode_stellar_key(raw, ED25519_PUBLIC_KEY_VERSION_BYTE)  # starts with "G"
assert decode_stellar_key(encoded, ED25519_PUBLIC_KEY_VERSION_BYTE, 32) == raw
```

`decode_stellar_key` checks the encoding, length, checksum and version byte, in
that order. A failed check raises the matching `InvalidStellarKey...` error.

Binary values and percent encoding:

```python
from stellarkit.binary import Hex, as_binary
from stellarkit.percent_encode import percent_encode

as_binary(Hex("00ff"), 2)   # b"\x00\xff"
percent_encode("a b+c")     # "a%20b%2Bc"
```

XDR round trips:

```python
from stellarkit.xdr.codec import Optional, Uint32
from stellarkit.xdr.compound import LimitedString, LimitedVarArray

codec = Optional(Uint32())
assert codec.from_xdr(codec.to_xdr(7)) == 7
assert codec.from_base64_xdr(codec.to_base64_xdr(None)) is None

name = LimitedString(b"hello", max_length=64)
assert LimitedString.from_xdr(name.to_xdr(), 64) == name

numbers = LimitedVarArray(Uint32(), [1, 2, 3], max_length=10)
assert list(LimitedVarArray.from_xdr(numbers.to_xdr(), Uint32(), 10)) == [1, 2, 3]
```

`from_xdr` requires the data to hold exactly one value. Trailing bytes raise
`TypeEndsTooEarly`.

## What this package does not do

The package has no client for the Horizon HTTP API. It cannot fetch fee
statistics or accounts, and it cannot submit transactions. It does not model
network passphrases or their ids. It has no transaction, operation or signing
types. It provides the encoding layers such features would be built on.