# cairoserde

Convert Python values to and from the flat sequences of field elements
(felts) that Cairo contracts use for calldata and return values. Felts are
plain Python `int`s in the range `[0, FIELD_PRIME)`.

Each Cairo type has a *serde* object, a subclass of
`cairoserde.core.CairoSerde`, with these methods:

- `serialize(value)` returns a list of felts.
- `deserialize(felts, offset=0)` reads a value that starts at `offset`.
- `serialized_size(value)` gives the number of felts the value takes.
- `is_dynamic()` tells whether that number depends on the value
  (`SERIALIZED_SIZE` is then `None`).

`cairoserde.core.to_felt(value)` turns an int, or a decimal or `0x`-prefixed
hex string, into a felt. The result is reduced modulo the field prime.

## Installation

```
pip install cairoserde
```

## Basic types

`cairoserde.primitives` provides `FeltSerde`, `BoolSerde`, `IntegerSerde(bits, signed)`,
`UnitSerde` and `TupleSerde(*items)`. It also provides ready-made instances:
`FELT`, `BOOL`, `UNIT`, `U8` to `U128`, `USIZE`, and `I8` to `I128`, `ISIZE`.

```python
from cairoserde.primitives import FeltSerde, IntegerSerde, TupleSerde

u32 = IntegerSerde(32, False)
u32.serialize(123)                 # [123]
u32.deserialize([123, 99], 1)      # 99

pair = TupleSerde(FeltSerde(), u32)
pair.serialize((3, 128))           # [3, 128]
```

- A boolean reads back as true only when the felt is 1.
- Integers out of range for their width raise `SerializeError`. A signed
  value is written as its 64-bit unsigned image.
- On reading, an integer keeps the low bits of the felt that fit its width.
- The unit type takes no felts and reads back as `None`.

## Containers

`cairoserde.containers` provides the following:

```python
from cairoserde.containers import ArraySerde, OptionSerde, ResultSerde, Ok, Err
from cairoserde.primitives import FELT, U32

ArraySerde(U32).serialize([1, 2, 3])                 # [3, 1, 2, 3]
OptionSerde(U32).serialize(None)                     # [1]
OptionSerde(U32).serialize(7)                        # [0, 7]
ResultSerde(U32, FELT).deserialize([1, 2], 0)        # Err(value=2)
```

- `None` is the absent option. A present unit value reads back as `()`.
- Results are written as `Ok(value)` or `Err(value)`.
- `ArrayLegacySerde` handles Cairo 0 arrays, which carry no length prefix.
  When reading, the length is taken from the felt just before `offset`, and
  the result is a `CairoArrayLegacy`. An offset past the end reads as an
  empty array.

## Larger types

- `cairoserde.u256.U256(low, high)` is a 256-bit unsigned integer stored as two
  128-bit halves.
  - It supports `+` (which wraps on overflow), `-` (which raises
    `OverflowError` on underflow), `|`, ordering, `int()` and `str()`.
  - `from_str` parses decimal text. `from_felts` builds a value from two
    felts and raises `ValueOutOfRangeError` if either exceeds 128 bits.
  - `to_bytes_be`, `to_bytes_le`, `from_bytes_be` and `from_bytes_le` work
    on 32 bytes.
  - `U256Serde`, also available as `U256_SERDE`, writes the low half first.
- `cairoserde.byte_array.ByteArray` holds a Cairo string.
  - `ByteArray.from_string(text)` packs the UTF-8 bytes into `Bytes31` words
    plus a pending word.
  - `to_string()` decodes them again and raises `UnicodeDecodeError` on
    invalid UTF-8.
  - Use `ByteArraySerde` (`BYTE_ARRAY`) and `Bytes31Serde` (`BYTES31`) to
    serialize them. A felt too large for 31 bytes raises
    `Bytes31OutOfRangeError`.
- `cairoserde.starknet` provides `ContractAddress`, `ClassHash` and
  `EthAddress`. Each wraps a single felt and is serialized by
  `FeltWrapperSerde(wrapper)`, or by the instances `CONTRACT_ADDRESS`,
  `CLASS_HASH` and `ETH_ADDRESS`.
- `cairoserde.non_zero.NonZero(value)` wraps an integer, `U256` or
  `ContractAddress` that is not zero.
  - Building one from zero raises `ZeroedNonZeroError`, while
    `NonZero.new` returns `None` instead.
  - `NonZeroSerde(inner)` serializes it exactly as the inner value.

## Hex strings

`cairoserde.serde_hex` reads and writes integers as strings:

- `from_str_hex_or_dec(text, bits, signed)` and `deserialize_from_hex` read
  `0x`-prefixed hex or decimal text into a 64- or 128-bit integer.
- `deserialize_from_hex_seq` does the same for a list of strings.
- `serialize_as_hex` and `serialize_as_hex_seq` format values as `0x…`.
- `deserialize_from_hex_tuple(texts, parsers)` gives each string to its own
  parser. If a parser fails, it is tried again on the decimal form of the
  hex digits.

## Structs and enums

`cairoserde.derive.StructSerde(cls, fields)` serializes the named attributes
of `cls` in the order given. `fields` can be a mapping or a sequence of
`(name, serde)` pairs. Values are rebuilt by calling `cls(**fields)`.

`EnumSerde(variants)` writes the variant index followed by that variant's
fields. Each variant is given as a `StructSerde`, a `(cls, fields)` pair, or
a bare class. An unknown index raises `DeserializeError("Invalid variant Id")`.

```python
from dataclasses import dataclass
from cairoserde.derive import StructSerde
from cairoserde.primitives import FELT, U32

@dataclass
class Point:
    x: int
    y: int

StructSerde(Point, {"x": U32, "y": FELT}).serialize(Point(1, 2))   # [1, 2]
```

## Contract calls

`cairoserde.call.FCall(call_raw, provider, return_type)` pairs a
`FunctionCall` with a provider and a return serde.

- It targets `BlockTag.PENDING` unless changed with `with_block_id`.
- `await raw_call()` returns the felts the provider answered with.
- `await call()` decodes them from offset 0.
- Failures inside the provider are raised as `ProviderError`.

## What this package does not do

No provider is included. There is no JSON-RPC client and no connection to a
Starknet node. `FCall` works with any object that has an async
`call(request, block_id)` method returning felts. You must supply that
object yourself.

## Errors

Every failure raised by the serdes is a subclass of
`cairoserde.errors.CairoSerdeError`:

- `DeserializeError`
- `SerializeError`
- `InvalidTypeStringError`
- `ProviderError`
- `Bytes31OutOfRangeError`
- `ZeroedNonZeroError`
- `cairoserde.u256.ValueOutOfRangeError`

A buffer that is too short, for example, raises `DeserializeError`.