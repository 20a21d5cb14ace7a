# statetypes

Plain Python types shared by the actors and runtime of a blockchain virtual
machine. The package has no runtime dependencies.

## What is inside

- `statetypes.cbor`: a minimal CBOR header codec. `MajorType` lists the eight
  major types; `encode_header` and `write_header` produce the shortest header
  for a value; `read_header` reads one back; `read_exact` reads a fixed number
  of bytes and raises `EOFError` if the stream ends early.
- `statetypes.crypto`: `SigType` (`SECP256K1`, `BLS`, `UNKNOWN`),
  `sig_type_name`, the randomness `DomainSeparationTag` values, and the frozen
  `Signature` data class. A signature encodes to CBOR as a byte string of the
  type byte followed by the data (`write_cbor`, `to_cbor`, `read_cbor`) and to
  a raw binary form (`to_bytes`, `from_bytes`). Both decoders reject empty
  input and input longer than 200 bytes; `read_cbor` rejects an unknown type,
  while `from_bytes` maps it to `SigType.UNKNOWN`.
- `statetypes.exitcode`: `ExitCode`, an `int` subclass carrying the reserved
  system codes (`OK`, `SYS_ERR_SENDER_INVALID`, …) and the common actor codes
  (`ERR_ILLEGAL_ARGUMENT`, `ERR_NOT_FOUND`, `ERR_FORBIDDEN`,
  `ERR_INSUFFICIENT_FUNDS`, `ERR_ILLEGAL_STATE`, `ERR_SERIALIZATION`).
  `ExitCode.wrap` builds an `ExitCodeError` holding the code, a message and an
  optional cause. `unwrap` finds the first exit code along an error's cause
  chain, and `error_is` tests whether a chain contains a given error or code;
  an outer `ExitCodeError` shadows codes further down.
- `statetypes.network`: the `NetworkVersion` enumeration.
- `statetypes.rt`: the `VMActor` abstract base class (`exports`, `code`,
  `state`), `is_singleton_actor` and `LogLevel`.
- `statetypes.dline`: `DeadlineInfo` and `new_info` for window
  proof-of-spacetime deadline arithmetic, including `next_not_elapsed`.
- `statetypes.proof`: data classes describing proofs and the information
  needed to verify them.

## Examples

Signatures:

```python
import io
from statetypes.crypto import Signature, SigType

sig = Signature(SigType.BLS, b"\x05\x06\x07\x08")
encoded = sig.to_cbor()
decoded = Signature.read_cbor(io.BytesIO(encoded))
assert decoded.equals(sig)
```

Exit codes attached to errors:

```python
from statetypes.exitcode import ExitCode, error_is, unwrap

try:
    raise ExitCode.ERR_FORBIDDEN.wrap("caller not allowed: %s", "f01234")
except Exception as err:
    assert unwrap(err, ExitCode.OK) == ExitCode.ERR_FORBIDDEN
    assert error_is(err, ExitCode.ERR_FORBIDDEN)
    assert str(err) == "caller not allowed: f01234"
```

Deadlines:

```python
from statetypes.dline import new_info

info = new_info(50000, 0, 50000, 48, 2880, 60, 20, 70)
assert info.is_open()
assert info.next_open() == 50060
```

## What it does not do

The package has no content identifier (CID) type: fields that hold CIDs in
`statetypes.proof` accept any object. The proof records are plain data
classes with no CBOR encoding; the only CBOR encoding provided is that of
`Signature`. There is no actor manifest, no state store and no command-line
tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```