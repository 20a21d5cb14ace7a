"""Signatures, exit codes, deadlines, proof records and network versions for a blockchain actor runtime."""

__version__ = "0.1.0"
__all__ = ["cbor", "crypto", "dline", "exitcode", "network", "proof", "rt"]