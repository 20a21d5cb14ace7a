"""Proof-related records passed to verification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class PoStProof:
    """A proof of spacetime with its registered proof type."""

    post_proof: int = 0
    proof_bytes: bytes = b""


@dataclass
class SectorInfo:
    """A sealed sector: seal proof type, number and sealed CID (CommR)."""

    seal_proof: int = 0
    sector_number: int = 0
    sealed_cid: Any = None


@dataclass
class ExtendedSectorInfo:
    """Sector information that may also carry a sector key CID."""

    seal_proof: int = 0
    sector_number: int = 0
    sector_key: Optional[Any] = None
    sealed_cid: Any = None


@dataclass
class WinningPoStVerifyInfo:
    """Information needed to verify a winning PoSt."""

    randomness: bytes = b""
    proofs: List[PoStProof] = field(default_factory=list)
    challenged_sectors: List[SectorInfo] = field(default_factory=list)
    prover: int = 0


@dataclass
class WindowPoStVerifyInfo:
    """Information needed to verify a window PoSt submitted to a miner actor."""

    randomness: bytes = b""
    proofs: List[PoStProof] = field(default_factory=list)
    challenged_sectors: List[SectorInfo] = field(default_factory=list)
    prover: int = 0


@dataclass
class SealVerifyInfo:
    """Information needed to verify a seal proof.

    ``miner`` and ``number`` together identify the sector.
    """

    seal_proof: int = 0
    miner: int = 0
    number: int = 0
    deal_ids: List[int] = field(default_factory=list)
    randomness: bytes = b""
    interactive_randomness: bytes = b""
    proof: bytes = b""
    sealed_cid: Any = None
    unsealed_cid: Any = None


@dataclass
class AggregateSealVerifyInfo:
    """Per-sector information within an aggregate seal proof."""

    number: int = 0
    randomness: bytes = b""
    interactive_randomness: bytes = b""
    sealed_cid: Any = None
    unsealed_cid: Any = None


@dataclass
class AggregateSealVerifyProofAndInfos:
    """An aggregate seal proof together with the sectors it covers."""

    miner: int = 0
    seal_proof: int = 0
    aggregate_proof: int = 0
    proof: bytes = b""
    infos: List[AggregateSealVerifyInfo] = field(default_factory=list)


@dataclass
class ReplicaUpdateInfo:
    """Information needed to verify a replica update proof."""

    update_proof_type: int = 0
    old_sealed_sector_cid: Any = None
    new_sealed_sector_cid: Any = None
    new_unsealed_sector_cid: Any = None
    proof: bytes = b""