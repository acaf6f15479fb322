"""Shared fixtures for chibihash tests."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from pathlib import Path

import msgpack
import pytest

DATA_DIR = Path(__file__).parent / "data"


@dataclass(slots=True, frozen=True)
class ReferenceVector:
    data: bytes
    seed: int    # u64
    digest: int  # u64 expected hash64(data, seed)


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def load_reference_vectors(data_dir: Path = DATA_DIR) -> list[ReferenceVector]:
    """Read vectors.bin after checking it against manifest.json."""
    with open(data_dir / "manifest.json") as f:
        manifest = json.load(f)
    assert manifest["version"] == "1.0"
    path = data_dir / "vectors.bin"
    assert _sha256(path) == manifest["files"]["vectors.bin"], "vectors.bin checksum mismatch"

    # vectors: list[[bin data, u64 seed, u64 digest]]
    with open(path, "rb") as f:
        raw = msgpack.unpackb(f.read(), raw=False)
    return [
        ReferenceVector(data=bytes(data), seed=seed, digest=digest)
        for data, seed, digest in raw
    ]


@pytest.fixture(scope="session")
def vectors():
    """Load the reference vectors once for all tests."""
    return load_reference_vectors()
