"""
Signature tables for the three 4-dimensional algebras.

A signature fixes how the three non-scalar basis units multiply:

- Elliptic (Hamilton quaternions):
    e1² = e2² = e3² = -1
    e2e3 = +e1, e3e1 = +e2, e1e2 = +e3
- Split (Cockle/Klein split-quaternions):
    e1² = -1, e2² = e3² = +1
    e2e3 = -e1, e3e1 = +e2, e1e2 = +e3
- Hyperbolic (Macfarlane/Minkowski hyperbolic quaternions):
    e1² = e2² = e3² = +1
    e2e3 = +e1, e3e1 = +e2, e1e2 = +e3

Distinct units anti-commute in all three: ej ei = -ei ej.

Component ordering:
[s, e1, e2, e3]
 0   1   2   3
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional, Tuple
import torch

from ..core.constants import (
    SIGNATURE_ELLIPTIC,
    SIGNATURE_SPLIT,
    SIGNATURE_HYPERBOLIC,
)


# Component indices for each basis element
IDX_S = 0   # Scalar
IDX_E1 = 1  # e₁
IDX_E2 = 2  # e₂
IDX_E3 = 3  # e₃

VECTOR_MASK = [IDX_E1, IDX_E2, IDX_E3]

# Conjugation sign table: scalar kept, units negated
CONJUGATION_SIGNS = torch.tensor([1, -1, -1, -1], dtype=torch.float64)

# (i, j, k) with ei * ej = c_k * ek in cyclic order
_CYCLIC_TRIPLES = ((IDX_E2, IDX_E3, IDX_E1), (IDX_E3, IDX_E1, IDX_E2), (IDX_E1, IDX_E2, IDX_E3))


@dataclass(frozen=True)
class Signature:
    """
    Constant description of one algebra.

    Attributes:
        name: Canonical signature name
        squares: (e1², e2², e3²), each +1 or -1
        cyclic: (c1, c2, c3) with e2e3 = c1·e1, e3e1 = c2·e2, e1e2 = c3·e3
        symbols: Display symbols of the three units
        pair_sign: Sign s of the paired product identity, or None if the
                   algebra has no Cayley-Dickson form
        associative: Whether (xy)z = x(yz) for all values
        aliases: Historical names resolving to this signature
    """

    name: str
    squares: Tuple[int, int, int]
    cyclic: Tuple[int, int, int]
    symbols: Tuple[str, str, str]
    pair_sign: Optional[int]
    associative: bool
    aliases: Tuple[str, ...] = ()

    @property
    def is_definite(self) -> bool:
        """True when the quadrance is positive definite."""
        return all(s < 0 for s in self.squares)

    @property
    def has_paired_form(self) -> bool:
        return self.pair_sign is not None

    def structure_constants(self) -> Tuple[Tuple[int, int, int, int], ...]:
        """
        Multiplication table as (i, j, sign, k) entries meaning ei * ej = sign * ek.

        Index 0 is the scalar unit.
        """
        products = []
        # Row/column 0: the scalar commutes with everything
        for j in range(4):
            products.append((IDX_S, j, 1, j))
        for i in VECTOR_MASK:
            products.append((i, IDX_S, 1, i))
        # Diagonal: unit squares
        for i in VECTOR_MASK:
            products.append((i, i, self.squares[i - 1], IDX_S))
        # Off-diagonal: cyclic products and their anti-commuting reverses
        for i, j, k in _CYCLIC_TRIPLES:
            c = self.cyclic[k - 1]
            products.append((i, j, c, k))
            products.append((j, i, -c, k))
        return tuple(products)

    def __repr__(self) -> str:
        return f"Signature({self.name!r}, squares={self.squares})"


ELLIPTIC = Signature(
    name=SIGNATURE_ELLIPTIC,
    squares=(-1, -1, -1),
    cyclic=(1, 1, 1),
    symbols=('i', 'j', 'k'),
    pair_sign=-1,
    associative=True,
    aliases=('hamilton',),
)

SPLIT = Signature(
    name=SIGNATURE_SPLIT,
    squares=(-1, 1, 1),
    cyclic=(-1, 1, 1),
    symbols=('i', 't', 'u'),
    pair_sign=1,
    associative=True,
    aliases=('cockle', 'klein'),
)

HYPERBOLIC = Signature(
    name=SIGNATURE_HYPERBOLIC,
    squares=(1, 1, 1),
    cyclic=(1, 1, 1),
    symbols=('s', 't', 'u'),
    pair_sign=None,
    associative=False,
    aliases=('macfarlane', 'minkowski'),
)

SIGNATURES: Tuple[Signature, ...] = (ELLIPTIC, SPLIT, HYPERBOLIC)

_BY_NAME: Dict[str, Signature] = {}
for _sig in SIGNATURES:
    _BY_NAME[_sig.name] = _sig
    for _alias in _sig.aliases:
        _BY_NAME[_alias] = _sig


def get_signature(signature) -> Signature:
    """
    Resolve a signature from a Signature instance or a (case-insensitive) name.

    Accepts the canonical names ('elliptic', 'split', 'hyperbolic') and the
    historical algebra names ('hamilton', 'cockle', 'klein', 'macfarlane',
    'minkowski').
    """
    if isinstance(signature, Signature):
        return signature
    key = str(signature).lower()
    if key not in _BY_NAME:
        raise ValueError(f"Unknown signature: {signature}. Available: {sorted(_BY_NAME)}")
    return _BY_NAME[key]


@lru_cache(maxsize=None)
def _build_cayley_table(signature: Signature) -> Tuple[torch.Tensor, torch.Tensor]:
    signs = torch.zeros(4, 4, dtype=torch.float64)
    indices = torch.zeros(4, 4, dtype=torch.long)
    for i, j, s, k in signature.structure_constants():
        signs[i, j] = s
        indices[i, j] = k
    return signs, indices


def cayley_table(
    signature: Signature,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float64,
) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Build the Cayley table of a signature.

    The Cayley table defines: e_i * e_j = sign * e_k

    Returns:
        signs: (4, 4) tensor of signs (+1 or -1)
        indices: (4, 4) tensor of result indices
    """
    signs, indices = _build_cayley_table(signature)
    # Cached tensors are never handed out directly
    signs = signs.to(dtype=dtype).clone()
    indices = indices.clone()
    if device is not None:
        signs = signs.to(device)
        indices = indices.to(device)
    return signs, indices
