"""Second- and fourth-order tensor operations on 3x3 arrays.

Second-order tensors are ``(3, 3)`` arrays and fourth-order tensors are
``(3, 3, 3, 3)`` arrays indexed ``[i, j, k, l]``.
"""

from __future__ import annotations

import numpy as np

IDENTITY = np.eye(3)


def _second(a) -> np.ndarray:
    arr = np.asarray(a, dtype=float)
    if arr.shape != (3, 3):
        raise ValueError(f"expected a 3x3 tensor, got shape {arr.shape}")
    return arr


def _fourth(a) -> np.ndarray:
    arr = np.asarray(a, dtype=float)
    if arr.shape != (3, 3, 3, 3):
        raise ValueError(f"expected a 3x3x3x3 tensor, got shape {arr.shape}")
    return arr


def dyad(a) -> np.ndarray:
    """Return the symmetric outer product ``a ⊗ a`` of a 3-vector."""
    v = np.asarray(a, dtype=float)
    if v.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {v.shape}")
    return np.outer(v, v)


def sym(a) -> np.ndarray:
    """Return the symmetric part ``(A + Aᵀ) / 2``."""
    m = _second(a)
    return 0.5 * (m + m.T)


def dev(a) -> np.ndarray:
    """Return the deviatoric part ``A - tr(A)/3 I``."""
    m = _second(a)
    return m - (float(m.diagonal().sum()) / 3.0) * IDENTITY


def dyad1s(a, b=None) -> np.ndarray:
    """Return ``A ⊗ A``, or ``A ⊗ B + B ⊗ A`` when ``b`` is given."""
    first = _second(a)
    if b is None:
        return np.einsum("ij,kl->ijkl", first, first)
    second = _second(b)
    return np.einsum("ij,kl->ijkl", first, second) + np.einsum(
        "ij,kl->ijkl", second, first
    )


def dyad4s(a) -> np.ndarray:
    """Return ``(A_ik A_jl + A_il A_jk) / 2``; for ``I`` the symmetric identity."""
    m = _second(a)
    return 0.5 * (np.einsum("ik,jl->ijkl", m, m) + np.einsum("il,jk->ijkl", m, m))


def ddots(a, b) -> np.ndarray:
    """Return the symmetrised double contraction ``A : B + B : A``."""
    first = _fourth(a)
    second = _fourth(b)
    return np.einsum("ijkl,klmn->ijmn", first, second) + np.einsum(
        "ijkl,klmn->ijmn", second, first
    )


def trace4(a) -> float:
    """Return ``I : A : I``, the sum of ``A_iijj``."""
    return float(np.einsum("iijj->", _fourth(a)))