"""Holzapfel–Ogden uncoupled hyperelastic model of passive myocardium."""

from __future__ import annotations

from dataclasses import dataclass, fields
from math import exp

import numpy as np

from .tensors import IDENTITY, ddots, dev, dyad, dyad1s, dyad4s, sym, trace4


def _tr(m: np.ndarray) -> float:
    return float(m.diagonal().sum())


@dataclass(frozen=True)
class _Kinematics:
    J: float
    bbar: np.ndarray
    fxf: np.ndarray
    sxs: np.ndarray
    fxs_sym: np.ndarray
    sxn_sym: np.ndarray
    nxf_sym: np.ndarray
    I1: float
    I4f: float
    I4s: float
    I8fs: float
    I8sn: float
    I8nf: float


def _kinematics(F, Q) -> _Kinematics:
    F = np.asarray(F, dtype=float)
    if F.shape != (3, 3):
        raise ValueError(f"deformation gradient must be 3x3, got shape {F.shape}")
    Q = IDENTITY if Q is None else np.asarray(Q, dtype=float)
    if Q.shape != (3, 3):
        raise ValueError(f"local coordinate system must be 3x3, got shape {Q.shape}")

    J = float(np.linalg.det(F))
    if J <= 0.0:
        raise ValueError(f"deformation gradient must have a positive determinant, got {J}")

    Fbar = F * J ** (-1.0 / 3.0)
    bbar = Fbar @ Fbar.T
    Cbar = Fbar.T @ Fbar

    e10, e20, e30 = Q.T
    ft, st, nt = Fbar @ e10, Fbar @ e20, Fbar @ e30

    I4f = float(e10 @ Cbar @ e10)
    I4s = float(e20 @ Cbar @ e20)
    # Fibres and sheets only bear load in tension.
    return _Kinematics(
        J=J,
        bbar=bbar,
        fxf=dyad(ft),
        sxs=dyad(st),
        fxs_sym=sym(np.outer(ft, st)),
        sxn_sym=sym(np.outer(st, nt)),
        nxf_sym=sym(np.outer(nt, ft)),
        I1=_tr(bbar),
        I4f=max(I4f, 1.0),
        I4s=max(I4s, 1.0),
        I8fs=float(e10 @ Cbar @ e20),
        I8sn=float(e20 @ Cbar @ e30),
        I8nf=float(e30 @ Cbar @ e10),
    )


def _energy_term(a: float, b: float, x2: float) -> float:
    if b > 0.0:
        return (a / (2.0 * b)) * (exp(b * x2) - 1.0)
    return (a / 2.0) * x2


def _first_derivative(a: float, b: float, x: float) -> float:
    return a * x * exp(b * x * x)


def _second_derivative(a: float, b: float, x: float) -> float:
    return a * (2.0 * b * x * x + 1.0) * exp(b * x * x)


@dataclass(frozen=True)
class HolzapfelOgden:
    """Orthotropic myocardium model with fibre, sheet and coupling terms.

    ``a*`` parameters carry stress units, ``b*`` are dimensionless. The sheet
    stiffness is named ``as_`` because ``as`` is reserved. ``Q`` arguments are
    the local material axes as columns (fibre, sheet, normal); ``None`` means
    the global axes.
    """

    a: float = 0.0
    b: float = 0.0
    af: float = 0.0
    bf: float = 0.0
    as_: float = 0.0
    bs: float = 0.0
    afs: float = 0.0
    bfs: float = 0.0
    asn: float = 0.0
    bsn: float = 0.0
    anf: float = 0.0
    bnf: float = 0.0

    def __post_init__(self) -> None:
        for field in fields(self):
            value = float(getattr(self, field.name))
            if not value >= 0.0:
                name = field.name.rstrip("_")
                raise ValueError(f"parameter '{name}' must be >= 0, got {value}")
            object.__setattr__(self, field.name, value)

    def sbar(self, F, Q=None) -> np.ndarray:
        """Return the fictitious Cauchy stress ``tau_bar / J``."""
        k = _kinematics(F, Q)
        w1 = (self.a / 2.0) * exp(self.b * (k.I1 - 3.0))
        w4f = _first_derivative(self.af, self.bf, k.I4f - 1.0)
        w4s = _first_derivative(self.as_, self.bs, k.I4s - 1.0)
        w8fs = _first_derivative(self.afs, self.bfs, k.I8fs)
        w8sn = _first_derivative(self.asn, self.bsn, k.I8sn)
        w8nf = _first_derivative(self.anf, self.bnf, k.I8nf)

        coupling = 2.0 * w8fs * k.fxs_sym + 2.0 * w8sn * k.sxn_sym + 2.0 * w8nf * k.nxf_sym
        tbar = 2.0 * w1 * k.bbar + 2.0 * w4f * k.fxf + 2.0 * w4s * k.sxs + coupling
        return tbar / k.J

    def cbar(self, F, Q=None) -> np.ndarray:
        """Return the fictitious spatial elasticity tensor (not divided by ``J``)."""
        k = _kinematics(F, Q)
        w1 = self.a * self.b / 2.0 * exp(self.b * (k.I1 - 3.0))
        w4f = _second_derivative(self.af, self.bf, k.I4f - 1.0)
        w4s = _second_derivative(self.as_, self.bs, k.I4s - 1.0)
        w8fs = _second_derivative(self.afs, self.bfs, k.I8fs)
        w8sn = _second_derivative(self.asn, self.bsn, k.I8sn)
        w8nf = _second_derivative(self.anf, self.bnf, k.I8nf)

        coupling = (
            w8fs * dyad1s(2.0 * k.fxs_sym)
            + w8sn * dyad1s(2.0 * k.sxn_sym)
            + w8nf * dyad1s(2.0 * k.nxf_sym)
        )
        return (
            4.0 * w1 * dyad1s(k.bbar)
            + 4.0 * w4f * dyad1s(k.fxf)
            + 4.0 * w4s * dyad1s(k.sxs)
            + coupling
        )

    def dev_stress(self, F, Q=None) -> np.ndarray:
        """Return the deviatoric Cauchy stress."""
        return dev(self.sbar(F, Q))

    def dev_tangent(self, F, Q=None) -> np.ndarray:
        """Return the deviatoric spatial tangent stiffness."""
        J = float(np.linalg.det(np.asarray(F, dtype=float)))
        sbar = self.sbar(F, Q)
        siso = dev(sbar)

        ixi = dyad1s(IDENTITY)
        proj = dyad4s(IDENTITY) - ixi / 3.0
        siso_x_i = dyad1s(siso, IDENTITY)

        cbar_ji = self.cbar(F, Q) / J
        projected = cbar_ji - ddots(cbar_ji, ixi) / 3.0 + ixi * trace4(cbar_ji) / 9.0
        return projected + (2.0 / 3.0) * _tr(sbar) * proj - (2.0 / 3.0) * siso_x_i

    def dev_strain_energy_density(self, F, Q=None) -> float:
        """Return the deviatoric strain energy density."""
        k = _kinematics(F, Q)
        if self.b > 0.0:
            isotropic = (self.a / (2.0 * self.b)) * (exp(self.b * (k.I1 - 3.0)) - 1.0)
        else:
            isotropic = (self.a / 2.0) * (k.I1 - 3.0)
        return (
            isotropic
            + _energy_term(self.af, self.bf, (k.I4f - 1.0) ** 2)
            + _energy_term(self.as_, self.bs, (k.I4s - 1.0) ** 2)
            + _energy_term(self.afs, self.bfs, k.I8fs**2)
            + _energy_term(self.asn, self.bsn, k.I8sn**2)
            + _energy_term(self.anf, self.bnf, k.I8nf**2)
        )