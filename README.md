# myocardium

A Holzapfel-Ogden uncoupled hyperelastic material model of passive cardiac
muscle. At a material point it computes the deviatoric Cauchy stress, the
deviatoric spatial tangent stiffness and the deviatoric strain energy density.
You supply the deformation gradient `F` and the local material axes `Q`.
The columns of `Q` are the fiber, sheet and normal directions in the
reference configuration. If `Q` is omitted or `None`, the global axes are used.

The strain energy has these terms:

- an isotropic term in `I1` (parameters `a`, `b`);
- fiber and sheet terms in `I4f`, `I4s` (parameters `af`, `bf`, `as_`, `bs`).
  These terms act only in tension, so invariant values below one are clamped
  to one;
- fiber–sheet, sheet–normal and normal–fiber coupling terms in `I8fs`,
  `I8sn`, `I8nf` (parameters `afs`, `bfs`, `asn`, `bsn`, `anf`, `bnf`).

The `a` parameters have stress units and the `b` parameters have no
dimension. Every parameter defaults to `0.0`. A negative or NaN value raises
`ValueError`. The sheet stiffness is named `as_` because `as` is a Python
keyword. When a `b` parameter is zero, the strain energy uses the matching
quadratic limit.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

```python
import numpy as np
from myocardium.material import HolzapfelOgden

mat = HolzapfelOgden(a=0.059, b=8.023, af=18.472, bf=16.026,
                     as_=2.481, bs=11.12, afs=0.216, bfs=11.436)

F = np.array([[1.1, 0.0, 0.0],
              [0.0, 0.95, 0.0],
              [0.0, 0.0, 0.96]])
Q = np.eye(3)            # fiber, sheet, normal axes as columns

sigma = mat.dev_stress(F, Q)                  # 3x3 deviatoric Cauchy stress
c = mat.dev_tangent(F, Q)                     # 3x3x3x3 spatial tangent
W = mat.dev_strain_energy_density(F, Q)       # float
```

`sbar(F, Q)` returns the fictitious stress before the deviatoric projection.
`cbar(F, Q)` returns the fictitious elasticity tensor before the projection,
and it is not divided by `J`.

`F` and `Q` must be 3x3. `F` must have a positive determinant. If either
condition fails, the methods raise `ValueError`. `HolzapfelOgden` is a frozen
dataclass, so its parameters cannot be changed after construction.

### Creating materials by name

`myocardium.registry` maps names to material classes. The Holzapfel-Ogden
model is registered as `"Holzapfel_Ogden"`:

```python
from myocardium.registry import create_material, material_names, register_material

print(material_names())          # ('Holzapfel_Ogden',)
mat = create_material("Holzapfel_Ogden", a=1.0, b=2.0)
```

- `register_material(name, cls)` adds a callable under a new name. An empty
  or non-string name raises `ValueError`, and so does a name that is already
  taken. A `cls` that is not callable raises `TypeError`.
- `create_material(name, **kwargs)` calls the registered class with the
  keyword arguments. An unknown name raises `KeyError`.
- `material_names()` returns the registered names as a sorted tuple.

### Tensor helpers

`myocardium.tensors` holds the tensor operations the model uses. Second-order
tensors are `(3, 3)` arrays and fourth-order tensors are `(3, 3, 3, 3)`
arrays. An input of the wrong shape raises `ValueError`.

- `dyad(a)`: the outer product `a ⊗ a` of a 3-vector with itself.
- `sym(a)`: the symmetric part `(A + Aᵀ) / 2`.
- `dev(a)`: the deviatoric part `A - tr(A)/3 I`.
- `dyad1s(a, b=None)`: `A ⊗ A`, or `A ⊗ B + B ⊗ A` when `b` is given.
- `dyad4s(a)`: `(A_ik A_jl + A_il A_jk) / 2`. For the identity, this is the
  symmetric fourth-order identity.
- `ddots(a, b)`: the symmetrised double contraction `A : B + B : A`.
- `trace4(a)`: the sum of `A_iijj`.
- `IDENTITY`: the 3x3 identity matrix.

## What this package does not do

This package evaluates the constitutive model at a single material point.
It does not include:

- a finite-element solver;
- any reader for model input files;
- the volumetric part of the response;
- a command-line program.

The name registry only maps names to classes. Something else must call it.

## Running the tests

```
pytest
```