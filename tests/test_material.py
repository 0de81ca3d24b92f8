import numpy as np
import pytest

from myocardium.material import HolzapfelOgden

PARAMS = dict(
    a=0.059, b=8.023, af=18.472, bf=16.026, as_=2.481, bs=11.12,
    afs=0.216, bfs=11.436, asn=0.1, bsn=2.0, anf=0.05, bnf=1.5,
)

F = np.array([[1.1, 0.05, 0.02], [0.03, 0.95, 0.04], [0.01, 0.02, 1.02]])


def _rotation(angle):
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


@pytest.fixture
def material():
    return HolzapfelOgden(**PARAMS)


def test_negative_parameter_is_rejected():
    with pytest.raises(ValueError, match="'as'"):
        HolzapfelOgden(as_=-1.0)


def test_non_positive_jacobian_is_rejected(material):
    with pytest.raises(ValueError):
        material.dev_stress(np.diag([1.0, 1.0, -1.0]))


def test_bad_shape_is_rejected(material):
    with pytest.raises(ValueError):
        material.sbar(np.eye(2))


def test_reference_state_is_stress_and_energy_free(material):
    assert np.allclose(material.dev_stress(np.eye(3)), 0.0)
    assert material.dev_strain_energy_density(np.eye(3)) == pytest.approx(0.0, abs=1e-12)


def test_reference_sbar_is_isotropic(material):
    assert np.allclose(material.sbar(np.eye(3)), PARAMS["a"] * np.eye(3))


def test_dev_stress_is_symmetric_and_traceless(material):
    s = material.dev_stress(F)
    assert np.allclose(s, s.T)
    assert np.isclose(s.diagonal().sum(), 0.0)


def test_energy_is_positive_when_deformed(material):
    assert material.dev_strain_energy_density(F) > 0.0


def test_volumetric_scaling_leaves_energy_unchanged(material):
    scaled = 1.2 * F
    assert material.dev_strain_energy_density(scaled) == pytest.approx(
        material.dev_strain_energy_density(F)
    )


def test_volumetric_scaling_divides_sbar_by_jacobian(material):
    scaled = 1.2 * F
    assert np.allclose(material.sbar(scaled), material.sbar(F) / 1.2**3)


def test_stress_is_objective(material):
    R = _rotation(0.7)
    assert np.allclose(material.dev_stress(R @ F), R @ material.dev_stress(F) @ R.T)
    assert material.dev_strain_energy_density(R @ F) == pytest.approx(
        material.dev_strain_energy_density(F)
    )


def test_tangent_has_minor_and_major_symmetry(material):
    c = material.dev_tangent(F)
    assert np.allclose(c, c.transpose(1, 0, 2, 3))
    assert np.allclose(c, c.transpose(0, 1, 3, 2))
    assert np.allclose(c, c.transpose(2, 3, 0, 1))


def test_tangent_contracted_with_identity_gives_stress(material):
    c = material.dev_tangent(F)
    assert np.allclose(np.einsum("ijkk->ij", c), -2.0 * material.dev_stress(F))


def test_cbar_has_major_symmetry(material):
    c = material.cbar(F)
    assert np.allclose(c, c.transpose(2, 3, 0, 1))


def test_fibre_in_compression_carries_no_load():
    compressed = np.diag([0.9, 1.0, 1.0])
    with_fibre = HolzapfelOgden(a=1.0, b=2.0, af=5.0, bf=3.0)
    without_fibre = HolzapfelOgden(a=1.0, b=2.0)
    assert with_fibre.dev_strain_energy_density(compressed) == pytest.approx(
        without_fibre.dev_strain_energy_density(compressed)
    )
    assert np.allclose(with_fibre.dev_stress(compressed), without_fibre.dev_stress(compressed))


def test_fibre_in_tension_adds_energy():
    stretched = np.diag([1.1, 1.0, 1.0])
    with_fibre = HolzapfelOgden(a=1.0, b=2.0, af=5.0, bf=3.0)
    without_fibre = HolzapfelOgden(a=1.0, b=2.0)
    assert with_fibre.dev_strain_energy_density(stretched) > without_fibre.dev_strain_energy_density(
        stretched
    )


def test_zero_exponent_branch_is_continuous():
    linear = HolzapfelOgden(a=1.0, af=2.0, as_=1.5, afs=0.3, asn=0.2, anf=0.1)
    nearly = HolzapfelOgden(
        a=1.0, b=1e-9, af=2.0, bf=1e-9, as_=1.5, bs=1e-9,
        afs=0.3, bfs=1e-9, asn=0.2, bsn=1e-9, anf=0.1, bnf=1e-9,
    )
    assert linear.dev_strain_energy_density(F) == pytest.approx(
        nearly.dev_strain_energy_density(F), rel=1e-6
    )


def test_rotating_body_and_axes_together_keeps_energy(material):
    R = _rotation(0.4)
    Q = _rotation(0.3)
    # Rotating the reference configuration and the material axes together.
    assert material.dev_strain_energy_density(F @ R.T, R @ Q) == pytest.approx(
        material.dev_strain_energy_density(F, Q)
    )


def test_zero_parameters_give_zero_stress():
    assert np.allclose(HolzapfelOgden().dev_stress(F), 0.0)