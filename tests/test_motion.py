import numpy as np
import pytest

from chamber.integrators import create_integrator, WallReflectIntegrator
from chamber.molecules import Molecule, Species, envelope_radius


def test_envelope_radii():
    assert envelope_radius(Species.H2) == 14.0
    assert envelope_radius(Species.CL2) == 22.0
    assert envelope_radius(Species.HCL) == 18.0


def test_free_motion_scales_with_speed():
    integ = create_integrator("reflect", 800, 500)
    m = Molecule(Species.H2, pos=(100.0, 100.0), vel=(0.5, -0.25))
    integ.advance([m], speed=2.0)
    assert np.allclose(m.pos, [101.0, 99.5])
    assert np.allclose(m.vel, [0.5, -0.25])


def test_left_wall_reflects_and_clamps():
    integ = WallReflectIntegrator(800, 500)
    m = Molecule(Species.H2, pos=(5.0, 100.0), vel=(-1.0, 0.3))
    integ.advance([m], speed=1.0)
    assert m.pos[0] == m.radius
    assert m.vel[0] == 1.0
    # the other axis is untouched
    assert m.vel[1] == 0.3


def test_bottom_right_corner_reflects_both_axes():
    integ = WallReflectIntegrator(200, 100)
    m = Molecule(Species.CL2, pos=(177.5, 77.5), vel=(1.0, 1.0))
    integ.advance([m], speed=1.0)
    assert np.allclose(m.pos, [200 - 22.0, 100 - 22.0])
    assert np.allclose(m.vel, [-1.0, -1.0])


def test_consumed_molecule_does_not_move():
    integ = WallReflectIntegrator(800, 500)
    m = Molecule(Species.CL2, pos=(300.0, 300.0), vel=(1.0, 1.0))
    m.consume()
    integ.advance([m], speed=1.5)
    assert np.allclose(m.pos, [300.0, 300.0])


def test_products_cannot_be_consumed():
    m = Molecule(Species.HCL, pos=(10.0, 10.0))
    with pytest.raises(ValueError):
        m.consume()


def test_spawn_within_margin():
    rng = np.random.default_rng(5)
    for _ in range(50):
        m = Molecule.spawn(Species.H2, 800, 500, 60, rng)
        assert 60 <= m.pos[0] <= 740
        assert 60 <= m.pos[1] <= 440
        assert np.all(np.abs(m.vel) <= 1.0)


def test_unknown_integrator():
    with pytest.raises(ValueError):
        create_integrator("verlet", 800, 500)
