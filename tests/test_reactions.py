import numpy as np

from chamber.molecules import Molecule, Species
from chamber.reactions import ReactionEngine, is_reactive_pair


def mk(species, pos, vel=(0.0, 0.0)):
    return Molecule(species, pos=np.array(pos, dtype=float), vel=np.array(vel, dtype=float))


def engine_for(reactants, seed=0):
    return ReactionEngine(reactants, [], rng=np.random.default_rng(seed))


def test_reactive_pair_detection():
    h2 = mk(Species.H2, (0, 0))
    cl2 = mk(Species.CL2, (0, 0))
    assert is_reactive_pair(h2, cl2)
    assert is_reactive_pair(cl2, h2)
    assert not is_reactive_pair(h2, mk(Species.H2, (0, 0)))
    assert not is_reactive_pair(cl2, mk(Species.HCL, (0, 0)))


def test_contact_bounce_swaps_velocities_without_reaction():
    a = mk(Species.H2, (100.0, 100.0), vel=(1.0, 0.0))
    b = mk(Species.CL2, (130.0, 100.0), vel=(-1.0, 0.5))
    eng = engine_for([a, b])
    assert eng.step(probability=0.0) == 0
    assert np.allclose(a.vel, [-1.0, 0.5])
    assert np.allclose(b.vel, [1.0, 0.0])
    assert not a.consumed and not b.consumed
    assert eng.products == []


def test_near_contact_counts_as_encounter():
    # 36 is the sum of radii; 1.15 * 36 = 41.4
    a = mk(Species.H2, (100.0, 100.0), vel=(1.0, 0.0))
    b = mk(Species.CL2, (140.0, 100.0), vel=(0.0, 1.0))
    engine_for([a, b]).step(probability=0.0)
    assert np.allclose(a.vel, [0.0, 1.0])


def test_out_of_reach_pair_untouched():
    a = mk(Species.H2, (100.0, 100.0), vel=(1.0, 0.0))
    b = mk(Species.CL2, (145.0, 100.0), vel=(0.0, 1.0))
    engine_for([a, b]).step(probability=1.0)
    assert np.allclose(a.vel, [1.0, 0.0])
    assert not a.consumed


def test_same_species_pair_is_not_bounced():
    a = mk(Species.CL2, (100.0, 100.0), vel=(1.0, 0.0))
    b = mk(Species.CL2, (120.0, 100.0), vel=(-1.0, 0.0))
    engine_for([a, b]).step(probability=1.0)
    assert np.allclose(a.vel, [1.0, 0.0])
    assert np.allclose(b.vel, [-1.0, 0.0])


def test_reaction_spawns_two_products_near_midpoint():
    a = mk(Species.H2, (100.0, 100.0))
    b = mk(Species.CL2, (130.0, 100.0))
    eng = engine_for([a, b], seed=3)
    assert eng.step(probability=1.0, frame=7, temperature_c=60.0) == 1
    assert a.consumed and b.consumed
    assert len(eng.products) == 2
    for p in eng.products:
        assert p.species is Species.HCL
        assert np.all(np.abs(p.pos - [115.0, 100.0]) <= 10.0)
        assert np.all(np.abs(p.vel) <= 1.0)
    ev = eng.events[0]
    assert ev["frame"] == 7
    assert ev["reactants"] == [a.uid, b.uid]
    assert ev["temperature"] == 60.0


def test_consumed_molecule_not_reused_in_same_pass():
    a = mk(Species.H2, (100.0, 100.0), vel=(0.1, 0.0))
    b = mk(Species.CL2, (130.0, 100.0), vel=(0.2, 0.0))
    c = mk(Species.CL2, (100.0, 130.0), vel=(0.3, 0.0))
    eng = engine_for([a, b, c])
    assert eng.step(probability=1.0) == 1
    assert a.consumed and b.consumed
    assert not c.consumed
    assert np.allclose(c.vel, [0.3, 0.0])
    assert len(eng.products) == 2


def test_consumed_inner_partner_skipped_later():
    b = mk(Species.CL2, (130.0, 100.0))
    a = mk(Species.H2, (100.0, 100.0))
    c = mk(Species.H2, (130.0, 130.0))
    eng = engine_for([b, a, c])
    assert eng.step(probability=1.0) == 1
    assert not c.consumed
