import math

from chamber.config import ChamberConfig
from chamber.kinetics import kinetic_params, clamp_temperature


def test_speed_and_probability_monotonic_above_threshold():
    prev = kinetic_params(25.0, trap_mode=False)
    for t in range(26, 101):
        cur = kinetic_params(float(t), trap_mode=False)
        assert cur.speed >= prev.speed
        assert cur.probability >= prev.probability
        prev = cur


def test_probability_bounded_for_any_input():
    for t in [-1e9, -273.15, -40.0, 0.0, 5.0, 24.9, 25.0, 50.0, 100.0, 1e9,
              float('inf'), float('-inf'), float('nan')]:
        for trap in (False, True):
            p = kinetic_params(t, trap_mode=trap).probability
            assert 0.0 <= p <= 0.20


def test_reference_point_matches_arrhenius():
    params = kinetic_params(50.0)
    tk = 50.0 + 273.15
    assert math.isclose(params.speed, 1.0)
    assert math.isclose(params.probability, 0.30 * math.exp(-9000.0 / (8.314 * tk)))


def test_trap_mode_dampens_cold_regime():
    for t in (0.0, 5.0, 15.0, 24.0):
        normal = kinetic_params(t, trap_mode=False)
        trapped = kinetic_params(t, trap_mode=True)
        assert trapped.probability < normal.probability
        assert trapped.speed < normal.speed


def test_trap_mode_has_no_effect_when_warm():
    assert kinetic_params(40.0, trap_mode=True) == kinetic_params(40.0, trap_mode=False)


def test_cold_trap_probability_near_zero():
    p = kinetic_params(5.0, trap_mode=True).probability
    assert p < 5e-4


def test_probability_ceiling_applies():
    cfg = ChamberConfig(pre_exponential_factor=100.0)
    assert kinetic_params(80.0, config=cfg).probability == cfg.probability_ceiling


def test_speed_clamped_to_ceiling():
    # a very cold reference makes sqrt(T / T_ref) exceed the ceiling
    cfg = ChamberConfig(reference_temperature_c=-200.0)
    assert kinetic_params(100.0, config=cfg).speed == cfg.speed_ceiling


def test_clamp_temperature():
    assert clamp_temperature(-15.0) == 0.0
    assert clamp_temperature(250.0) == 100.0
    assert clamp_temperature(float('nan')) == 20.0
    assert clamp_temperature("hot") == 20.0
    assert clamp_temperature(37.5) == 37.5
