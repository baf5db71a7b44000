import json

import pytest

from chamber.config import ChamberConfig, load_config


def test_defaults():
    cfg = ChamberConfig()
    assert cfg.activation_energy == 9000.0
    assert cfg.pre_exponential_factor == 0.30
    assert cfg.relax_iterations == 240


def test_unknown_key_rejected():
    with pytest.raises(ValueError):
        ChamberConfig(activation_energie=1.0)


def test_invalid_geometry_rejected():
    with pytest.raises(ValueError):
        ChamberConfig(width=0)
    # smaller than two Cl2 envelopes
    with pytest.raises(ValueError):
        ChamberConfig(width=20, height=20)
    with pytest.raises(ValueError):
        ChamberConfig(height=43)
    assert ChamberConfig(width=44, height=44).width == 44.0


def test_contact_multiplier_must_exceed_one():
    with pytest.raises(ValueError):
        ChamberConfig(contact_multiplier=1.0)
    with pytest.raises(ValueError):
        ChamberConfig(contact_multiplier=0.9)
    assert ChamberConfig(contact_multiplier=1.01).contact_multiplier == 1.01


def test_load_config(tmp_path):
    path = tmp_path / "chamber.json"
    path.write_text(json.dumps({"activation_energy": 12000, "width": 640}), encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.activation_energy == 12000.0
    assert cfg.width == 640.0
    assert cfg.height == 500.0


def test_load_config_none_returns_defaults():
    assert load_config(None).to_dict() == ChamberConfig().to_dict()


def test_copy_with_override():
    cfg = ChamberConfig().copy(contact_multiplier=1.3)
    assert cfg.contact_multiplier == 1.3
