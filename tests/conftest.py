import pytest

from catalog import classic_config, default_config
from configuration import MachineConfig


@pytest.fixture
def naval():
    """Five-slot machine with the thin reflectors and Beta/Gamma."""
    return default_config().build_machine()


@pytest.fixture
def army():
    """Four-slot machine with the wide reflectors A, B and C."""
    return classic_config().build_machine()


@pytest.fixture
def thin_three():
    """Four slots over the naval wheel set, so thin B can sit right next to rotor I."""
    cfg = default_config()
    return MachineConfig(cfg.alphabet, 4, 3, cfg.rotors).build_machine()
