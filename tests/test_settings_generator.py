"""Tests for the random settings generator."""

from random import Random

import pytest

from catalog import classic_config, default_config
from configuration import MachineConfig, apply_settings
from errors import ConfigurationError
from settings_generator import choose_pairs, choose_rotors, generate_settings, main


class TestChoosePairs:
    def test_disjoint(self):
        pairs = choose_pairs("ABCDEFGHIJ", 4, Random(3))
        assert len(pairs) == 4
        used = "".join(pairs)
        assert len(set(used)) == len(used)

    def test_capped_by_alphabet(self):
        assert len(choose_pairs("ABCDE", 10, Random(0))) == 2


class TestGenerateSettings:
    @pytest.mark.parametrize("seed", range(10))
    def test_default_catalog_lines_are_valid(self, seed):
        cfg = default_config()
        line = generate_settings(cfg, Random(seed))
        machine = cfg.build_machine()
        apply_settings(machine, line)
        assert machine.get_rotor(0).reflecting()
        assert not machine.get_rotor(1).rotates()
        assert all(machine.get_rotor(k).rotates() for k in (2, 3, 4))

    def test_classic_catalog(self):
        cfg = classic_config()
        machine = cfg.build_machine()
        apply_settings(machine, generate_settings(cfg, Random(7), pairs=10))
        assert len(str(machine.plugboard()).split()) == 10

    def test_deterministic_with_seed(self):
        cfg = default_config()
        assert generate_settings(cfg, Random(42)) == generate_settings(cfg, Random(42))

    def test_not_enough_fixed_rotors(self):
        classic = classic_config()
        cfg = MachineConfig(classic.alphabet, 5, 1, classic.rotors)
        with pytest.raises(ConfigurationError):
            choose_rotors(cfg, Random(0))


class TestMain:
    def test_prints_line(self, capsys):
        assert main(["--seed", "1", "--config", "classic"]) == 0
        line = capsys.readouterr().out.strip()
        assert line.startswith("* ")
        machine = classic_config().build_machine()
        apply_settings(machine, line)

    def test_bad_config(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.conf")]) == 1
        assert capsys.readouterr().err.startswith("Error:")
