"""Tests for PasswordConfig validation."""

import dataclasses

import pytest

from pwgen.charsets import CLASS_ORDER
from pwgen.config import DEFAULT_CONFIG, ConfigError, PasswordConfig
from pwgen.generator import PasswordGeneratorError


def test_defaults_are_valid():
    DEFAULT_CONFIG.validate()
    assert DEFAULT_CONFIG.password_length == 16
    assert DEFAULT_CONFIG.selection == CLASS_ORDER
    assert DEFAULT_CONFIG.random_source == "system"


@pytest.mark.parametrize(
    "changes",
    [
        {"min_length": 0},
        {"min_length": 30, "max_length": 20, "password_length": 25},
        {"password_length": 3},
        {"password_length": 65},
        {"random_source": "dice"},
        {"num_qubits": 0},
        {"num_qubits": 40},
        {"entropy_rounds": -1},
        {"quantum_streams": 0},
    ],
)
def test_invalid_values(changes):
    cfg = dataclasses.replace(DEFAULT_CONFIG, **changes)
    with pytest.raises(ConfigError):
        cfg.validate()


def test_config_error_is_generator_error():
    assert issubclass(ConfigError, PasswordGeneratorError)


def test_instances_do_not_share_selection():
    a = PasswordConfig()
    b = PasswordConfig(selection=CLASS_ORDER[:1])
    assert a.selection == CLASS_ORDER
    assert b.selection == CLASS_ORDER[:1]
