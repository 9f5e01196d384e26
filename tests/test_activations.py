# tests/test_activations.py
import math
import numpy as np
import pytest

from feedforward import activations
from feedforward.activations import Activation


def test_identity_passes_values_and_has_unit_derivative():
    act = activations.identity()
    x = np.array([-2.0, 0.0, 3.5])
    assert np.array_equal(act.value(x), x)
    assert np.array_equal(act.derivative(x), np.ones(3))

def test_sigmoid_value_and_derivative():
    act = activations.sigmoid()
    x = np.array([0.0, 2.0])
    s = 1.0 / (1.0 + np.exp(-2.0))
    assert np.allclose(act.value(x), [0.5, s])
    assert np.allclose(act.derivative(x), [0.25, s * (1 - s)])

def test_tanh_derivative():
    act = activations.tanh()
    assert act.derivative(np.array([0.0]))[0] == pytest.approx(1.0)

def test_relu_and_step():
    x = np.array([-1.0, 0.0, 2.0])
    assert activations.relu().value(x).tolist() == [0.0, 0.0, 2.0]
    assert activations.relu().derivative(x).tolist() == [0.0, 0.0, 1.0]
    assert activations.step().value(x).tolist() == [0.0, 1.0, 1.0]
    assert activations.step().derivative(x).tolist() == [1.0, 1.0, 1.0]

def test_activations_keep_float32():
    x = np.array([-1.0, 0.5], dtype=np.float32)
    for name in activations.CATALOG:
        act = activations.by_name(name)
        assert act.value(x).dtype == np.float32, name
        assert act.derivative(x).dtype == np.float32, name

def test_from_scalar_wraps_plain_functions():
    act = Activation.from_scalar("tanh", math.tanh, lambda v: 1.0 - math.tanh(v) ** 2)
    x = np.array([0.0, 1.0])
    assert np.allclose(act.value(x), np.tanh(x))
    assert act.derivative(x)[0] == pytest.approx(1.0)

def test_by_name_lookup():
    assert activations.by_name("sigmoid").name == "sigmoid"
    with pytest.raises(KeyError, match="unknown activation"):
        activations.by_name("softmax")
