# tests/test_torch_reference.py
"""Cross-check the layer against torch's linear layer and autograd."""
import random

import numpy as np
import pytest

torch = pytest.importorskip("torch")
from torch.nn import functional as F

from feedforward import DenseLayer, GradientDescent, sigmoid, tanh


def _layer(inputs, outputs, activation, seed=0):
    rng = random.Random(seed)
    return DenseLayer.new_from(inputs, outputs, activation, lambda: rng.uniform(-1.0, 1.0))


def _tensors(layer):
    w = torch.tensor(layer.weight_matrix.copy(), dtype=torch.float64, requires_grad=True)
    b = torch.tensor(layer.biases.copy(), dtype=torch.float64)
    return w, b


@pytest.mark.parametrize("activation,torch_fn", [(sigmoid(), torch.sigmoid), (tanh(), torch.tanh)])
def test_compute_matches_torch_linear(activation, torch_fn):
    layer = _layer(5, 3, activation)
    x = [0.2, -0.7, 1.5, 0.0, 3.0]
    w, b = _tensors(layer)
    expected = torch_fn(F.linear(torch.tensor(x, dtype=torch.float64), w, b))
    assert np.allclose(layer.compute(x), expected.detach().numpy())


def test_weight_step_is_gradient_of_half_squared_error():
    layer = _layer(4, 3, sigmoid(), seed=5)
    x = [0.5, -1.0, 0.25, 2.0]
    t = [1.0, 0.0, 0.5]
    rate = 0.3

    w, b = _tensors(layer)
    out = torch.sigmoid(F.linear(torch.tensor(x, dtype=torch.float64), w, b))
    loss = 0.5 * ((out - torch.tensor(t, dtype=torch.float64)) ** 2).sum()
    loss.backward()
    expected = (w - rate * w.grad).detach().numpy()

    layer.backprop_train(GradientDescent(rate), x, t)
    assert np.allclose(layer.weight_matrix, expected)


def test_upstream_signal_is_input_minus_weighted_derivative():
    layer = _layer(3, 2, tanh(), seed=9)
    x = [0.1, -0.4, 0.9]
    w, b = _tensors(layer)
    net = F.linear(torch.tensor(x, dtype=torch.float64), w.detach(), b).requires_grad_(True)
    (delta,) = torch.autograd.grad(torch.tanh(net).sum(), net)
    expected = torch.tensor(x, dtype=torch.float64) - w.detach().T @ delta

    upstream = layer.backprop_train(GradientDescent(0.1), x, [0.0, 0.0])
    assert np.allclose(upstream, expected.numpy())
