"""Single dense layer with perceptron and gradient-descent training."""

from .activations import Activation, identity, sigmoid, tanh, relu, step
from .dense import DenseLayer
from .training import GradientDescent, PerceptronRule

__all__ = [
    "Activation",
    "DenseLayer",
    "GradientDescent",
    "PerceptronRule",
    "identity",
    "relu",
    "sigmoid",
    "step",
    "tanh",
]
