# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so feedforward.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import itertools
import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((800, 600), pg.SRCALPHA)

@pytest.fixture
def counter():
    """Zero-argument generator yielding 0.0, 1.0, 2.0, ... on successive calls."""
    c = itertools.count()
    return lambda: float(next(c))

@pytest.fixture
def layer_factory():
    from feedforward import DenseLayer, identity
    def make(inputs=3, outputs=2, activation=None, generator=None, **kwargs):
        activation = activation or identity()
        if generator is None:
            return DenseLayer(inputs, outputs, activation, **kwargs)
        return DenseLayer.new_from(inputs, outputs, activation, generator, **kwargs)
    return make

@pytest.fixture
def node_factory():
    from viz.node import Node
    def make(pos=(100, 100), r=12, color=(0, 255, 0), **kwargs):
        return Node(pos=pos, r=r, color=color, **kwargs)
    return make

@pytest.fixture
def edge_factory():
    from viz.edges import Edge
    def make(a, b, **kwargs):
        return Edge(a, b, **kwargs)
    return make
