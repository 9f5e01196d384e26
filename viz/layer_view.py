# viz/layer_view.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence
import numpy as np
import pygame as pg

from feedforward.dense import DenseLayer
from viz.edges import Edge
from viz.node import Node


# -----------------------
# View config (single spot)
# -----------------------
@dataclass
class ViewStyle:
    canvas_bg_rgba: tuple[int, int, int, int] = (0, 0, 0, 0)

    # Node look
    node_radius: int = 24
    node_fill: tuple[int, int, int] = (220, 220, 220)
    node_border: tuple[int, int, int] = (100, 100, 100)
    node_border_width: int = 2

    # Layout
    margin_ratio_x: float = 0.15
    margin_ratio_y: float = 0.12

    # Edge look
    edge_min_width: int = 1
    edge_max_width: int = 4
    edge_labels: bool = False

    # Text (node values)
    value_decimals: int = 2
    show_values: bool = True


class LayerView(pg.sprite.Sprite):
    def __init__(self, layer: DenseLayer, canvas_size: tuple[int, int], style: ViewStyle | None = None):
        """
        layer: the dense layer to visualize; weights are re-read on every redraw
        canvas_size: (width, height)
        """
        super().__init__()
        self.layer = layer
        self.style = style or ViewStyle()

        self.image = pg.Surface(canvas_size, pg.SRCALPHA)
        self.rect = self.image.get_rect(topleft=(0, 0))

        inputs, outputs = self._compute_node_centers(canvas_size, (layer.input_size, layer.output_size))
        self.input_nodes = [self._make_node(c) for c in inputs]
        self.output_nodes = [self._make_node(c) for c in outputs]
        # edges[j][i] connects input i to output j, same indexing as the weight matrix
        self.edges = [
            [Edge(src, dst, width=self.style.edge_min_width, aa=False, show_label=self.style.edge_labels)
             for src in self.input_nodes]
            for dst in self.output_nodes
        ]

        self.redraw()

    def _make_node(self, center: tuple[int, int]) -> Node:
        s = self.style
        return Node(center, r=s.node_radius, color=s.node_fill, border=s.node_border,
                    border_width=s.node_border_width, decimals=s.value_decimals)

    # ---------- Public API ----------
    def set_values(self, input: Optional[Sequence[float]], output: Optional[Sequence[float]] = None) -> None:
        """
        Show values inside the nodes. Shorter sequences leave the remaining nodes blank;
        pass None to clear a side.
        """
        for nodes, values in ((self.input_nodes, input), (self.output_nodes, output)):
            vals = [] if values is None else list(np.asarray(values, dtype=float).reshape(-1))
            for k, node in enumerate(nodes):
                node.value = vals[k] if (self.style.show_values and k < len(vals)) else None
        self.redraw()

    def show_sample(self, input: Sequence[float]) -> np.ndarray:
        """Display `input` and the layer's current output for it."""
        output = self.layer.compute(input)
        self.set_values(input, output)
        return output

    def redraw(self) -> None:
        """Re-render edges and nodes using current weights and node values."""
        self.image.fill(self.style.canvas_bg_rgba)
        self._draw_edges()
        for node in (*self.input_nodes, *self.output_nodes):
            node.draw(self.image)

    # ---------- Layout ----------
    def _compute_node_centers(self, canvas_size: tuple[int, int], layer_sizes: tuple[int, int]) -> list[list[tuple[int, int]]]:
        width, height = canvas_size
        margin_x = self.style.margin_ratio_x * width
        margin_y = self.style.margin_ratio_y * height
        layer_x_positions = [int(margin_x), int(width - margin_x)]

        centers: list[list[tuple[int, int]]] = []
        for layer_index, node_count in enumerate(layer_sizes):
            if node_count == 1:
                y_positions = [height // 2]
            else:
                y_positions = [
                    int(margin_y + j * (height - 2 * margin_y) / (node_count - 1))
                    for j in range(node_count)
                ]
            centers.append([(layer_x_positions[layer_index], y) for y in y_positions])
        return centers

    # ---------- Edges ----------
    def _edge_width_from_weight(self, abs_weight: float, layer_max_abs: float) -> int:
        if layer_max_abs <= 0:
            return self.style.edge_min_width
        t = np.clip(abs_weight / layer_max_abs, 0.0, 1.0)
        return int(self.style.edge_min_width + t * (self.style.edge_max_width - self.style.edge_min_width))

    def _draw_edges(self) -> None:
        weight_matrix = self.layer.weight_matrix
        layer_max_abs = float(np.abs(weight_matrix).max()) if weight_matrix.size else 0.0
        scale = max(1.0, layer_max_abs)

        for j, row in enumerate(self.edges):
            for i, edge in enumerate(row):
                w = float(weight_matrix[j, i])
                edge.set_weight(w, scale=scale)
                edge.width = self._edge_width_from_weight(abs(w), layer_max_abs)
                edge.draw(self.image)
