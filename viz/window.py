# viz/window.py
from __future__ import annotations
import os
from typing import Optional
import pygame as pg
from config import AppConfig
from viz.layer_view import LayerView

BG = (24, 24, 28)
TEXT = (230, 230, 230)

class LayerWindow:
    """Display window that blits a LayerView each frame, optionally saving PNG frames."""
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._frame_idx = 0
        self._overlay_text: Optional[str] = None
        self.closed_by_user = False

    def set_overlay(self, text: Optional[str]) -> None:
        self._overlay_text = text or ""

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        pg.init()
        pg.display.set_caption(cfg.view_title)
        self.surf = pg.display.set_mode(cfg.view_canvas)
        self.clock = pg.time.Clock()
        self._frame_idx = 0

        if cfg.view_record_dir:
            os.makedirs(cfg.view_record_dir, exist_ok=True)

    def draw(self, view: LayerView) -> None:
        assert self.surf is not None, "Window not opened"
        assert self.cfg is not None, "Window config not set (call open first)"

        for event in pg.event.get():
            if event.type == pg.QUIT:
                self.closed_by_user = True

        self.surf.fill(BG)
        self.surf.blit(view.image, view.rect)

        if self._overlay_text:
            font = pg.font.SysFont(None, 22)
            self.surf.blit(font.render(self._overlay_text, True, TEXT), (6, 4))

        pg.display.flip()

        if self.cfg.view_record_dir:
            self._save_surface_frame()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    # internals
    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        fname = os.path.join(self.cfg.view_record_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
