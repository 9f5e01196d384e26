# viz/node.py
import pygame as pg

class Node(pg.sprite.Sprite):
    """One neuron: a filled circle with an optional value label."""
    def __init__(self, pos, r=12, color=(220, 220, 220), border=(100, 100, 100), border_width=2,
                 value=None, decimals=2, text_color=(20, 20, 20)):
        super().__init__()
        self.r = r
        self.color = pg.Color(color)
        self.border = pg.Color(border)
        self.border_width = border_width
        self.decimals = decimals
        self.text_color = text_color
        self.image = pg.Surface((2*r, 2*r), pg.SRCALPHA)
        # position sprite on screen
        self.rect = self.image.get_rect(center=pos)
        self.value = value

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, v):
        self._value = None if v is None else float(v)
        self._render()

    def _render(self):
        r = self.r
        self.image.fill((0, 0, 0, 0))
        pg.draw.circle(self.image, self.color, (r, r), r)
        if self.border_width > 0:
            pg.draw.circle(self.image, self.border, (r, r), r, width=self.border_width)
        if self._value is not None:
            font = pg.font.Font(None, max(12, int(r * 0.9)))
            surf = font.render(f"{self._value:.{self.decimals}f}", True, self.text_color)
            self.image.blit(surf, surf.get_rect(center=(r, r)))

    @property
    def x(self): return self.rect.x
    @x.setter
    def x(self, v): self.rect.x = int(v)

    @property
    def y(self): return self.rect.y
    @y.setter
    def y(self, v): self.rect.y = int(v)

    def draw(self, surface):
        surface.blit(self.image, self.rect)
