# viz/edges.py
import pygame as pg

NEG = (255, 0, 0)        # -1
NEUTRAL = (180, 180, 180)  # 0
POS = (0, 200, 0)        # +1

def weight_to_color(weight, scale=1.0):
    """
    Map weight/scale in [-1, 1] to red (neg) -> gray (0) -> green (pos).
    Clamp anything outside [-1, 1].
    """
    w = float(weight) / scale if scale > 0 else 0.0
    w = max(-1.0, min(1.0, w))
    if w < 0:
        t = w + 1.0  # [-1,0] -> [0,1]
        lo, hi = NEG, NEUTRAL
    else:
        t = w
        lo, hi = NEUTRAL, POS
    return tuple(int((1 - t) * a + t * b) for a, b in zip(lo, hi))


class Edge:
    def __init__(self, nodeA, nodeB, weight=0.0, color=None, width=3, aa=True, clip_to_circle=True,
                 show_label=False, scale=1.0):
        if not (hasattr(nodeA, "rect") and hasattr(nodeB, "rect")):
            raise TypeError("Edge endpoints must have a .rect")
        self.a, self.b = nodeA, nodeB
        self.p1c = pg.Vector2(self.a.rect.center)
        self.p2c = pg.Vector2(self.b.rect.center)
        self.scale = scale
        self.width = width
        self.aa = aa
        self.clip = clip_to_circle  # True = clip to node radii if available
        self.show_label = show_label
        self._fixed_color = color
        self.set_weight(weight)

    def set_weight(self, weight, scale=None):
        self.weight = float(weight)
        if scale is not None:
            self.scale = scale
        self.color = self._fixed_color if self._fixed_color is not None else weight_to_color(self.weight, self.scale)

    def _endpoints(self):
        p1 = pg.Vector2(self.a.rect.center)
        p2 = pg.Vector2(self.b.rect.center)
        self.p1c, self.p2c = p1, p2
        if not self.clip:
            return (round(p1.x), round(p1.y)), (round(p2.x), round(p2.y))

        # Use node.r if present, else approximate from rect size
        r1 = getattr(self.a, "r", min(self.a.rect.w, self.a.rect.h) // 2)
        r2 = getattr(self.b, "r", min(self.b.rect.w, self.b.rect.h) // 2)

        v = p2 - p1
        if v.length_squared() == 0:
            return (round(p1.x), round(p1.y)), (round(p2.x), round(p2.y))
        u = v.normalize()

        p1c = p1 + u * r1
        p2c = p2 - u * r2

        self.p1c, self.p2c = p1c, p2c
        return (round(p1c.x), round(p1c.y)), (round(p2c.x), round(p2c.y))

    def draw(self, surface):
        p1, p2 = self._endpoints()

        if self.width > 1:
            pg.draw.line(surface, self.color, p1, p2, self.width)
            if self.aa:
                pg.draw.aaline(surface, self.color, p1, p2)
        else:
            if self.aa:
                pg.draw.aaline(surface, self.color, p1, p2)
            else:
                pg.draw.line(surface, self.color, p1, p2, 1)

        if self.show_label:
            self._draw_label(surface)

    def _draw_label(self, surface):
        font = pg.font.Font(None, max(14, int(12 + self.width)))
        text_surf = font.render(f"{self.weight:.2f}", True, (100, 100, 20))

        pad = 4
        bg = pg.Surface((text_surf.get_width() + pad*2, text_surf.get_height() + pad*2), pg.SRCALPHA)
        pg.draw.rect(bg, (255, 255, 255, 170), bg.get_rect(), border_radius=6)
        bg.blit(text_surf, (pad, pad))

        # a third of the way from the input side keeps labels of fanned-out edges apart
        target = self.p1c + (self.p2c - self.p1c) * 0.33
        v = self.p2c - self.p1c
        if v.length_squared() != 0:
            n = pg.Vector2(-v.y, v.x).normalize()
            target += n * (4 + 0.5 * self.width)

        surface.blit(bg, bg.get_rect(center=(int(target.x), int(target.y))))
