# tests/test_node.py
import pygame as pg

def test_node_sprite_contract(node_factory):
    n = node_factory(pos=(123, 234), r=16, color=(20, 200, 40))
    assert isinstance(n, pg.sprite.Sprite)
    assert isinstance(n.image, pg.Surface)
    assert isinstance(n.rect, pg.Rect)
    assert n.rect.center == (123, 234)
    assert n.value is None

def test_node_draw_blits_pixel(node_factory, screen):
    bg = pg.Color(10, 10, 10, 255)
    screen.fill(bg)
    n = node_factory(pos=(200, 150), r=20, color=(220, 220, 220))
    n.draw(screen)
    cx, cy = n.rect.center
    # The center should no longer be background after drawing
    assert screen.get_at((cx, cy)) != bg

def test_node_value_is_stored_as_float(node_factory):
    n = node_factory(value=1)
    assert n.value == 1.0 and isinstance(n.value, float)
    n.value = None
    assert n.value is None

def test_node_move_via_xy(node_factory):
    n = node_factory(pos=(100, 100))
    old = n.rect.topleft
    n.x += 7
    n.y -= 3
    assert n.rect.topleft == (old[0] + 7, old[1] - 3)
