"""The player character: walks, eats digits and headbutts containers."""

from __future__ import annotations

import math
from typing import Any
from xml.etree.ElementTree import Element

import pygame

from actionsudoku.item import Item, _float_attr

_MAX_SPEED = 400.0
_EATING_TIME = 0.5
_HEADBUTT_TIME = 0.5
_HIT_SIZE = 96.0
_ALPHA_THRESHOLD = 0x80


def _swing(progress: float) -> float:
    """Fraction of the full angle reached: up for the first half, back down after."""
    if progress < 0.5:
        return progress * 2
    return 2 - progress * 2


def _blit_rotated(
    surface: pygame.Surface,
    image: pygame.Surface,
    top_left: tuple[int, int],
    size: tuple[int, int],
    pivot: tuple[float, float],
    angle: float,
) -> None:
    """Draw image scaled to size at top_left, rotated clockwise by angle radians about pivot."""
    scaled = pygame.transform.scale(image, size)
    if angle == 0:
        surface.blit(scaled, top_left)
        return
    offset_x = top_left[0] + size[0] / 2 - pivot[0]
    offset_y = top_left[1] + size[1] / 2 - pivot[1]
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    centre = (
        round(pivot[0] + offset_x * cos_a - offset_y * sin_a),
        round(pivot[1] + offset_x * sin_a + offset_y * cos_a),
    )
    rotated = pygame.transform.rotate(scaled, -math.degrees(angle))
    surface.blit(rotated, rotated.get_rect(center=centre))


class Sparty(Item):
    """The character the player steers around the board."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.body_image: pygame.Surface | None = None
        self.head_image: pygame.Surface | None = None
        self.head_butting = False
        self.headbutt_elapsed = 0.0
        self.mouth_moving = False
        self.moving = False
        self.regurgitating = True
        self.mouth_elapsed = 0.0
        self.front = 0.0
        self.head_pivot_angle = 0.0
        self.head_pivot_x = 0.0
        self.head_pivot_y = 0.0
        self.mouth_pivot_angle = 0.0
        self.mouth_pivot_x = 0.0
        self.mouth_pivot_y = 0.0
        self.target_x = 0.0
        self.target_y = 0.0

    def head_butt(self) -> None:
        """Toggle the headbutt motion and restart its clock."""
        self.head_butting = not self.head_butting
        self.headbutt_elapsed = 0.0

    def mouth_move(self, moving: bool) -> None:
        """Toggle the mouth motion; moving says whether it swallows digits."""
        self.mouth_moving = not self.mouth_moving
        self.regurgitating = moving

    def hit_test(self, x: int, y: int) -> bool:
        """True if (x, y) lands on an opaque pixel of the head image."""
        if self.head_image is None:
            return False
        test_x = x - self.x + _HIT_SIZE / 2
        test_y = y - self.y + _HIT_SIZE / 2
        if test_x < 0 or test_y < 0 or test_x >= _HIT_SIZE or test_y >= _HIT_SIZE:
            return False
        px, py = int(test_x), int(test_y)
        width, height = self.head_image.get_size()
        if px >= width or py >= height:
            return False
        return self.head_image.get_at((px, py)).a >= _ALPHA_THRESHOLD

    def set_target_location(self, x: int, y: int) -> None:
        """Start walking towards (x, y)."""
        self.target_x = x
        self.target_y = y
        self.moving = True

    def draw(self, surface: pygame.Surface, width: int, height: int) -> None:
        """Draw body and head, rotated while eating or headbutting."""
        if self.body_image is None or self.head_image is None:
            return
        wid, hit = self.body_image.get_size()
        head_wid, head_hit = self.head_image.get_size()
        size = (wid, hit)
        body_pos = (int(self.x - wid / 2), int(self.y - hit / 2))
        head_pos = (int(self.x - head_wid / 2), int(self.y - head_hit / 2))

        if self.mouth_moving:
            pivot = (
                self.x - wid / 2 + self.mouth_pivot_x,
                self.y - hit / 2 + self.mouth_pivot_y,
            )
            angle = self.mouth_pivot_angle * _swing(self.mouth_elapsed / _EATING_TIME)
            _blit_rotated(surface, self.body_image, body_pos, size, pivot, angle)
            surface.blit(pygame.transform.scale(self.head_image, size), body_pos)
        elif self.head_butting:
            pivot = (
                self.x - wid / 2 + self.head_pivot_x,
                self.y - hit / 2 + self.head_pivot_y,
            )
            angle = self.head_pivot_angle * _swing(self.headbutt_elapsed / _HEADBUTT_TIME)
            _blit_rotated(surface, self.body_image, body_pos, size, pivot, angle)
            _blit_rotated(surface, self.head_image, head_pos, size, pivot, angle)
        else:
            surface.blit(pygame.transform.scale(self.body_image, size), body_pos)
            surface.blit(pygame.transform.scale(self.head_image, size), head_pos)

    def update(self, elapsed: float) -> None:
        """Advance the headbutt, eating and walking animations."""
        if self.head_butting:
            self.headbutt_elapsed += elapsed
            if self.headbutt_elapsed > _HEADBUTT_TIME:
                self.head_butting = False
                self.headbutt_elapsed = 0.0
            self.game.headbutt_container(self)

        if self.mouth_moving:
            self.mouth_elapsed += elapsed
            if self.mouth_elapsed > _HEADBUTT_TIME:
                self.mouth_moving = False
                self.mouth_elapsed = 0.0
            if self.regurgitating:
                self.game.eater(self)

        if self.moving:
            dx = self.target_x - self.x
            dy = self.target_y - self.y
            distance = math.hypot(dx, dy)
            step = _MAX_SPEED * elapsed
            if distance == 0 or distance < step:
                self.set_location(self.target_x, self.target_y)
                self.moving = False
            else:
                self.set_location(self.x + dx / distance * step, self.y + dy / distance * step)

    def xml_load(self, item_node: Element, dec_node: Element, tile_height: float) -> None:
        """Load position, both images and the animation pivots."""
        super().xml_load(item_node, dec_node, tile_height)
        head_file = "images/" + dec_node.get("image1", "0")
        body_file = "images/" + dec_node.get("image2", "0")
        self.set_image(head_file)
        self.body_image = pygame.image.load(body_file)
        self.head_image = pygame.image.load(head_file)
        self.front = _float_attr(dec_node, "front", self.front)
        self.head_pivot_angle = _float_attr(dec_node, "head-pivot-angle", self.head_pivot_angle)
        self.head_pivot_x = _float_attr(dec_node, "head-pivot-x", self.head_pivot_x)
        self.head_pivot_y = _float_attr(dec_node, "head-pivot-y", self.head_pivot_y)
        self.mouth_pivot_angle = _float_attr(dec_node, "mouth-pivot-angle", self.mouth_pivot_angle)
        self.mouth_pivot_x = _float_attr(dec_node, "mouth-pivot-x", self.mouth_pivot_x)
        self.mouth_pivot_y = _float_attr(dec_node, "mouth-pivot-y", self.mouth_pivot_y)
        self.target_x = _float_attr(dec_node, "target-x", self.target_x)
        self.target_y = _float_attr(dec_node, "target-y", self.target_y)

    def accept(self, visitor: Any) -> None:
        visitor.visit_sparty(self)