"""
Bullet vs enemy collision resolution
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .entities import Shape
from .utils import rects_overlap, round_half_up


@dataclass
class Hit:
    """One resolved bullet/enemy overlap"""
    enemy: Shape
    bullet: Shape

    @property
    def points(self) -> int:
        return round_half_up(self.enemy.size)


def collides(a: Shape, b: Shape) -> bool:
    return rects_overlap(a.rect(), b.rect())


class CollisionResolver:
    """
    Pairwise scan of every enemy against every bullet.

    Marks are only written, never read, unless single_hit is set: a bullet
    overlapping two enemies scores twice, and an enemy under two bullets is
    hit twice.
    """

    def __init__(self, single_hit: bool = False):
        self.single_hit = single_hit

    def resolve(self, enemies: List[Shape], bullets: List[Shape]) -> List[Hit]:
        hits: List[Hit] = []
        for enemy in enemies:
            for bullet in bullets:
                if self.single_hit and (enemy.collided or bullet.collided):
                    continue
                if collides(bullet, enemy):
                    bullet.collided = True
                    enemy.collided = True
                    hits.append(Hit(enemy=enemy, bullet=bullet))
        return hits
