# entities.py
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple

from pygame.math import Vector2  # type: ignore

from .config import RIGHT

Direction = Tuple[int, int]


class FoodKind(Enum):
    SMALL = "small"
    BIG = "big"


@dataclass
class Entity:
    """A positioned, oriented square: a snake segment or a food item."""
    position: Vector2
    direction: Direction = RIGHT

    def copy(self) -> "Entity":
        return Entity(Vector2(self.position), self.direction)

    def distance_to(self, other: "Entity") -> float:
        return self.position.distance_to(other.position)


@dataclass
class Food(Entity):
    # direction is unused for food; kept so food and segments share one type
    kind: FoodKind = FoodKind.SMALL
    on_screen: bool = False


def make_food(kind: FoodKind) -> Food:
    return Food(Vector2(0, 0), kind=kind)


class Renderable(NamedTuple):
    """Read-only view of one entity handed to the renderer."""
    kind: str                       # "head", "body", "small_food", "big_food"
    position: Tuple[float, float]
    direction: Direction


def as_renderable(kind: str, entity: Entity) -> Renderable:
    return Renderable(kind, (entity.position.x, entity.position.y), entity.direction)
