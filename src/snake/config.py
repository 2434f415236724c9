from dataclasses import dataclass

# ----- Window & arena (world space, origin bottom-left, y grows upward) -----
WIDTH, HEIGHT = 800.0, 600.0
SQUARE_SIZE = 20.0
WALL_THICKNESS = 60.0
BOTTOM_WALL_OFFSET = 17.0   # bottom wall sprite is thinner than the others
MOVE_STRIDE = 2.5

# ----- Colors -----
BG    = (20, 20, 24)
WALL  = (70, 52, 40)
GREEN = (80, 200, 80)
HEAD  = (40, 150, 40)
EYE   = (240, 240, 250)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, 1), (0, -1), (-1, 0), (1, 0)

@dataclass(frozen=True)
class Arena:
    width: float = WIDTH
    height: float = HEIGHT
    wall: float = WALL_THICKNESS
    bottom_offset: float = BOTTOM_WALL_OFFSET
    square_size: float = SQUARE_SIZE
    stride: float = MOVE_STRIDE

    @property
    def center(self):
        return (self.width / 2.0, self.height / 2.0)

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: int = 0
    speed: float = 0.012        # seconds between ticks
    hold_speed: float = 0.5     # interval while the hold key is down
    boost_step: float = 0.005   # interval removed per boost key press
    speed_floor: float = 0.003
    small_growth: int = 25
    big_growth: int = 75
    spawn_attempts: int = 1000
    fps: int = 120

    def __post_init__(self):
        if self.speed <= 0 or self.hold_speed <= 0:
            raise ValueError(f"Tick intervals must be positive, got {self.speed}/{self.hold_speed}")
        if self.speed_floor < 0 or self.boost_step <= 0:
            raise ValueError("boost_step must be positive and speed_floor non-negative")
        if self.small_growth < 0 or self.big_growth < 0:
            raise ValueError("Growth batches cannot be negative")
        if self.spawn_attempts < 1:
            raise ValueError(f"spawn_attempts must be >= 1, got {self.spawn_attempts}")

ARENA = Arena()
CFG = Config(seed=0)
