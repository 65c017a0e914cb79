"""Game configuration constants."""

from dataclasses import dataclass


WIDTH = 640
HEIGHT = 480
FPS = 60

SPAWN_INTERVAL = 40
VOLLEY_SIZE = 36
PROJECTILE_SPEED = 2
PROJECTILE_RAMP = 2.0
PROJECTILE_SMOOTHING = 10
PROJECTILE_RADIUS = 8
PROJECTILE_CORE_RADIUS = 6
LETHAL_RADIUS = 10

PLAYER_START = (320, 400)
PLAYER_RADIUS = 10
PLAYER_SPEED = 4
PLAYER_SLOW_SPEED = 1

BOUNDS_POLICIES = ("free", "clamp", "wrap")
DEFAULT_BOUNDS = "clamp"
CULL_MARGIN = 32

PALETTE = ("red", "blue", "green")

COLORS = {
    "bg": "black",
    "player": "#00aaff",
    "projectile_core": "white",
    "warning": (255, 140, 140),
}


@dataclass(frozen=True)
class GameConfig:
    width: int = WIDTH
    height: int = HEIGHT
    fps: int = FPS
    spawn_interval: int = SPAWN_INTERVAL
    volley_size: int = VOLLEY_SIZE
    projectile_speed: float = PROJECTILE_SPEED
    palette: tuple = PALETTE
    player_start: tuple = PLAYER_START
    bounds: str = DEFAULT_BOUNDS
    cull_margin: float | None = CULL_MARGIN
    pause_on_defeat: bool = False

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.spawn_interval <= 0:
            raise ValueError(f"spawn_interval must be positive, got {self.spawn_interval}")
        if self.volley_size <= 0:
            raise ValueError(f"volley_size must be positive, got {self.volley_size}")
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        if self.bounds not in BOUNDS_POLICIES:
            raise ValueError(f"unknown bounds policy {self.bounds!r}, expected one of {BOUNDS_POLICIES}")
        if self.cull_margin is not None and self.cull_margin < LETHAL_RADIUS:
            raise ValueError(f"cull_margin must be at least {LETHAL_RADIUS}, got {self.cull_margin}")

    @property
    def culls(self):
        """Culling only runs while the player is confined to the playfield."""
        return self.cull_margin is not None and self.bounds != "free"

    @property
    def center(self):
        return (self.width / 2, self.height / 2)
