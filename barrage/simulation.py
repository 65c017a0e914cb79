"""Per-frame orchestration of the player, the projectiles and the spawner.

Frame order
-----------
Every call to ``SimulationLoop.on_frame`` runs, in this order:

  1. advance every projectile (insertion order) against the player's
     position as it stood at the start of the frame
  2. advance the player from freshly polled input
  3. fire a volley if the frames counted since start land on the cadence
  4. cull projectiles that left the playfield, only while the player is
     confined to it
  5. clear the canvas, draw projectiles, then draw the player on top

Defeat
------
Proximity is detected by the projectiles; the loop only turns it into a
single ``RUNNING -> DEFEATED`` transition and notifies listeners once.  The
simulation keeps running while defeated; pausing is the host's call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pygame
from loguru import logger

from .config import COLORS, GameConfig
from .input import InputSource
from .player import InputState, PlayerEntity
from .projectile import Projectile
from .render import Renderer
from .spawner import SpawnController
from .ticker import Ticker
from .vector import is_outside


class SimulationState(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    DEFEATED = "defeated"
    STOPPED = "stopped"


class SimulationStateError(RuntimeError):
    pass


@dataclass(frozen=True)
class DefeatEvent:
    frame: int
    projectile: Projectile
    player_position: pygame.Vector2


class SimulationLoop:
    """Owns all game state and advances it one frame per ticker callback."""

    def __init__(
        self,
        renderer: Renderer,
        input_source: InputSource,
        ticker: Ticker,
        config: GameConfig | None = None,
    ) -> None:
        self.renderer = renderer
        self.input_source = input_source
        self.ticker = ticker
        self.config = config or GameConfig()

        self.state = SimulationState.UNINITIALIZED
        self.projectiles: list[Projectile] = []
        self.player: PlayerEntity | None = None
        self.spawner: SpawnController | None = None
        self.defeat: DefeatEvent | None = None
        self.frames_simulated = 0
        self._frame_origin = 0
        self._defeat_listeners = []

    def add_defeat_listener(self, callback) -> None:
        self._defeat_listeners.append(callback)

    def remove_defeat_listener(self, callback) -> None:
        self._defeat_listeners.remove(callback)

    @property
    def is_active(self) -> bool:
        return self.state in (SimulationState.RUNNING, SimulationState.DEFEATED)

    def _build_world(self) -> None:
        self.projectiles = []
        self.player = PlayerEntity(
            self.config.player_start,
            bounds=self.config.bounds,
            width=self.config.width,
            height=self.config.height,
        )
        self.spawner = SpawnController(self.projectiles, self.config)
        self.defeat = None
        self.frames_simulated = 0
        self._frame_origin = self.ticker.current_frame_count()

    def start(self) -> None:
        if self.state != SimulationState.UNINITIALIZED:
            raise SimulationStateError(f"cannot start a simulation that is {self.state.value}")
        self._build_world()
        self.state = SimulationState.RUNNING
        logger.info(
            f"Simulation started: {self.config.width}x{self.config.height}, "
            f"volley of {self.config.volley_size} every {self.config.spawn_interval} frames"
        )
        if self.config.cull_margin is not None and not self.config.culls:
            logger.warning("Player bounds are free, projectiles will not be culled")

    def stop(self) -> None:
        if self.state == SimulationState.STOPPED:
            return
        self.state = SimulationState.STOPPED
        logger.info(f"Simulation stopped after {self.frames_simulated} frames, {len(self.projectiles)} projectiles live")

    def reset(self) -> None:
        if not self.is_active:
            raise SimulationStateError(f"cannot reset a simulation that is {self.state.value}")
        self._build_world()
        self.state = SimulationState.RUNNING
        logger.info("Simulation reset")

    def on_frame(self) -> None:
        if not self.is_active:
            raise SimulationStateError(f"on_frame called while {self.state.value}")

        # Cadence counts from the most recent start or reset.
        frame = self.ticker.current_frame_count() - self._frame_origin

        player_position = pygame.Vector2(self.player.position)
        hit = None
        for projectile in self.projectiles:
            if projectile.advance(player_position) and hit is None:
                hit = projectile

        self.player.advance(InputState.poll(self.input_source))

        self.spawner.maybe_fire(frame, self.player.position)

        if self.config.culls:
            self.cull()

        if hit is not None:
            self._on_defeat(frame, hit, player_position)

        self.render()
        self.frames_simulated += 1

    def cull(self) -> int:
        width, height, margin = self.config.width, self.config.height, self.config.cull_margin
        kept = [p for p in self.projectiles if not is_outside(p.position, width, height, margin)]
        removed = len(self.projectiles) - len(kept)
        if removed:
            # The spawner shares this list, so prune in place.
            self.projectiles[:] = kept
            logger.debug(f"Culled {removed} projectiles, {len(kept)} remain")
        return removed

    def _on_defeat(self, frame, projectile, player_position) -> None:
        if self.state != SimulationState.RUNNING:
            return
        self.state = SimulationState.DEFEATED
        self.defeat = DefeatEvent(frame=frame, projectile=projectile, player_position=player_position)
        logger.info(
            f"Defeat at frame {frame}: {projectile.color} projectile at "
            f"({projectile.position.x:.1f}, {projectile.position.y:.1f})"
        )
        for callback in list(self._defeat_listeners):
            callback(self.defeat)

    def render(self) -> None:
        self.renderer.fill_rect(0, 0, self.config.width, self.config.height, COLORS["bg"])
        for projectile in self.projectiles:
            projectile.render(self.renderer)
        self.player.render(self.renderer)
