"""
Cosmic Dodge game mode.

Steer a ship with the pointer and dodge asteroids falling from the top
of the screen. Score grows every frame you survive; the first hit ends
the run.

The mode is the session controller: it owns the IDLE -> PLAYING ->
GAME_OVER state machine, the frame schedule and the play surface
("canvas") that each tick draws into.
"""

from typing import Callable, List, Optional, Tuple

import pygame

from models import Resolution
from dodgekit.games import GameState
from dodgekit.games.base_game import BaseGame
from dodgekit.games.input.input_event import InputEvent
from dodgekit.games.scheduler import FrameHandle, FrameScheduler
from dodgekit.logging import emit_record, get_logger
from games.CosmicDodge.config import (
    PLAYER_RADIUS,
    TUNING,
    DodgeTuning,
)
from games.CosmicDodge.geometry import fit_surface
from games.CosmicDodge.renderer import Renderer
from games.CosmicDodge.simulation import SessionData, StepResult, step

log = get_logger('cosmic_dodge')

ScoreSink = Callable[[int], None]
Viewport = Callable[[], Tuple[int, int]]

WINDOW_BACKGROUND = (0, 0, 0)


class CosmicDodgeMode(BaseGame):
    """
    Cosmic Dodge session controller.

    Signals:
        start(): IDLE or GAME_OVER -> PLAYING, with a full reset
        restart(): same reset as start()
        close(): PLAYING or GAME_OVER -> IDLE
        resize(): recompute the play surface from the viewport

    While PLAYING one tick is queued on the scheduler at a time; each tick
    steps the simulation, draws the canvas, reports the score and queues
    the next tick. Leaving PLAYING cancels the queued tick.
    """

    NAME = "Cosmic Dodge"
    DESCRIPTION = "Steer your ship and dodge the falling asteroids."
    VERSION = "1.0.0"
    AUTHOR = "Dodgekit Team"

    ARGUMENTS = [
        {
            'name': '--player-radius',
            'type': float,
            'default': None,
            'help': 'Ship collision radius in pixels'
        },
        {
            'name': '--lerp-factor',
            'type': float,
            'default': None,
            'help': 'Fraction of the distance to the pointer covered per frame'
        },
        {
            'name': '--collision-margin',
            'type': float,
            'default': None,
            'help': 'Forgiveness margin subtracted from the summed radii'
        },
    ]

    @classmethod
    def activate(cls, display: Optional[pygame.Surface], **kwargs) -> Optional['CosmicDodgeMode']:
        """Create a mode bound to a display surface.

        Returns None, with nothing scheduled, if there is no surface to
        draw on.
        """
        try:
            return cls(display, **kwargs)
        except ValueError as e:
            log.warning("%s not activated: %s", cls.NAME, e)
            return None

    def __init__(
        self,
        display: pygame.Surface,
        viewport: Optional[Viewport] = None,
        seed: Optional[int] = None,
        tuning: DodgeTuning = TUNING,
        player_radius: float = PLAYER_RADIUS,
        scheduler: Optional[FrameScheduler] = None,
        renderer: Optional[Renderer] = None,
        on_score: Optional[ScoreSink] = None,
        on_final_score: Optional[ScoreSink] = None,
        **kwargs,
    ):
        """
        Initialize game mode in the IDLE state.

        Args:
            display: Window surface; its size is the viewport unless
                `viewport` is given
            viewport: Returns the (width, height) the play surface must fit in
            seed: Random seed for asteroid spawning
            tuning: Gameplay constants
            player_radius: Ship collision radius
            scheduler: Frame scheduler (a private one if None)
            renderer: Renderer (a default one if None)
            on_score: Receives the displayed score every tick
            on_final_score: Receives the displayed score once when a run ends

        Raises:
            ValueError: If display is None; nothing is created or scheduled
        """
        if display is None:
            raise ValueError("no display surface")
        self._viewport = viewport or display.get_size
        self._scheduler = scheduler or FrameScheduler()
        self._renderer = renderer or Renderer()
        self._on_score = on_score
        self._on_final_score = on_final_score

        surface = fit_surface(*self._viewport())
        self._session = SessionData.create(surface, seed=seed, tuning=tuning,
                                           player_radius=player_radius)
        self._canvas = pygame.Surface(surface.as_tuple())
        self._input_target: Tuple[float, float] = self._session.home_position()
        self._handle: Optional[FrameHandle] = None
        self._final_score: Optional[int] = None
        self._runs = 0

    # =========================================================================
    # Properties
    # =========================================================================

    def _get_internal_state(self) -> GameState:
        return self._session.state

    def get_score(self) -> int:
        return self._session.display_score

    @property
    def session(self) -> SessionData:
        return self._session

    @property
    def scheduler(self) -> FrameScheduler:
        return self._scheduler

    @property
    def canvas(self) -> pygame.Surface:
        """Play surface the ticks draw into."""
        return self._canvas

    @property
    def surface_size(self) -> Resolution:
        return self._session.surface

    @property
    def input_target(self) -> Tuple[float, float]:
        return self._input_target

    @property
    def final_score(self) -> Optional[int]:
        """Displayed score of the last finished run, if any."""
        return self._final_score

    @property
    def is_scheduled(self) -> bool:
        return self._handle is not None and self._handle.active

    @property
    def canvas_origin(self) -> Tuple[int, int]:
        """Top-left of the canvas in window coordinates (centered)."""
        view_w, view_h = self._viewport()
        return ((view_w - self._session.surface.width) // 2,
                (view_h - self._session.surface.height) // 2)

    # =========================================================================
    # State machine
    # =========================================================================

    def start(self) -> None:
        """Begin a fresh run from any state."""
        self._stop_schedule()
        self._apply_surface(fit_surface(*self._viewport()))

        session = self._session
        session.reset()
        session.state = GameState.PLAYING
        self._input_target = session.home_position()
        self._final_score = None
        self._runs += 1

        if self._on_score:
            self._on_score(0)

        log.info("run %d started on %s", self._runs, session.surface)
        emit_record('session', {
            'type': 'session_start',
            'run': self._runs,
            'width': session.surface.width,
            'height': session.surface.height,
        })

        self._handle = self._scheduler.schedule(self.tick)

    def restart(self) -> None:
        """Start over after a game over. Identical reset to start()."""
        self.start()

    def close(self) -> None:
        """Abort the current run (or dismiss the game over screen)."""
        self._stop_schedule()
        if self._session.state != GameState.IDLE:
            log.info("closed from %s", self._session.state.value)
        self._session.state = GameState.IDLE

    def resize(self, viewport_size: Optional[Tuple[int, int]] = None) -> Resolution:
        """Refit the play surface; park the ship if no run is active.

        Args:
            viewport_size: New viewport size, or None to query the viewport

        Returns:
            The new play surface size
        """
        size = viewport_size or self._viewport()
        surface = fit_surface(*size)
        self._apply_surface(surface)
        if not self._session.is_running:
            self._session.player.x, self._session.player.y = self._session.home_position()
        log.debug("resized play surface to %s", surface)
        return surface

    def _apply_surface(self, surface: Resolution) -> None:
        self._session.surface = surface
        if self._canvas.get_size() != surface.as_tuple():
            self._canvas = pygame.Surface(surface.as_tuple())

    def _stop_schedule(self) -> None:
        self._scheduler.cancel(self._handle)
        self._handle = None

    def _end(self) -> None:
        self._stop_schedule()
        self._final_score = self._session.display_score
        if self._on_final_score:
            self._on_final_score(self._final_score)

        log.info("run %d over: score %d", self._runs, self._final_score)
        emit_record('session', {
            'type': 'session_end',
            'run': self._runs,
            'score': self._final_score,
            'ticks': self._session.score,
        })

    # =========================================================================
    # Frame loop
    # =========================================================================

    def tick(self) -> StepResult:
        """One scheduled frame: step, draw, report, reschedule."""
        self._handle = None
        run = self._runs
        result = step(self._session, self._input_target)
        if result == StepResult.IDLE:
            return result

        self._renderer.draw(self._canvas, self._session)

        if self._on_score:
            self._on_score(self._session.display_score)

        # A callback that started a new run owns the schedule from here on
        if self._runs != run or self._handle is not None:
            return result

        if result == StepResult.COLLISION:
            self._end()
        elif self._session.is_running:
            self._handle = self._scheduler.schedule(self.tick)
        return result

    def handle_input(self, events: List[InputEvent]) -> None:
        """Steer toward the newest pointer position."""
        if events:
            position = events[-1].position
            self._input_target = (position.x, position.y)

    def update(self, dt: float) -> None:
        """Run the frame's queued callbacks (at most one tick)."""
        self._scheduler.run_pending()

    def render(self, screen: pygame.Surface) -> None:
        """Compose canvas and overlays onto the window."""
        screen.fill(WINDOW_BACKGROUND)

        # Ticks only draw while playing; keep the parked ship visible when idle
        if self._session.state == GameState.IDLE:
            self._renderer.draw(self._canvas, self._session)

        origin = self.canvas_origin
        screen.blit(self._canvas, origin)

        area_rect = self._canvas.get_rect(topleft=origin).clip(screen.get_rect())
        if area_rect.width == 0 or area_rect.height == 0:
            return
        area = screen.subsurface(area_rect)

        state = self._session.state
        if state == GameState.PLAYING:
            self._renderer.draw_hud(area, self._session.display_score)
        elif state == GameState.GAME_OVER:
            self._renderer.draw_game_over(area, self._final_score or 0)
        else:
            self._renderer.draw_start_screen(area)

    def reset(self) -> None:
        """Back to IDLE with a cleared session."""
        self.close()
        self._session.reset()
        self._final_score = None
