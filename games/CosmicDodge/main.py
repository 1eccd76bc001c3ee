#!/usr/bin/env python3
"""
Cosmic Dodge - Standalone entry point.

Usage:
    python main.py
    python main.py --fullscreen
    python main.py --width 1280 --height 900 --seed 7
"""

import argparse
import os
import sys

import pygame

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from dodgekit.games import GameState
from dodgekit.games.input.input_manager import InputManager
from dodgekit.games.input.sources.pointer import PointerInputSource
from dodgekit.logging import (
    FileSink,
    close_all_sinks,
    configure_logging,
    create_sink_for_module,
    get_logger,
    register_sink,
)
from games.CosmicDodge.config import FPS, WINDOW_HEIGHT, WINDOW_WIDTH
from games.CosmicDodge.game_info import get_game_mode
from games.CosmicDodge.game_mode import CosmicDodgeMode

log = get_logger('cosmic_dodge.main')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cosmic Dodge")
    parser.add_argument('--width', type=int, default=WINDOW_WIDTH, help='Window width')
    parser.add_argument('--height', type=int, default=WINDOW_HEIGHT, help='Window height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--log-level', type=str, default=None, help='Console log level')
    for arg in CosmicDodgeMode.get_arguments():
        spec = {k: v for k, v in arg.items() if k != 'name'}
        if arg['name'] == '--fps':
            spec['default'] = FPS
        parser.add_argument(arg['name'], **spec)
    return parser


def main(argv=None):
    """Run Cosmic Dodge with mouse/touch input."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)
    session_sink = create_sink_for_module('session')
    register_sink('session', session_sink)

    pygame.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Cosmic Dodge")

    game = get_game_mode(
        display=screen,
        viewport=lambda: pygame.display.get_surface().get_size(),
        seed=args.seed,
        player_radius=args.player_radius,
        lerp_factor=args.lerp_factor,
        collision_margin=args.collision_margin,
    )
    if game is None:
        pygame.quit()
        return 1

    input_manager = InputManager(PointerInputSource(surface_origin=lambda: game.canvas_origin))

    print("=" * 50)
    print("COSMIC DODGE")
    print("=" * 50)
    print("\nDodge the asteroids!")
    print("\nControls:")
    print("  - Move the mouse (or drag a finger) to steer")
    print("  - SPACE / ENTER to play or play again")
    print("  - ESC to close the run (ESC again to quit)")
    print("  - Q to quit")
    print("=" * 50)

    clock = pygame.time.Clock()
    running = True

    try:
        while running:
            dt = clock.tick(args.fps) / 1000.0

            # Pointer events first; everything else is re-posted for the loop below
            input_manager.update(dt)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    game.resize(event.size)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_q:
                        running = False
                    elif event.key == pygame.K_ESCAPE:
                        if game.state == GameState.IDLE:
                            running = False
                        else:
                            game.close()
                    elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                        if game.state == GameState.GAME_OVER:
                            game.restart()
                            input_manager.clear_events()
                        elif game.state == GameState.IDLE:
                            game.start()
                            input_manager.clear_events()

            game.handle_input(input_manager.get_events())
            game.update(dt)

            game.render(pygame.display.get_surface())
            pygame.display.flip()
    finally:
        close_all_sinks()
        if isinstance(session_sink, FileSink):
            for path in session_sink.log_paths.values():
                log.info("session log written to %s", path)
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
