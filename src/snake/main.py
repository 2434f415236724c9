# main.py
import argparse
import logging
import sys

import pygame  # type: ignore

from .config import ARENA, CFG, Config
from .controls import InputState, handle_input, poll_quit, read_keys
from .game import advance, new_game_state, snapshot
from .render import Sprites, draw_game, draw_game_over
from .spawner import SpawnError

logger = logging.getLogger(__name__)

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake arcade game")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="food placement seed")
    parser.add_argument("--speed", type=float, default=CFG.speed,
                        help="baseline seconds between ticks")
    parser.add_argument("--fps", type=int, default=CFG.fps, help="render frame cap")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)

def wait_for_exit(clock: pygame.time.Clock) -> None:
    while True:
        for event in pygame.event.get():
            if event.type in (pygame.QUIT, pygame.KEYDOWN):
                return
        clock.tick(30)

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    cfg = Config(seed=args.seed, speed=args.speed, fps=args.fps)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((int(ARENA.width), int(ARENA.height)))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()
    sprites = Sprites(ARENA)

    try:
        state = new_game_state(pygame.time.get_ticks() / 1000.0, cfg, ARENA)
        inputs = InputState()

        while not state.game_over:
            # 1) input
            if poll_quit():
                logger.info(f"Window closed, score {state.score}")
                break
            inputs.update(read_keys())
            handle_input(state, inputs)

            # 2) update
            advance(state, pygame.time.get_ticks() / 1000.0)

            # 3) render
            draw_game(screen, font, sprites, snapshot(state), state.score, state.speed, ARENA)
            pygame.display.flip()
            clock.tick(cfg.fps)  # movement gated inside advance

        if state.game_over:
            print("Game Over", file=sys.stderr)
            print(f"Your Score: {state.score}", file=sys.stderr)
            draw_game_over(screen, font, state.score, ARENA)
            pygame.display.flip()
            wait_for_exit(clock)
        return state.score
    except SpawnError as e:
        logger.error(f"Cannot place food, stopping: {e}")
        raise SystemExit(1) from e
    finally:
        pygame.quit()

def run() -> None:
    """Console entry point; the score is reported, not used as exit status."""
    main()

if __name__ == "__main__":
    run()
