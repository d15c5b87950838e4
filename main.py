import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_input import Intent
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_session import Session, SESSION_OVER_POLICIES

KEYMAP = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_DOWN: Intent.SOFT_DROP,
    pygame.K_SPACE: Intent.ROTATE,
    pygame.K_RETURN: Intent.HARD_DROP,
    pygame.K_f: Intent.SWAP_FOCUS,
    pygame.K_r: Intent.RESTART,
}


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Two-board falling block puzzle")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"],
                   help="seed the piece sequence for a reproducible session")
    p.add_argument("--boards", type=int, default=CONFIG["BOARD_COUNT"])
    p.add_argument("--session-over", choices=SESSION_OVER_POLICIES,
                   default=CONFIG["SESSION_OVER"],
                   help="end the session when any or all boards top out")
    p.add_argument("--fall-period", type=float, default=CONFIG["FALL_PERIOD_S"],
                   help="seconds between gravity steps")
    p.add_argument("-v", "--verbose", action="store_true", default=CONFIG["VERBOSE"])
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    CONFIG.update({
        "SEED": args.seed,
        "BOARD_COUNT": args.boards,
        "SESSION_OVER": args.session_over,
        "FALL_PERIOD_S": args.fall_period,
        "VERBOSE": args.verbose,
    })
    setup_logging(args.verbose)

    session = Session(seed=CONFIG["SEED"])

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    dims = compute_dims(len(session.boards))
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Dual Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    while True:
        dt = clock.tick(60) / 1000.0
        intents = []
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN and e.key in KEYMAP:
                intents.append(KEYMAP[e.key])

        session.tick(dt, intents)
        render.draw(screen, session)
        pygame.display.flip()


if __name__ == '__main__':
    main()
