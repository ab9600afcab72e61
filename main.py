
import sys

import pygame

from neon_config import CONFIG
from neon_game import Game
from neon_input import Action, action_for_key
from neon_layout import compute_dims
from neon_log import setup_logger
from neon_loop import FrameScheduler, GameLoop
from neon_render import NeonPresenter


def create_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logger = setup_logger(name="neon_tetris", level=str(CONFIG["LOG_LEVEL"]))
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])

    dims = compute_dims()
    screen = create_window(dims)
    pygame.display.set_caption("Neon Tetris")
    font = pygame.font.SysFont(None, 26)
    big_font = pygame.font.SysFont(None, 56, bold=True)

    presenter = NeonPresenter(screen, dims, font, big_font)
    scheduler = FrameScheduler()
    loop = GameLoop(Game(), scheduler, presenter)
    clock = pygame.time.Clock()

    # Idle screen until the first start
    screen.blit(presenter.bg, (0, 0))
    presenter.start_enabled("Start", True)
    logger.info("press Enter or click Start")

    while True:
        clock.tick(CONFIG["TARGET_FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                loop.handle(action_for_key(e.key))
            if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 and presenter.button_hit(e.pos):
                loop.handle(Action.START)

        scheduler.run_pending(pygame.time.get_ticks())


if __name__ == '__main__':
    main()
