# renderer/preview.py
import numpy as np
import pygame


def to_surface(pixels: np.ndarray) -> pygame.Surface:
    """
    Convert a (height, width, 3) pixel array into a pygame surface.
    pygame indexes surfaces as (x, y), hence the transpose.
    """
    return pygame.surfarray.make_surface(np.ascontiguousarray(pixels.transpose(1, 0, 2)))


def show_image(pixels: np.ndarray, title: str = "spheretracer"):
    """
    Open a window showing the finished render until it is closed or
    Escape is pressed.
    """
    height, width, _ = pixels.shape
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        screen.blit(to_surface(pixels), (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
