# renderer/preview.py
import logging
import numpy as np
import pygame

logger = logging.getLogger(__name__)

def image_to_surface(pixels: np.ndarray) -> pygame.Surface:
    """
    Convert a (height, width, 3) uint8 image to a pygame surface.
    pygame's surfarray is indexed [x, y], so the first two axes are swapped.
    """
    return pygame.surfarray.make_surface(np.ascontiguousarray(pixels.swapaxes(0, 1)))

def show_image(pixels: np.ndarray, scale: float = 1.0, caption: str = "Path Tracer") -> None:
    """
    Show a finished render in a window until it is closed or Escape is pressed.
    """
    height, width = pixels.shape[:2]
    window_size = (max(1, int(width * scale)), max(1, int(height * scale)))

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(caption)

        surf = image_to_surface(pixels)
        # Scale the render to fill the window
        surf = pygame.transform.scale(surf, window_size)
        screen.blit(surf, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(30)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
    finally:
        pygame.quit()
    logger.debug("Preview window closed")
