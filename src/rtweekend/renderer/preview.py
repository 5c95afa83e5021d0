# renderer/preview.py
import numpy as np
import pygame

def image_to_surface(image: np.ndarray) -> "pygame.Surface":
    """
    Convert a (height, width, 3) uint8 image into a pygame surface.
    surfarray is indexed [x, y], hence the transpose.
    """
    return pygame.surfarray.make_surface(np.ascontiguousarray(image.transpose(1, 0, 2)))

def show_image(image: np.ndarray, caption: str = "rtweekend", scale: int = 1) -> None:
    """
    Display a finished render in a window until it is closed or Escape is pressed.
    """
    pygame.init()
    try:
        height, width = image.shape[:2]
        window_size = (width * scale, height * scale)
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(caption)

        surf = image_to_surface(image)
        if scale != 1:
            surf = pygame.transform.scale(surf, window_size)
        screen.blit(surf, (0, 0))
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
