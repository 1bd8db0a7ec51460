"""Open a pygame window and animate the dot cloud until it is closed."""

import logging

import pygame

from dotfield.cache import FrameCache
from dotfield.params import Params
from dotfield.py_helper.config_utils import (
    config_path,
    load_toml_config,
    params_from_config,
    resolve_colors,
    resolve_size,
)

log = logging.getLogger(__name__)


def _hex_to_rgb(value: str) -> tuple[int, int, int]:
    value = value.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #rrggbb color, got {value!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def draw_frame(
    surface: pygame.Surface,
    params: Params,
    dots,
    background: tuple[int, int, int],
    fill: tuple[int, int, int],
) -> int:
    if params.render.invert:
        background, fill = fill, background

    surface.fill(background)
    sx = surface.get_width() / params.canvas.width
    sy = surface.get_height() / params.canvas.height
    threshold = params.render.threshold

    drawn = 0
    for d in dots:
        if threshold is not None and d.w < threshold:
            continue
        radius = max(1, round(d.r * sx))
        pygame.draw.circle(surface, fill, (round(d.x * sx), round(d.y * sy)), radius)
        drawn += 1
    return drawn


def run_window(
    width: int,
    height: int,
    title: str,
    params: Params | None = None,
    colors: dict[str, str] | None = None,
    max_frames: int | None = None,
) -> int:
    """
    Open a width x height window and run until close is requested.

    With params, every tick draws the dots for the elapsed time. max_frames
    stops the loop early (useful without a display). Returns the number of
    ticks run. Display errors (pygame.error) propagate.
    """
    colors = colors or {"bg": "#0b0c10", "stroke": "#f5f5f5"}
    background = _hex_to_rgb(colors["bg"])
    fill = _hex_to_rgb(colors["stroke"])

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        clock = pygame.time.Clock()
        cache = FrameCache(max_frames=4)

        elapsed = 0.0
        ticks = 0
        running = True
        while running:
            dt = clock.tick(60) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            if params is not None:
                draw_frame(screen, params, cache.get(params, elapsed), background, fill)
            else:
                screen.fill(background)
            pygame.display.flip()

            elapsed += dt
            ticks += 1
            if max_frames is not None and ticks >= max_frames:
                running = False
    finally:
        pygame.quit()

    log.debug("window closed after %d ticks", ticks)
    return ticks


if __name__ == "__main__":
    config = load_toml_config(config_path())
    width, height = resolve_size(config, fallback=(900, 900))
    params = params_from_config(config)
    run_window(width, height, f"dotfield seed={params.seed}", params, resolve_colors(config))
