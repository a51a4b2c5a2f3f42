import math

import pygame


def draw_thick_segment(screen, color, start, end, width):
    """Line with round caps, like a canvas stroke with lineCap='round'."""
    pygame.draw.line(screen, color, start, end, width)
    radius = width / 2
    pygame.draw.circle(screen, color, start, radius)
    pygame.draw.circle(screen, color, end, radius)


def draw_dashed_line(screen, color, start, end, width=1, dash_length=10):
    x0, y0 = start
    x1, y1 = end
    length = math.hypot(x1 - x0, y1 - y0)
    if length == 0:
        return
    dx = (x1 - x0) / length
    dy = (y1 - y0) / length

    # Dash on, dash off
    pos = 0.0
    while pos < length:
        seg_end = min(pos + dash_length, length)
        pygame.draw.line(
            screen, color,
            (x0 + dx * pos, y0 + dy * pos),
            (x0 + dx * seg_end, y0 + dy * seg_end),
            width,
        )
        pos += dash_length * 2
