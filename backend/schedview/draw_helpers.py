import pygame

from .theme import (
    BORDER,
    HILITE,
    HILITE_ALPHA,
    PANEL,
    SHADOW,
    SHADOW_ALPHA,
    SHADOW_OFFSET,
    TEXT,
    H,
    W,
)


def draw_shadow_rect(screen, rect, radius=14, alpha=SHADOW_ALPHA, offset=SHADOW_OFFSET):
    shadow_surf = pygame.Surface((rect.w + 14, rect.h + 14), pygame.SRCALPHA)
    shadow_rect = pygame.Rect(7, 7, rect.w, rect.h)
    pygame.draw.rect(shadow_surf, (*SHADOW, alpha), shadow_rect, border_radius=radius)
    screen.blit(shadow_surf, (rect.x + offset[0] - 7, rect.y + offset[1] - 7))


def draw_inner_highlight(screen, rect, radius=14, alpha=HILITE_ALPHA):
    band = pygame.Surface((rect.w - 6, 26), pygame.SRCALPHA)
    pygame.draw.rect(band, (*HILITE, alpha), pygame.Rect(0, 0, band.get_width(), band.get_height()), border_radius=radius)
    screen.blit(band, (rect.x + 3, rect.y + 3))


def draw_panel(screen, rect, title, font, selected=False):
    draw_shadow_rect(screen, rect)
    pygame.draw.rect(screen, PANEL, rect, border_radius=14)
    draw_inner_highlight(screen, rect)
    pygame.draw.rect(screen, BORDER, rect, 3 if selected else 2, border_radius=14)
    t = font.render(title, True, TEXT)
    screen.blit(t, (rect.x + 12, rect.y + 10))


def draw_tooltip(screen, pos, lines, tiny, max_w=460):
    """Simple hover tooltip. `lines` is a list[str]."""
    if not lines:
        return

    pad_x, pad_y = 10, 8
    line_h = tiny.get_height() + 4

    rendered = [tiny.render(str(ln), True, TEXT) for ln in lines]
    w = min(max(s.get_width() for s in rendered) + pad_x * 2, max_w)
    h = len(rendered) * line_h + pad_y * 2

    mx, my = pos
    x = mx + 14
    y = my + 14

    # keep inside window
    if x + w > W - 8:
        x = mx - w - 14
    if y + h > H - 8:
        y = my - h - 14
    x = max(8, min(W - w - 8, x))
    y = max(8, min(H - h - 8, y))

    box = pygame.Rect(x, y, w, h)
    draw_shadow_rect(screen, box, radius=10, alpha=SHADOW_ALPHA - 10, offset=(0, 4))

    body = pygame.Surface((w, h), pygame.SRCALPHA)
    body.fill((18, 19, 22, 240))
    pygame.draw.rect(body, (*BORDER, 230), pygame.Rect(0, 0, w, h), 2, border_radius=10)
    screen.blit(body, (x, y))

    ty = y + pad_y
    for surf in rendered:
        screen.blit(surf, (x + pad_x, ty))
        ty += line_h
