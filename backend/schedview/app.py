from typing import List

import pygame

from schedcore import ProcessTable, RunResult

from .draw_helpers import draw_tooltip
from .panels import draw_gantt, draw_metrics_table
from .theme import BG, FPS, MUTED, TEXT, H, W


def gantt_rects(count: int, top: int = 70, bottom: int = 560, gap: int = 10) -> List[pygame.Rect]:
    count = max(1, count)
    h = (bottom - top - gap * (count - 1)) // count
    return [pygame.Rect(20, top + i * (h + gap), W - 40, h) for i in range(count)]


def run(results: List[RunResult], table: ProcessTable):
    """Show the finished runs until the window is closed or ESC is pressed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((W, H))
        pygame.display.set_caption("CPU Scheduling Simulator")
        clock = pygame.time.Clock()

        title_font = pygame.font.SysFont("arial", 28, bold=True)
        font = pygame.font.SysFont("arial", 20, bold=True)
        small = pygame.font.SysFont("arial", 16)
        tiny = pygame.font.SysFont("arial", 14)

        proc_map = table.by_order()
        scale_time = max((r.final_time for r in results), default=0)
        rects = gantt_rects(len(results))
        selected = 0

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in (pygame.K_RIGHT, pygame.K_DOWN) and results:
                        selected = (selected + 1) % len(results)
                    elif event.key in (pygame.K_LEFT, pygame.K_UP) and results:
                        selected = (selected - 1) % len(results)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    for idx, rect in enumerate(rects[:len(results)]):
                        if rect.collidepoint(event.pos):
                            selected = idx

            screen.fill(BG)
            hdr = title_font.render("Scheduling Comparison", True, TEXT)
            screen.blit(hdr, (W // 2 - hdr.get_width() // 2, 18))
            hint = tiny.render("←/→ or click: select run    ESC: quit", True, MUTED)
            screen.blit(hint, (W - 20 - hint.get_width(), 28))

            hover_items = []
            for idx, (result, rect) in enumerate(zip(results, rects)):
                draw_gantt(screen, rect, result, font, small, hover_items=hover_items,
                           proc_map=proc_map, selected=(idx == selected), scale_time=scale_time)

            if results:
                draw_metrics_table(screen, pygame.Rect(20, 580, W - 40, H - 600), results[selected], font, tiny)

            mouse = pygame.mouse.get_pos()
            for block, lines in hover_items:
                if block.collidepoint(mouse):
                    draw_tooltip(screen, mouse, lines, tiny)
                    break

            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
