from typing import Dict, Optional

import pygame

from schedcore import Process, RunResult
from schedcore.config import ALGORITHM_TITLES

from .draw_helpers import draw_panel
from .theme import GANTT_BG, GRID, MUTED, OUTLINE, TEXT
from .utils import pid_color, px_per_unit, segments, tick_step


def statistic_label(result: RunResult) -> str:
    if result.algorithm == "RR":
        return f"Total turnaround: {int(result.statistic)}"
    return f"Avg waiting: {result.statistic:.2f}"


def draw_gantt(screen, rect, result: RunResult, font, small, hover_items=None,
               proc_map: Optional[Dict[int, Process]] = None, selected=False, scale_time: int = 0):
    """One run as a Gantt strip. `scale_time` keeps every strip on the same time axis."""
    title = f"{ALGORITHM_TITLES.get(result.algorithm, result.algorithm)}   |   {statistic_label(result)}"
    draw_panel(screen, rect, title, font, selected=selected)

    inner = pygame.Rect(rect.x + 12, rect.y + 44, rect.w - 24, rect.h - 56)
    pygame.draw.rect(screen, GANTT_BG, inner, border_radius=10)

    if not result.intervals:
        msg = small.render("(empty run)", True, MUTED)
        screen.blit(msg, (inner.x + 10, inner.y + 10))
        return

    total_t = max(scale_time, result.final_time)
    px = px_per_unit(inner.w - 20, total_t)

    x0 = inner.x + 10
    y0 = inner.y + 8
    h = max(18, inner.h - 40)

    for pid, s, e, order in segments(result.intervals):
        bx = x0 + s * px
        bw = max(1, (e - s) * px)
        block = pygame.Rect(bx, y0, bw, h)
        pygame.draw.rect(screen, pid_color(pid), block, border_radius=6)
        pygame.draw.rect(screen, OUTLINE, block, 2, border_radius=6)

        label = small.render(pid, True, (10, 10, 10))
        if bw >= label.get_width() + 8:
            screen.blit(label, (bx + 4, y0 + h // 2 - label.get_height() // 2))

        if hover_items is not None:
            p = proc_map.get(order) if proc_map else None
            if p is not None:
                hover_items.append((
                    block,
                    [
                        f"PID: {p.name}  {p.description}",
                        f"AT: {p.arrival_time}   BT: {p.burst_time}   PR: {p.priority}",
                        f"Segment: {s} → {e}",
                    ],
                ))
            else:
                hover_items.append((block, [pid, f"Segment: {s} → {e}"]))

    step = tick_step(total_t)
    for t in range(0, total_t + 1, step):
        mx = x0 + t * px
        pygame.draw.line(screen, GRID, (mx, y0 + h + 2), (mx, y0 + h + 10), 2)
        tt = small.render(str(t), True, MUTED)
        screen.blit(tt, (mx - tt.get_width() // 2, y0 + h + 12))


def draw_metrics_table(screen, rect, result: RunResult, font, tiny):
    draw_panel(screen, rect, f"Per-Process Metrics: {ALGORITHM_TITLES.get(result.algorithm, result.algorithm)}", font)

    cols = ["PID", "AT", "BT", "PR", "ST", "CT", "TAT", "WT", "RT"]
    col_w = [140, 70, 70, 70, 70, 70, 70, 70, 70]

    tx = rect.x + 14
    ty = rect.y + 44
    for c, w in zip(cols, col_w):
        screen.blit(tiny.render(c, True, TEXT), (tx, ty))
        tx += w

    ty += 22
    row_h = 20
    max_rows = max(1, (rect.bottom - ty - 10) // row_h)
    for r in result.rows[:max_rows]:
        tx = rect.x + 14
        for c, w in zip(cols, col_w):
            screen.blit(tiny.render(str(r.get(c, "-")), True, MUTED), (tx, ty))
            tx += w
        ty += row_h

    if len(result.rows) > max_rows:
        more = tiny.render(f"(+{len(result.rows) - max_rows} more rows)", True, MUTED)
        screen.blit(more, (rect.right - 14 - more.get_width(), rect.y + 12))

    summary = (
        f"avg WT {result.avg_wt:.2f}   avg TAT {result.avg_tat:.2f}   avg RT {result.avg_rt:.2f}   "
        f"CPU {result.cpu_util:.1f}%   makespan {result.final_time}"
    )
    s = tiny.render(summary, True, TEXT)
    screen.blit(s, (rect.x + 14, rect.bottom - 26))
