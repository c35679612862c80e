# sudoku_render.py
"""
Rendu matplotlib d'une partie (PNG ou PDF selon l'extension) :
- chiffres de départ dans GIVEN_COLOR,
- chiffres saisis par le joueur dans ADDED_COLOR,
- cases révélées par un indice sur fond HINT_SHADE_COLOR.
"""

from __future__ import annotations
from typing import Optional, Set

import matplotlib.pyplot as plt

from sudoku_core import Grid, Pos, SIZE, BOX

FIG_SIZE_DEFAULT = 6.0

DEFAULT_GIVEN_COLOR = "black"
DEFAULT_ADDED_COLOR = "#1f4e9c"

BLOCK_SHADE_COLOR = "#e9e9e9"
GIVEN_SHADE_COLOR = "#D8E2DC"
HINT_SHADE_COLOR = "#d1ffd1"


def _shade_cell(ax, left: float, bottom: float, cell: float, r: int, c: int, color: str):
    ax.add_patch(
        plt.Rectangle(
            (left + c * cell, bottom + (SIZE - 1 - r) * cell),
            cell,
            cell,
            facecolor=color,
            edgecolor="none",
            zorder=1,
        )
    )


def draw_grid_at(
    ax,
    grid: Grid,
    left: float,
    bottom: float,
    size: float,
    puzzle_grid: Optional[Grid] = None,
    hinted: Optional[Set[Pos]] = None,
    given_color: str = DEFAULT_GIVEN_COLOR,
    added_color: str = DEFAULT_ADDED_COLOR,
):
    cell = size / SIZE
    block = size / BOX

    # --- Fond alterné par bloc 3x3 ---
    for br in range(BOX):
        for bc in range(BOX):
            if (br + bc) % 2 == 0:
                ax.add_patch(
                    plt.Rectangle(
                        (left + bc * block, bottom + br * block),
                        block,
                        block,
                        facecolor=BLOCK_SHADE_COLOR,
                        edgecolor="none",
                        zorder=0,
                    )
                )

    # Cases de départ et cases révélées par indice
    for r in range(SIZE):
        for c in range(SIZE):
            if hinted and (r, c) in hinted:
                _shade_cell(ax, left, bottom, cell, r, c, HINT_SHADE_COLOR)
            elif puzzle_grid is not None and puzzle_grid[r][c] != 0:
                _shade_cell(ax, left, bottom, cell, r, c, GIVEN_SHADE_COLOR)

    ax.add_patch(
        plt.Rectangle((left, bottom), size, size, fill=False, linewidth=3, color="k", zorder=3)
    )

    for i in range(1, SIZE):
        lw = 2 if i % BOX == 0 else 0.8
        ax.plot(
            [left + i * cell, left + i * cell],
            [bottom, bottom + size],
            linewidth=lw,
            color="k",
            zorder=2,
        )
        ax.plot(
            [left, left + size],
            [bottom + i * cell, bottom + i * cell],
            linewidth=lw,
            color="k",
            zorder=2,
        )

    font_pts = cell * 0.5 * 72
    for r in range(SIZE):
        for c in range(SIZE):
            v = grid[r][c]
            if not v:
                continue
            given = puzzle_grid is None or puzzle_grid[r][c] != 0
            ax.text(
                left + c * cell + cell / 2,
                bottom + (SIZE - 1 - r) * cell + cell * 0.47,
                str(v),
                ha="center",
                va="center",
                fontsize=font_pts,
                fontweight="bold" if given else "normal",
                color=given_color if given else added_color,
                zorder=4,
            )


def draw_game_figure(
    grid: Grid,
    puzzle_grid: Optional[Grid] = None,
    hinted: Optional[Set[Pos]] = None,
    title: str = "Sudoku",
    fig_size: float = FIG_SIZE_DEFAULT,
):
    plt.rcParams["font.family"] = "DejaVu Sans"
    fig = plt.figure(figsize=(fig_size, fig_size))
    ax = fig.gca()
    ax.set_xlim(0, fig_size)
    ax.set_ylim(0, fig_size)
    ax.axis("off")

    margin = 0.5
    size = fig_size - 2 * margin
    draw_grid_at(ax, grid, margin, margin * 0.6, size, puzzle_grid=puzzle_grid, hinted=hinted)

    ax.text(
        fig_size / 2,
        fig_size - 0.15,
        title,
        ha="center",
        va="top",
        fontsize=12,
        fontweight="bold",
    )
    return fig


def save_grid_image(
    grid: Grid,
    path: str,
    puzzle_grid: Optional[Grid] = None,
    hinted: Optional[Set[Pos]] = None,
    title: str = "Sudoku",
) -> str:
    fig = draw_game_figure(grid, puzzle_grid=puzzle_grid, hinted=hinted, title=title)
    try:
        fig.savefig(path, dpi=150, bbox_inches="tight")
    finally:
        plt.close(fig)
    return path
