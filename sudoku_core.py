# sudoku_core.py
"""
Moteur Sudoku commun :
- grille 9x9 (0 = case vide)
- contrôle de placement (ligne / colonne / bloc 3x3)
- backtracking pour remplir une grille complète
- UNITS pour vérifier une grille terminée
"""

from __future__ import annotations
import random
from typing import List, Tuple, Optional

Grid = List[List[int]]
Pos = Tuple[int, int]

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)

# ---------- UNITS ----------

UNITS: List[List[Pos]] = []

# Lignes
for r in range(SIZE):
    UNITS.append([(r, c) for c in range(SIZE)])
# Colonnes
for c in range(SIZE):
    UNITS.append([(r, c) for r in range(SIZE)])
# Blocs 3x3
for br in range(0, SIZE, BOX):
    for bc in range(0, SIZE, BOX):
        UNITS.append([(br + dr, bc + dc) for dr in range(BOX) for dc in range(BOX)])


# ---------- Grille ----------

def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def copy_grid(grid: Grid) -> Grid:
    """Copie indépendante (ligne par ligne)."""
    return [row[:] for row in grid]


def find_empty(grid: Grid) -> Optional[Pos]:
    """Première case vide en parcours ligne par ligne, ou None."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                return r, c
    return None


def count_filled(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v)


def is_complete_solution(grid: Grid) -> bool:
    """Vrai si chaque ligne, colonne et bloc contient 1..9 exactement une fois."""
    expected = set(DIGITS)
    for unit in UNITS:
        values = [grid[r][c] for (r, c) in unit]
        if set(values) != expected:
            return False
    return True


# ---------- Contrôle de placement ----------

def is_placement_safe(grid: Grid, row: int, col: int, digit: int) -> bool:
    """
    Vrai si `digit` n'apparaît ni dans la ligne `row`, ni dans la colonne `col`,
    ni dans le bloc 3x3 qui contient (row, col).
    """
    for x in range(SIZE):
        if grid[row][x] == digit:
            return False
    for x in range(SIZE):
        if grid[x][col] == digit:
            return False
    br, bc = row - row % BOX, col - col % BOX
    for rr in range(br, br + BOX):
        for cc in range(bc, bc + BOX):
            if grid[rr][cc] == digit:
                return False
    return True


# ---------- Backtracking ----------

def solve_in_place(
    grid: Grid,
    shuffle: bool = False,
    rng: Optional[random.Random] = None,
) -> bool:
    """
    Remplit `grid` par backtracking (cases en ordre ligne par ligne,
    chiffres 1..9 croissants). Retourne False si aucune complétion n'existe ;
    dans ce cas la grille est remise dans son état initial.

    shuffle=True : l'ordre des chiffres est mélangé à chaque case
    (grilles variées, résultat non déterministe).
    """
    empty = find_empty(grid)
    if empty is None:
        return True
    r, c = empty

    vals = list(DIGITS)
    if shuffle:
        (rng or random).shuffle(vals)

    for v in vals:
        if is_placement_safe(grid, r, c, v):
            grid[r][c] = v
            if solve_in_place(grid, shuffle, rng):
                return True
            grid[r][c] = 0  # retour arrière
    return False


def generate_full_grid(shuffle: bool = False, rng: Optional[random.Random] = None) -> Grid:
    """
    Génère une grille complète valide (9x9).

    Par défaut la recherche est déterministe : deux appels donnent la même
    grille. Passer shuffle=True pour obtenir une grille différente à chaque fois.
    """
    grid = empty_grid()
    if not solve_in_place(grid, shuffle=shuffle, rng=rng):
        raise RuntimeError("Impossible de remplir une grille 9x9 vide")
    return grid
