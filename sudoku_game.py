# sudoku_game.py
"""
Logique de partie :
- création d'un puzzle à partir d'une grille complète (retrait de cases)
- validation d'une grille joueur contre la solution
- indices (révèle une case à la fois)
- GameSession : une partie en cours (puzzle, solution, grille du joueur)

Aucune garantie d'unicité de la solution : le joueur doit retrouver
exactement la solution conservée.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Set
import random

from sudoku_core import (
    Grid,
    Pos,
    SIZE,
    copy_grid,
    count_filled,
    generate_full_grid,
)

DEFAULT_REMOVALS = 40
MAX_REMOVALS = SIZE * SIZE

# Messages affichés par l'interface (texte, couleur)
VALID_MESSAGE = ("Bravo ! Le sudoku est correctement résolu.", "green")
INVALID_MESSAGE = ("Il y a des erreurs dans la grille. Réessaie.", "red")
NO_HINT_MESSAGE = ("Plus aucun indice disponible.", "blue")


@dataclass(frozen=True)
class Hint:
    row: int
    col: int
    value: int


# ---------- Retrait de cases ----------

def remove_numbers(
    solution: Grid,
    removals: int = DEFAULT_REMOVALS,
    rng: Optional[random.Random] = None,
) -> Grid:
    """
    Retourne une copie de `solution` dont exactement `removals` cases
    distinctes ont été vidées (tirage aléatoire uniforme, on retire
    jusqu'à tomber sur une case encore pleine).
    La grille `solution` n'est jamais modifiée.
    """
    if not 0 <= removals <= MAX_REMOVALS:
        raise ValueError(f"Nombre de cases à retirer invalide : {removals} (0..{MAX_REMOVALS}).")

    rnd = rng or random
    puzzle = copy_grid(solution)
    remaining = removals
    while remaining > 0:
        r = rnd.randrange(SIZE)
        c = rnd.randrange(SIZE)
        if puzzle[r][c] != 0:
            puzzle[r][c] = 0
            remaining -= 1
    return puzzle


def new_game(
    removals: int = DEFAULT_REMOVALS,
    shuffle: bool = False,
    rng: Optional[random.Random] = None,
) -> Tuple[Grid, Grid]:
    """Nouvelle partie : (puzzle, solution), deux grilles indépendantes."""
    solution = generate_full_grid(shuffle=shuffle, rng=rng)
    puzzle = remove_numbers(solution, removals, rng=rng)
    return puzzle, solution


# ---------- Validation & indices ----------

def validate_grid(user_grid: Grid, solution: Grid) -> bool:
    # une case vide compte comme une erreur : "valide" = complet ET correct
    for r in range(SIZE):
        for c in range(SIZE):
            v = user_grid[r][c]
            if v == 0 or v != solution[r][c]:
                return False
    return True


def provide_hint(user_grid: Grid, solution: Grid) -> Optional[Hint]:
    """
    Remplit la première case vide (ordre ligne par ligne) de `user_grid`
    avec la valeur de la solution. Retourne l'indice, ou None si la grille
    est déjà pleine (aucune modification dans ce cas).
    """
    for r in range(SIZE):
        for c in range(SIZE):
            if user_grid[r][c] == 0:
                user_grid[r][c] = solution[r][c]
                return Hint(r, c, solution[r][c])
    return None


def last_typed_char(text: str) -> str:
    """Une case ne garde qu'un caractère : le dernier tapé."""
    s = (text or "").strip()
    return s[-1:]


def parse_cell_value(text: str) -> int:
    """Saisie d'une case : '' -> 0 (vide), '1'..'9' -> chiffre."""
    s = (text or "").strip()
    if not s:
        return 0
    if len(s) != 1 or s not in "123456789":
        raise ValueError(f"Saisie invalide : {text!r} (un seul chiffre de 1 à 9).")
    return int(s)


# ---------- Partie en cours ----------

@dataclass
class GameSession:
    removals: int = DEFAULT_REMOVALS
    shuffle: bool = False
    rng: Optional[random.Random] = None
    puzzle: Grid = field(default_factory=list)
    solution: Grid = field(default_factory=list)
    grid: Grid = field(default_factory=list)
    hinted: Set[Pos] = field(default_factory=set)

    def __post_init__(self):
        if not self.solution:
            self.new_game()

    def new_game(self) -> None:
        self.puzzle, self.solution = new_game(self.removals, shuffle=self.shuffle, rng=self.rng)
        self.grid = copy_grid(self.puzzle)
        self.hinted = set()

    def is_given(self, row: int, col: int) -> bool:
        return self.puzzle[row][col] != 0

    def set_cell(self, row: int, col: int, value: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise ValueError(f"Case hors grille : ({row}, {col}).")
        if not 0 <= value <= SIZE:
            raise ValueError(f"Valeur invalide : {value} (0..{SIZE}).")
        if self.is_given(row, col):
            raise ValueError(f"La case ({row}, {col}) est un indice de départ.")
        # une case modifiée par le joueur n'est plus un indice
        if value != self.grid[row][col]:
            self.hinted.discard((row, col))
        self.grid[row][col] = value

    def enter(self, row: int, col: int, text: str) -> None:
        self.set_cell(row, col, parse_cell_value(text))

    def validate(self) -> bool:
        return validate_grid(self.grid, self.solution)

    def hint(self) -> Optional[Hint]:
        h = provide_hint(self.grid, self.solution)
        if h is not None:
            self.hinted.add((h.row, h.col))
        return h

    def filled_count(self) -> int:
        return count_filled(self.grid)

    def empty_cells(self) -> List[Pos]:
        return [(r, c) for r in range(SIZE) for c in range(SIZE) if self.grid[r][c] == 0]
