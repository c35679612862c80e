# sudoku_gui.py
"""
Interface CustomTkinter pour jouer au Sudoku :
grille 9x9 saisissable, nouvelle partie, validation, indice et export image.
"""

from __future__ import annotations
import os

import customtkinter as ctk
from tkinter import messagebox

from sudoku_core import SIZE, BOX
from sudoku_game import (
    GameSession,
    DEFAULT_REMOVALS,
    MAX_REMOVALS,
    VALID_MESSAGE,
    INVALID_MESSAGE,
    NO_HINT_MESSAGE,
    last_typed_char,
)
from sudoku_render import (
    save_grid_image,
    GIVEN_SHADE_COLOR,
    HINT_SHADE_COLOR,
)

# Config par défaut
WINDOW_TITLE = "Sudoku"
DEFAULT_EXPORT_FILE = "sudoku_partie.png"
CELL_SIZE = 46
FREE_CELL_COLOR = "#ffffff"


def launch_gui():
    ctk.set_appearance_mode("light")
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title(WINDOW_TITLE)

    session = GameSession()

    # Variables TK
    removals_var = ctk.StringVar(value=str(DEFAULT_REMOVALS))
    shuffle_var = ctk.BooleanVar(value=False)
    message_var = ctk.StringVar(value="")
    status_var = ctk.StringVar(value="Prêt.")

    app.grid_columnconfigure(0, weight=1)

    ctk.CTkLabel(
        app,
        text=WINDOW_TITLE,
        font=ctk.CTkFont(size=24, weight="bold"),
    ).grid(row=0, column=0, pady=(15, 10))

    # ----- Grille -----
    frame_grid = ctk.CTkFrame(app, fg_color="black")
    frame_grid.grid(row=1, column=0, padx=20, pady=5)

    entries = {}

    def on_cell_edit(event, r, c):
        entry = entries[(r, c)]
        text = entry.get()
        if len(text) > 1:
            text = last_typed_char(text)
            entry.delete(0, "end")
            entry.insert(0, text)
        try:
            session.enter(r, c, text)
        except ValueError as e:
            entry.delete(0, "end")
            session.set_cell(r, c, 0)
            show_message(str(e), "red")
            return
        color = HINT_SHADE_COLOR if (r, c) in session.hinted else FREE_CELL_COLOR
        entry.configure(fg_color=color)
        show_message("", "black")

    for r in range(SIZE):
        for c in range(SIZE):
            # espace plus large entre les blocs 3x3
            pad_x = (3 if c % BOX == 0 else 1, 1)
            pad_y = (3 if r % BOX == 0 else 1, 1)
            entry = ctk.CTkEntry(
                frame_grid,
                width=CELL_SIZE,
                height=CELL_SIZE,
                justify="center",
                corner_radius=0,
                font=ctk.CTkFont(size=18),
            )
            entry.grid(row=r, column=c, padx=pad_x, pady=pad_y)
            entry.bind("<KeyRelease>", lambda e, r=r, c=c: on_cell_edit(e, r, c))
            entries[(r, c)] = entry

    # ----- Options -----
    frame_options = ctk.CTkFrame(app)
    frame_options.grid(row=2, column=0, padx=20, pady=(15, 5), sticky="ew")
    frame_options.grid_columnconfigure(1, weight=1)

    ctk.CTkLabel(frame_options, text=f"Cases à retirer (0–{MAX_REMOVALS})").grid(
        row=0, column=0, sticky="w", padx=5, pady=5
    )
    ctk.CTkEntry(frame_options, width=60, textvariable=removals_var).grid(
        row=0, column=1, sticky="w", padx=5, pady=5
    )
    ctk.CTkCheckBox(frame_options, text="Grilles variées", variable=shuffle_var).grid(
        row=0, column=2, sticky="e", padx=5, pady=5
    )

    # ----- Boutons -----
    frame_buttons = ctk.CTkFrame(app, fg_color="transparent")
    frame_buttons.grid(row=3, column=0, padx=20, pady=10)

    message_label = ctk.CTkLabel(app, textvariable=message_var, font=ctk.CTkFont(size=16))
    message_label.grid(row=4, column=0, pady=(5, 5))

    status_label = ctk.CTkLabel(app, textvariable=status_var, anchor="w")
    status_label.grid(row=5, column=0, padx=10, pady=(0, 10), sticky="w")

    def show_message(text: str, color: str):
        message_var.set(text)
        message_label.configure(text_color=color)

    def render_puzzle():
        for (r, c), entry in entries.items():
            entry.configure(state="normal")
            entry.delete(0, "end")
            v = session.grid[r][c]
            if v:
                entry.insert(0, str(v))
            if session.is_given(r, c):
                entry.configure(
                    state="disabled",
                    fg_color=GIVEN_SHADE_COLOR,
                    font=ctk.CTkFont(size=18, weight="bold"),
                )
            else:
                color = HINT_SHADE_COLOR if (r, c) in session.hinted else FREE_CELL_COLOR
                entry.configure(fg_color=color, font=ctk.CTkFont(size=18))
        show_message("", "black")

    # ==========================
    #   ACTIONS
    # ==========================

    def on_new_game():
        try:
            removals = int(removals_var.get())
            session.removals = removals
            session.shuffle = bool(shuffle_var.get())
            session.new_game()
            render_puzzle()
            print(
                f"[nouvelle partie] retirées={removals}, "
                f"variées={session.shuffle}, indices de départ={session.filled_count()}"
            )
            status_var.set(f"Nouvelle partie : {session.filled_count()} chiffres donnés.")
        except Exception as e:
            status_var.set("❌ Erreur lors de la création de la partie.")
            messagebox.showerror("Erreur", f"Une erreur est survenue : {e}")

    def on_validate():
        ok = session.validate()
        text, color = VALID_MESSAGE if ok else INVALID_MESSAGE
        show_message(text, color)
        empty = session.empty_cells()
        print(f"[validation] ok={ok}, remplies={session.filled_count()}/{SIZE * SIZE}")
        if empty:
            status_var.set(f"Cases vides restantes : {len(empty)}")

    def on_hint():
        hint = session.hint()
        if hint is None:
            show_message(*NO_HINT_MESSAGE)
            print("[indice] aucun indice disponible")
            return
        entry = entries[(hint.row, hint.col)]
        entry.delete(0, "end")
        entry.insert(0, str(hint.value))
        entry.configure(fg_color=HINT_SHADE_COLOR)
        print(f"[indice] ({hint.row}, {hint.col}) = {hint.value}")
        status_var.set(f"Indices utilisés : {len(session.hinted)}")

    def on_export():
        try:
            path = save_grid_image(
                session.grid,
                DEFAULT_EXPORT_FILE,
                puzzle_grid=session.puzzle,
                hinted=session.hinted,
                title=WINDOW_TITLE,
            )
            abs_path = os.path.abspath(path)
            print(f"[export] {abs_path}")
            status_var.set(f"✅ Image exportée : {path}")
        except Exception as e:
            status_var.set("❌ Erreur lors de l'export.")
            messagebox.showerror("Erreur", f"Une erreur est survenue : {e}")

    for col, (label, command) in enumerate(
        [
            ("Nouvelle partie", on_new_game),
            ("Valider", on_validate),
            ("Indice", on_hint),
            ("Exporter PNG", on_export),
        ]
    ):
        ctk.CTkButton(frame_buttons, text=label, command=command).grid(
            row=0, column=col, padx=5, pady=5
        )

    render_puzzle()
    app.mainloop()


if __name__ == "__main__":
    launch_gui()
