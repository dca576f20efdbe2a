"""Affichage texte de la grille (E = non révélée, M = mine marquée, chiffres)."""

from typing import Optional

from src.lib.s3_storage.board import Board


def format_board(board: Board, title: Optional[str] = None) -> str:
    lines = [title] if title else []
    lines.extend(board.to_rows())
    return "\n".join(lines)
