"""Application des déductions sur la grille."""

from typing import Iterable, List

from src.lib.s0_coordinates.types import Coord
from src.lib.s3_storage.board import Board
from .types import ActionKind, Deduction


class BoardEffects:
    """
    Réalisation des actions déduites.
    L'implémentation de base ne fait rien (exécution à blanc) ; la boucle de jeu
    branche un effet qui clique puis relit la grille.
    """

    def reveal(self, board: Board, coord: Coord) -> None:
        pass

    def flag(self, board: Board, coord: Coord) -> None:
        pass


def apply_targets(
    board: Board,
    targets: Iterable[Coord],
    action: ActionKind,
    effects: BoardEffects,
) -> List[Deduction]:
    """
    Applique une action à chaque cible, en ordre ligne par ligne.
    Une cible qui n'est plus non révélée (ouverte en cascade par une action
    précédente) est ignorée. Un marquage est écrit dans la grille avant l'action.
    """
    applied: List[Deduction] = []
    for coord in sorted(targets, key=lambda c: (c.row, c.col)):
        if not board.get(coord).is_unrevealed:
            continue
        if action == ActionKind.FLAG:
            board.flag(coord)
            effects.flag(board, coord)
        else:
            effects.reveal(board, coord)
        applied.append(Deduction(coord=coord, action=action))
    return applied
