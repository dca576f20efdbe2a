import pytest

from simulated_game import SimulatedGame

# Grille 9x9 : mines isolées, entièrement déductible depuis le premier clic (1, 2)
BEGINNER_LAYOUT = [
    ". . . . . . . . *",
    ". . . . . . . . .",
    ". . . . . . . . .",
    ". . . . . . . . .",
    ". . . . * . . . .",
    ". . . . . . . . .",
    ". . . . . . . . .",
    ". . . . . . . . .",
    "* . . . . . . * *",
]

# Motif 1-2-1 au bord : insoluble en SIMPLE seul
ONE_TWO_ONE_LAYOUT = [
    ". . .",
    ". . .",
    "* . *",
]


@pytest.fixture
def beginner_game():
    return SimulatedGame(BEGINNER_LAYOUT)


@pytest.fixture
def one_two_one_game():
    game = SimulatedGame(ONE_TWO_ONE_LAYOUT)
    game.open(0, 0)
    return game
