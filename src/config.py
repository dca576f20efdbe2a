"""
Configuration centrale pour le solveur Démineur.

Ce fichier contient tous les paramètres configurables du jeu,
y compris la géométrie de la grille à l'écran et les temps d'attente.
Les valeurs de pixels sont empiriques (écran 1080p, navigateur zoomé à 80%).
"""

# Paramètres graphiques
TILE_SIZE = 25             # Taille d'une case en pixels (bordure comprise)
GRID_ORIGIN = (34, 306)    # Coin supérieur gauche de la case (0, 0) dans le ScreenSpace (x, y)
SAMPLE_ROW = 12            # Ligne de balayage à l'intérieur d'une case (depuis son bord haut)
SAMPLE_DRIFT = 0.5         # Dérive horizontale de l'échantillonnage (pixels par colonne)
CLICK_DRIFT = 4 / 9        # Dérive horizontale des clics (pixels par colonne)

# Seuil du filtre de fond : un pixel dont les trois canaux dépassent ce seuil est ignoré
BACKGROUND_THRESHOLD = 110

# Temps d'attente (en secondes)
WAIT_TIMES = {
    'settle': 0.08,            # Laisse le jeu redessiner les cases avant une nouvelle capture
    'press': 0.1,              # Durée entre l'appui et le relâchement d'un bouton
    'restart': 1,              # Temps d'attente après un clic sur le smiley
    'game_start': 2,           # Temps d'attente après le premier clic de la partie
    'page_load': 10,           # Temps d'attente maximum pour le chargement d'une page
}

# Paramètres du navigateur (backend "browser")
BROWSER_CONFIG = {
    'headless': False,
    'maximize': True,
    'url': 'https://minesweeperonline.com/',
}

# Paramètres du jeu
GAME_CONFIG = {
    'smiley_y': 265,               # Ordonnée du smiley (bouton de redémarrage)
    'smiley_x_base': 150,          # Abscisse du smiley pour une grille de 9 colonnes
    'smiley_x_per_column': 12.666,  # Décalage du smiley par colonne supplémentaire
    'first_click': (1, 2),         # Case (row, col) ouverte pour lancer la partie
    'debug': True,                 # Mode débogage (affiche plus d'informations)
}

# Configuration des difficultés (sélecteur CLI 0/1/2)
DIFFICULTY_CONFIG = {
    0: {'name': 'Beginner', 'rows': 9, 'cols': 9},
    1: {'name': 'Intermediate', 'rows': 16, 'cols': 16},
    2: {'name': 'Expert', 'rows': 16, 'cols': 30},
}

# Configuration par défaut
DEFAULT_DIFFICULTY = 0

# Paramètres du solver
SOLVER_CONFIG = {
    'max_rounds': 50,   # Nombre de passes sur la grille (garde-fou contre les grilles ambiguës)
}

# Chemins des fichiers
PATHS = {
    'logs': 'logs',
    'overlays': 'temp/overlays',
}


def resolve_difficulty(value) -> int:
    """
    Retourne une difficulté valide.
    Toute valeur inconnue retombe sur la difficulté par défaut (Beginner).
    """
    try:
        key = int(value)
    except (TypeError, ValueError):
        return DEFAULT_DIFFICULTY
    return key if key in DIFFICULTY_CONFIG else DEFAULT_DIFFICULTY


def get_geometry(difficulty=DEFAULT_DIFFICULTY):
    """Construit la géométrie de grille associée à une difficulté."""
    from src.lib.s0_coordinates.types import GridGeometry

    entry = DIFFICULTY_CONFIG[resolve_difficulty(difficulty)]
    return GridGeometry(
        rows=entry['rows'],
        cols=entry['cols'],
        tile_size=TILE_SIZE,
        origin=GRID_ORIGIN,
        sample_row=SAMPLE_ROW,
        sample_drift=SAMPLE_DRIFT,
        click_drift=CLICK_DRIFT,
    )
