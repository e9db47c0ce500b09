"""
Constantes globales pour PosterForge.

Ce module contient les constantes partagees dans l'application:
- Extensions video reconnues pour la detection des episodes
- Prefixes de dossiers ignores lors du scan
- Nom du fichier poster produit
- Couleurs des badges de notes et bandes Metacritic
"""

# Extensions video reconnues
VIDEO_EXTENSIONS = frozenset({
    ".mkv",
    ".mp4",
    ".avi",
    ".m4v",
    ".mov",
    ".wmv",
    ".ts",
    ".m2ts",
})

# Prefixes des dossiers ignores (caches, metadonnees NAS type @eaDir)
IGNORED_FOLDER_PREFIXES = (".", "@")

# Fichier poster ecrit dans chaque dossier media
DEFAULT_POSTER_FILENAME = "poster.jpg"

# Sources de notes affichees par defaut (ordre de preference)
DEFAULT_RATING_SOURCES = ("imdb", "rt", "metacritic")

# Nombre maximum de badges sur un poster
MAX_BADGES = 3

# Couleurs des badges par source
BADGE_COLORS = {
    "imdb": "#F5C518",        # Jaune IMDb
    "rt": "#FA320A",          # Rouge Rotten Tomatoes
    "metacritic": "#66CC33",  # Vert Metacritic
    "tmdb": "#01D277",        # Vert TMDB
}

# Couleurs des bandes Metacritic (seuils 61 / 40)
METACRITIC_BAND_COLORS = {
    "good": "#66CC33",
    "mixed": "#FFCC33",
    "poor": "#FF0000",
}
METACRITIC_GOOD_THRESHOLD = 61
METACRITIC_MIXED_THRESHOLD = 40
