"""
PosterForge - Posters notes pour bibliotheques media.

Ce package scanne les dossiers de films et series, retrouve chaque titre
sur TMDB, recupere ses notes (IMDb, Rotten Tomatoes, Metacritic) via OMDb
et ecrit un poster avec les badges de notes dans le dossier.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (scan, mise en page, composition, traitement)
- adapters/ : Couche infrastructure (CLI, clients API, rendu, surveillance)
- web/ : API JSON FastAPI
"""
