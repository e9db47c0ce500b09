"""
Adaptateurs de parsing pour PosterForge.

Ce package contient les implementations concretes des interfaces de parsing:
- RegexFolderNameParser: Extrait titre, annee et IDs d'un nom de dossier
- FolderMediaTypeDetector: Classe un dossier en film ou serie
"""
