"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur et
exceptions du domaine. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(adapters, frameworks, Pillow, HTTP).

Sous-packages :
- entities/ : Entités métier (MediaItem)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (ParsedName, RatingSet, Badge, Overlay)
- exceptions : PosterDecodeError
"""
