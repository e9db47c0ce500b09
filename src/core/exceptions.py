"""
Exceptions du domaine PosterForge.

Seules les conditions reellement fatales pour le coeur sont modelisees ici :
tout le reste (notes manquantes, type mal detecte, titre non parse) degrade
vers un resultat moins complet mais valide.
"""


class PosterDecodeError(Exception):
    """
    Exception levee quand l'image de base du poster ne peut pas etre decodee.

    Attributes:
        size: Taille en octets du buffer recu
    """

    def __init__(self, size: int, reason: str = "") -> None:
        """
        Initialise l'erreur avec la taille du buffer et la raison du decodage rate.

        Args:
            size: Taille en octets de l'image recue
            reason: Message de l'erreur sous-jacente (optionnel)
        """
        self.size = size
        message = f"Cannot decode poster image ({size} bytes)"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
