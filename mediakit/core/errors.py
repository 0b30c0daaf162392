"""
Exceptions du domaine.

Toutes les erreurs levees par le coeur derivent de MediaError, ce qui permet
aux appelants (scanner, enrichisseur) de choisir leur politique : ignorer
un fichier non reconnu ou remonter une erreur de logique.
"""


class MediaError(Exception):
    """Erreur de base pour MediaKit."""


class ParseError(MediaError):
    """Le nom de fichier ne correspond a aucun motif structurel attendu."""


class MalformedInputError(ParseError):
    """Entree degeneree (chaine vide, uniquement des separateurs ou des chiffres)."""


class SimilarityMismatchError(MediaError):
    """Fusion demandee entre deux medias qui ne sont pas similaires."""

    def __init__(self, target: object, other: object) -> None:
        super().__init__(f"fusion invalide, medias non similaires : {target} / {other}")
        self.target = target
        self.other = other


class ScrapeError(MediaError):
    """Echec d'un scraper externe lors de la recherche d'un media."""
