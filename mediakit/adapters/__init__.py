"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- parsing/ : Parsing de noms de fichiers (heuristique ou guessit)
- file_system : Parcours des répertoires de médias
- cache : Cache borné des résultats de scrapers

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from mediakit.adapters.cache import ScrapeCache
from mediakit.adapters.file_system import FileSystemAdapter
from mediakit.adapters.parsing.guessit_parser import GuessitFilenameParser
from mediakit.adapters.parsing.heuristic_parser import HeuristicFilenameParser

__all__ = [
    "FileSystemAdapter",
    "GuessitFilenameParser",
    "HeuristicFilenameParser",
    "ScrapeCache",
]
