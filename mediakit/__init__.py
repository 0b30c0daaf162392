"""
MediaKit - Identification de fichiers media a partir de leur nom.

Ce package analyse les noms de fichiers (films, episodes, sous-titres),
construit un modele de metadonnees normalise et permet de fusionner les
resultats de sources externes sur les fichiers locaux.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, erreurs)
- services/ : Couche application (scan, matching, enrichissement)
- adapters/ : Couche infrastructure (parsing, CLI, systeme de fichiers, cache)
"""

__version__ = "0.1.0"
