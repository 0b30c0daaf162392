"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Quality : Resolution annoncee (720p, 1080p...)
- Source : Support d'origine (BluRay, HDTV...)
- Codec : Codec video (H.264, H.265...)
- Metadata : Composite des facettes d'un nom de fichier
"""

from mediakit.core.value_objects.metadata import (
    Codec,
    Metadata,
    Quality,
    Source,
)

__all__ = [
    "Codec",
    "Metadata",
    "Quality",
    "Source",
]
