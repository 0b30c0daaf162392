"""
Utilitaires et constantes pour MediaKit.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from mediakit.utils.constants import (
    CODEC_TOKENS,
    IGNORED_PATTERNS,
    MISC_TOKENS,
    QUALITY_TOKENS,
    SOURCE_TOKENS,
    SUBTITLE_EXTENSIONS,
    VIDEO_EXTENSIONS,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "SUBTITLE_EXTENSIONS",
    "IGNORED_PATTERNS",
    "QUALITY_TOKENS",
    "SOURCE_TOKENS",
    "CODEC_TOKENS",
    "MISC_TOKENS",
]
