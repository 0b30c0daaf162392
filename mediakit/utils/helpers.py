"""
Fonctions utilitaires partagees dans le projet MediaKit.

Ce module centralise le nettoyage des chaines utilise par tous les parsers :
- strip_invisible_chars : retrait des caracteres de controle Unicode
- normalize_accents : suppression des diacritiques pour comparaison
- clean_name : nom d'affichage depuis un fragment de nom de fichier
- identity_key : cle de comparaison insensible a la casse et a la ponctuation
"""

import re
import unicodedata

# Separateurs fusionnes en un espace par clean_name
_SEPARATORS_RE = re.compile(r"[\s._\-\[\](){}]+")

_NON_ALNUM_RE = re.compile(r"[\W_]+")


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    (LRM, RLM, BOM, etc.).
    """
    result = []
    for char in text:
        category = unicodedata.category(char)
        if category in ("Cf", "Cc"):
            continue
        result.append(char)
    return "".join(result)


def normalize_accents(text: str) -> str:
    """
    Supprime les accents d'une chaine pour une comparaison insensible aux accents.

    Utilise la decomposition NFD puis filtre les caracteres diacritiques (Mn).
    Ex: "Amélie" -> "Amelie"
    """
    normalized = unicodedata.normalize("NFD", text)
    return "".join(char for char in normalized if unicodedata.category(char) != "Mn")


def clean_name(text: str) -> str:
    """
    Produit un nom lisible depuis un fragment de nom de fichier.

    Les suites de separateurs (espaces, points, tirets bas, tirets, crochets,
    parentheses) deviennent un seul espace, les bords sont nettoyes.
    La casse d'origine est conservee.

    Ex: "Movie.Name.(Director's_Cut)" -> "Movie Name Director's Cut"
    """
    if not text:
        return ""
    return _SEPARATORS_RE.sub(" ", strip_invisible_chars(text)).strip()


def identity_key(text: str) -> str:
    """
    Cle de comparaison d'un nom.

    Minuscules, sans accents, uniquement les caracteres alphanumeriques :
    "The.Office", "The_Office" et "the office" donnent tous "theoffice".
    """
    return _NON_ALNUM_RE.sub("", normalize_accents(text).lower())
