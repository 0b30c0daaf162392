"""
Adaptateurs de parsing pour MediaKit.

Ce package contient les implementations concretes de IFilenameParser:
- HeuristicFilenameParser: Parse les noms de fichiers par motifs
- GuessitFilenameParser: Parse les noms de fichiers avec guessit

et l'analyse du bloc de tags partagee (tag_scanner).
"""
