"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur et erreurs.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- entities/ : Entités métier (Movie, Episode, Subtitle, LocalMedia, MediaList)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (Metadata, Quality, Source, Codec)
"""
