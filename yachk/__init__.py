"""
yachk - Verification des noms de fichiers video transcodes.

Ce package verifie qu'un nom de fichier encode fidelement les metadonnees
catalogue (id, annee, titre translittere) et techniques (resolution, fps,
langue et canaux audio) du contenu, pour que la suite du pipeline puisse
se fier au nom sans rouvrir le fichier.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (objets valeur, ports, exceptions)
- services/ : Couche application (parsing, regles, construction du nom)
- adapters/ : Couche infrastructure (ffmpeg, API catalogue, CLI)
"""

__version__ = "0.1.0"
