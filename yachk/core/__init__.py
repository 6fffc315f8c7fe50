"""
Couche domaine (core).

Contient les objets valeur, les ports (interfaces abstraites) et la
hierarchie d'exceptions. Cette couche n'a AUCUNE dependance vers
l'infrastructure (ffmpeg, HTTP, CLI).

Sous-packages :
- ports/ : Interfaces abstraites des collaborateurs externes
- value_objects/ : Objets valeur immutables (flux, jetons, verdicts)
"""
