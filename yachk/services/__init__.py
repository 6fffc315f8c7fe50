"""
Couche application (services).

- transliteration : Slug latin des titres cyrilliques
- stream_parser : Parsing de la sortie de diagnostic ffmpeg
- name_tokens : Extraction des jetons du nom de fichier
- consistency : Regles de coherence flux / nom
- canonical_name : Construction et comparaison du nom canonique
- checker : Orchestration par fichier
"""
