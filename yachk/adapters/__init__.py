"""
Couche infrastructure (adapters).

Implementations concretes des ports et interface utilisateur :
- api/ : Client HTTP de l'API catalogue
- probe/ : Sonde ffmpeg
- cli/ : Affichage console des rapports
"""
