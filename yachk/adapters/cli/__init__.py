"""
Interface en ligne de commande.

- display : Affichage Rich des rapports
- helpers : Decorateurs et utilitaires partages des commandes
- commands : Commandes Typer (check, translit)
"""
