"""
Interface port pour le service catalogue.

Le catalogue fournit titre, annees et type de contenu a partir de
l'identifiant present dans le nom de fichier.
"""

from abc import ABC, abstractmethod

from yachk.core.value_objects.naming import CatalogMetadata


class ICatalogClient(ABC):
    """
    Interface pour la recuperation d'une fiche catalogue.

    Aucun cache : chaque appel interroge le service.
    """

    @abstractmethod
    async def fetch(self, catalog_id: str) -> CatalogMetadata:
        """
        Recupere la fiche catalogue d'un titre.

        Args:
            catalog_id: Identifiant catalogue (chiffres)

        Retourne:
            CatalogMetadata complete (au moins une annee, un type, un titre)

        Raises:
            CredentialsMissing: Client non configure
            NetworkError: Echec reseau ou statut HTTP en erreur
            DecodeError: Reponse illisible ou fiche incomplete
        """
        ...

    async def close(self) -> None:
        """Libere les ressources du client (aucune par defaut)."""
        return None
