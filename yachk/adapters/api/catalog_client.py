"""
Client de l'API catalogue pour la recuperation des fiches de titres.

Implemente ICatalogClient : une requete GET sur {api_url}{id} avec le
header Clientid, reponse JSON de la forme
    {"title": "...", "originalTitle": "...", "years": [1999], "type": "MOVIE"}

Le corps est decode selon le charset annonce par Content-Type. Aucun cache :
chaque fichier verifie interroge le service.

Usage:
    client = CatalogClient(api_url="https://catalog.example/films/", client_id="xxx")
    metadata = await client.fetch("12345")
    await client.close()
"""

import json
from typing import Optional

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from yachk.adapters.api.retry import RateLimitError, request_with_retry
from yachk.core.exceptions import CredentialsMissing, DecodeError, NetworkError
from yachk.core.ports.catalog import ICatalogClient
from yachk.core.value_objects.naming import CatalogMetadata, ContentType


class CatalogRecord(BaseModel):
    """
    Schema de la reponse de l'API catalogue.

    Les champs inconnus sont ignores. Une fiche sans annee, sans type ou
    sans aucun titre est rejetee.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = ""
    original_title: str = Field(default="", alias="originalTitle")
    years: list[int] = Field(min_length=1)
    type: str = Field(min_length=1)

    @field_validator("title", "original_title", mode="before")
    @classmethod
    def none_as_empty(cls, v: Optional[str]) -> str:
        """L'API renvoie parfois null pour un titre manquant."""
        return "" if v is None else v

    def to_metadata(self) -> CatalogMetadata:
        if not self.title and not self.original_title:
            raise DecodeError("Catalog record has no title")
        return CatalogMetadata(
            title=self.title,
            original_title=self.original_title,
            years=tuple(self.years),
            content_type=ContentType.from_api(self.type),
        )


def decode_body(response: httpx.Response) -> CatalogMetadata:
    """
    Decode le corps d'une reponse du catalogue.

    Raises:
        DecodeError: Charset inconnu, octets invalides, JSON invalide
                     ou fiche incomplete
    """
    encoding = response.charset_encoding or "utf-8"
    try:
        text = response.content.decode(encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise DecodeError(f"Encoding error: {e}") from e

    try:
        payload = json.loads(text)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON: {e}") from e

    try:
        record = CatalogRecord.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Unexpected catalog record: {e.error_count()} invalid field(s)") from e

    return record.to_metadata()


class CatalogClient(ICatalogClient):
    """
    Client HTTP async de l'API catalogue.

    Attributes:
        CLIENT_ID_HEADER: Header portant l'identifiant client
    """

    CLIENT_ID_HEADER = "Clientid"

    def __init__(
        self,
        api_url: Optional[str],
        client_id: Optional[str],
        timeout: float = 30.0,
        max_attempts: int = 3,
    ) -> None:
        """
        Initialise le client.

        Args:
            api_url: URL de base, l'identifiant catalogue y est concatene
            client_id: Identifiant client transmis dans le header Clientid
            timeout: Timeout HTTP en secondes
            max_attempts: Tentatives maximum sur reponse 429
        """
        self._api_url = api_url
        self._client_id = client_id
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def configured(self) -> bool:
        return bool(self._api_url) and bool(self._client_id)

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={
                    "Accept": "application/json",
                    self.CLIENT_ID_HEADER: self._client_id or "",
                },
                timeout=self._timeout,
            )
        return self._client

    async def fetch(self, catalog_id: str) -> CatalogMetadata:
        """
        Recupere la fiche catalogue d'un titre.

        Args:
            catalog_id: Identifiant catalogue extrait du nom de fichier

        Returns:
            CatalogMetadata

        Raises:
            CredentialsMissing: URL ou client id non configure, URL invalide
            NetworkError: Echec reseau ou de decompression, statut HTTP en erreur,
                429 persistant
            DecodeError: Reponse illisible ou fiche incomplete
        """
        if not self._client_id:
            raise CredentialsMissing()
        if not self._api_url:
            raise CredentialsMissing("Catalog API URL is not provided")

        url = f"{self._api_url}{catalog_id}"
        logger.debug("Requete catalogue", catalog_id=catalog_id)

        try:
            response = await request_with_retry(
                self._get_client(), "GET", url, max_attempts=self._max_attempts
            )
        except RateLimitError as e:
            raise NetworkError(str(e), status_code=429) from e
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"Catalog returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            # Transport, decompression du corps, redirections en boucle
            raise NetworkError(f"Catalog request failed: {e}") from e
        except httpx.InvalidURL as e:
            raise CredentialsMissing(f"Catalog API URL is invalid: {e}") from e

        metadata = decode_body(response)
        logger.debug(
            "Fiche catalogue recue",
            catalog_id=catalog_id,
            year=metadata.year,
            content_type=metadata.content_type.value,
        )
        return metadata

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
