"""
Fixtures pytest partagees pour les tests yachk.

Ce module contient les fixtures communes utilisees dans les tests:
- Flux video/audio et jetons de nommage types
- Fiches catalogue (film, serie)
- Mocks des ports (IProbeRunner, ICatalogClient)
- Settings de test
"""

from unittest.mock import AsyncMock

import pytest

from yachk.config import Settings
from yachk.core.ports.catalog import ICatalogClient
from yachk.core.ports.probe import IProbeRunner
from yachk.core.value_objects import (
    AudioStream,
    CatalogMetadata,
    ContentType,
    NamingTokens,
    VideoStream,
)


@pytest.fixture
def video_1080p() -> VideoStream:
    """Flux video 1920x1080 a 23.976 fps, pixels carres."""
    return VideoStream(
        stream=(0, 0),
        lang="und",
        codec="h264",
        pix_fmt="yuv420p",
        width=1920,
        height=1080,
        sar=(1, 1),
        dar=(16, 9),
        fps=23.976,
        is_default=True,
    )


@pytest.fixture
def video_720p() -> VideoStream:
    """Flux video 1280x720 a 25 fps."""
    return VideoStream(
        stream=(0, 0),
        lang="und",
        codec="h264",
        pix_fmt="yuv420p",
        width=1280,
        height=720,
        sar=(1, 1),
        dar=(16, 9),
        fps=25.0,
    )


@pytest.fixture
def audio_stereo() -> AudioStream:
    """Piste audio russe stereo."""
    return AudioStream(
        stream=(0, 1),
        lang="rus",
        codec="aac",
        sample_rate="48000",
        channels="stereo",
        is_default=True,
        name="Russian",
    )


@pytest.fixture
def movie_tokens() -> NamingTokens:
    """Jetons d'un film HD (palier 0)."""
    return NamingTokens(season_episode="", catalog_id="12345", quality="0")


@pytest.fixture
def movie_metadata() -> CatalogMetadata:
    """Fiche catalogue du film Matrica (1999)."""
    return CatalogMetadata(
        title="Матрица",
        original_title="The Matrix",
        years=(1999,),
        content_type=ContentType.MOVIE,
    )


@pytest.fixture
def show_metadata() -> CatalogMetadata:
    """Fiche catalogue de la serie Brigada."""
    return CatalogMetadata(
        title="Бригада",
        original_title="",
        years=(2002, 2003),
        content_type=ContentType.SHOW,
    )


@pytest.fixture
def mock_probe_runner() -> AsyncMock:
    """
    Mock de IProbeRunner.

    Retourne une sortie vide par defaut : configurer probe.return_value
    dans chaque test.
    """
    mock = AsyncMock(spec=IProbeRunner)
    mock.probe.return_value = ""
    return mock


@pytest.fixture
def mock_catalog_client(movie_metadata: CatalogMetadata) -> AsyncMock:
    """Mock de ICatalogClient renvoyant la fiche du film par defaut."""
    mock = AsyncMock(spec=ICatalogClient)
    mock.fetch.return_value = movie_metadata
    return mock


@pytest.fixture
def test_settings() -> Settings:
    """Settings de test avec catalogue configure."""
    return Settings(
        catalog_api_url="https://catalog.example.com/api/films/",
        catalog_client_id="test-client",
        ffmpeg_binary="ffmpeg",
        probe_timeout=5,
    )
