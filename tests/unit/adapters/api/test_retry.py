"""
Tests unitaires pour le mecanisme de retry avec backoff exponentiel.

Ces tests verifient:
- RateLimitError capture le header Retry-After
- with_retry relance sur RateLimitError
- request_with_retry detecte les 429 et relance automatiquement
- Les autres statuts d'erreur remontent sans relance
"""

import httpx
import pytest
import respx

from yachk.adapters.api.retry import (
    RateLimitError,
    _parse_retry_after,
    request_with_retry,
    with_retry,
)


URL = "https://catalog.example.com/api/films/1"


class TestRateLimitError:
    """Tests pour l'exception RateLimitError."""

    def test_stores_retry_after(self) -> None:
        error = RateLimitError(retry_after=60)
        assert error.retry_after == 60
        assert "60" in str(error)

    def test_without_retry_after(self) -> None:
        assert RateLimitError().retry_after is None

    @pytest.mark.parametrize(
        "value, expected",
        [("30", 30), (None, None), ("Wed, 21 Oct 2015 07:28:00 GMT", None)],
    )
    def test_parse_retry_after(self, value, expected) -> None:
        """Seule la forme en secondes est lue."""
        assert _parse_retry_after(value) == expected


class TestWithRetryDecorator:
    """Tests pour le decorateur with_retry."""

    @pytest.mark.asyncio
    async def test_retries_on_rate_limit_error(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=0, min_wait=0)
        async def flaky_function() -> str:
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise RateLimitError(retry_after=1)
            return "success"

        assert await flaky_function() == "success"
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_stops_after_max_attempts(self) -> None:
        call_count = 0

        @with_retry(max_attempts=2, max_wait=0, min_wait=0)
        async def always_fails() -> str:
            nonlocal call_count
            call_count += 1
            raise RateLimitError()

        with pytest.raises(RateLimitError):
            await always_fails()
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_does_not_retry_other_exceptions(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=0, min_wait=0)
        async def raises_value_error() -> str:
            nonlocal call_count
            call_count += 1
            raise ValueError("not a rate limit error")

        with pytest.raises(ValueError):
            await raises_value_error()
        assert call_count == 1


class TestRequestWithRetry:
    """Tests pour request_with_retry avec httpx."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_persistent_429_raises(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            return_value=httpx.Response(429, headers={"Retry-After": "30"})
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(RateLimitError) as exc_info:
                await request_with_retry(
                    client, "GET", URL, max_attempts=3, max_wait=0, min_wait=0
                )

        assert exc_info.value.retry_after == 30
        assert route.call_count == 3

    @pytest.mark.asyncio
    @respx.mock
    async def test_retries_then_succeeds(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            side_effect=[
                httpx.Response(429),
                httpx.Response(200, json={"status": "ok"}),
            ]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(
                client, "GET", URL, max_attempts=3, max_wait=0, min_wait=0
            )

        assert response.status_code == 200
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_other_errors_are_not_retried(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(return_value=httpx.Response(500))

        async with httpx.AsyncClient() as client:
            with pytest.raises(httpx.HTTPStatusError):
                await request_with_retry(client, "GET", URL, max_attempts=3)

        assert route.call_count == 1
