"""
Tests unitaires pour la relance sur rate limiting TMDB.

Verifie:
- RateLimitError capture l'en-tete Retry-After
- with_retry relance uniquement sur RateLimitError
- request_with_retry convertit les 429 et propage les autres erreurs
- wait_retry_after respecte Retry-After borne par max_wait
"""

from unittest.mock import MagicMock

import httpx
import pytest
import respx

from src.adapters.api.retry import (
    RateLimitError,
    request_with_retry,
    wait_retry_after,
    with_retry,
)

URL = "https://api.example.com/data"


class TestRateLimitError:
    """Tests pour l'exception RateLimitError."""

    def test_stores_retry_after(self) -> None:
        error = RateLimitError(retry_after=60)
        assert error.retry_after == 60
        assert "60" in str(error)

    def test_without_retry_after(self) -> None:
        assert RateLimitError().retry_after is None


class TestWaitRetryAfter:
    """Tests pour la strategie d'attente."""

    @staticmethod
    def _state(error: Exception) -> MagicMock:
        state = MagicMock()
        state.attempt_number = 1
        state.outcome.exception.return_value = error
        return state

    def test_uses_retry_after(self) -> None:
        assert wait_retry_after(max_wait=60)(self._state(RateLimitError(5))) == 5.0

    def test_retry_after_is_capped(self) -> None:
        assert wait_retry_after(max_wait=10)(self._state(RateLimitError(120))) == 10.0

    def test_falls_back_to_exponential(self) -> None:
        wait = wait_retry_after(max_wait=10)(self._state(RateLimitError(None)))
        assert 0 <= wait <= 10


class TestWithRetryDecorator:
    """Tests pour le decorateur with_retry."""

    @pytest.mark.asyncio
    async def test_retries_on_rate_limit_error(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def flaky() -> str:
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise RateLimitError(retry_after=0)
            return "success"

        assert await flaky() == "success"
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_stops_after_max_attempts(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def always_limited() -> str:
            nonlocal call_count
            call_count += 1
            raise RateLimitError(retry_after=0)

        with pytest.raises(RateLimitError):
            await always_limited()
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_does_not_retry_other_exceptions(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def broken() -> str:
            nonlocal call_count
            call_count += 1
            raise ValueError("not a rate limit error")

        with pytest.raises(ValueError):
            await broken()
        assert call_count == 1


class TestRequestWithRetry:
    """Tests pour request_with_retry avec httpx."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_raises_after_repeated_429(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            return_value=httpx.Response(429, headers={"Retry-After": "0"})
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(RateLimitError) as exc_info:
                await request_with_retry(client, "GET", URL, max_attempts=3, max_wait=1)

        assert exc_info.value.retry_after == 0
        assert route.call_count == 3

    @pytest.mark.asyncio
    @respx.mock
    async def test_retries_then_succeeds(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            side_effect=[
                httpx.Response(429, headers={"Retry-After": "0"}),
                httpx.Response(200, text='{"status":"ok"}'),
            ]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", URL, max_attempts=3, max_wait=1)

        assert response.text == '{"status":"ok"}'
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_429_without_retry_after(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            side_effect=[httpx.Response(429), httpx.Response(200, text="ok")]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", URL, max_attempts=3, max_wait=1)

        assert response.status_code == 200
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_other_errors_are_not_retried(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await request_with_retry(client, "GET", URL)

        assert exc_info.value.response.status_code == 500
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_errors_are_not_retried(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(side_effect=httpx.ConnectError("refused"))

        async with httpx.AsyncClient() as client:
            with pytest.raises(httpx.ConnectError):
                await request_with_retry(client, "GET", URL)

        assert route.call_count == 1
