import pytest

from todogist.auth import EnvTokenResolver, StaticTokenResolver, create_token_resolver
from todogist.contracts.exceptions import AuthenticationError


@pytest.mark.asyncio
async def test_env_token_resolver_returns_token_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODOIST_API_TOKEN", " tok_123 ")

    assert await EnvTokenResolver(variable="TODOIST_API_TOKEN").resolve() == "tok_123"


@pytest.mark.asyncio
async def test_env_token_resolver_raises_when_env_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    with pytest.raises(AuthenticationError, match="GITHUB_TOKEN"):
        await EnvTokenResolver(variable="GITHUB_TOKEN").resolve()


@pytest.mark.asyncio
async def test_env_token_resolver_raises_when_env_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "   ")

    with pytest.raises(AuthenticationError):
        await EnvTokenResolver(variable="GITHUB_TOKEN").resolve()


@pytest.mark.asyncio
async def test_static_token_resolver_rejects_blank_token() -> None:
    with pytest.raises(AuthenticationError):
        await StaticTokenResolver(token=" ").resolve()


def test_factory_prefers_configured_token() -> None:
    assert create_token_resolver("abc", env_variable="X") == StaticTokenResolver(token="abc")


def test_factory_falls_back_to_environment() -> None:
    assert create_token_resolver(None, env_variable="X") == EnvTokenResolver(variable="X")
