"""
Utilitaires partages pour les commandes CLI de MovieCache.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container et fermant ses ressources
- abort_on_collaborator_error : conversion des erreurs API/cache en sortie 1
"""

from contextlib import contextmanager
from functools import wraps

import httpx
import typer
from loguru import logger as loguru_logger
from redis.exceptions import RedisError
from rich.console import Console

from src.adapters.api.retry import RateLimitError
from src.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


@contextmanager
def abort_on_collaborator_error():
    """Affiche l'erreur d'un collaborateur (API, cache) et quitte avec le code 1."""
    try:
        yield
    except RateLimitError as e:
        console.print(f"[red]API TMDB limitee en debit:[/red] {e}")
        raise typer.Exit(code=1)
    except httpx.HTTPStatusError as e:
        console.print(f"[red]Erreur API TMDB:[/red] HTTP {e.response.status_code}")
        raise typer.Exit(code=1)
    except httpx.HTTPError as e:
        console.print(f"[red]API TMDB injoignable:[/red] {e}")
        raise typer.Exit(code=1)
    except RedisError as e:
        console.print(f"[red]Cache indisponible:[/red] {e}")
        raise typer.Exit(code=1)


def with_container(requires_api: bool = True):
    """
    Decorateur qui injecte un container en premier argument.

    Les ressources du container (client HTTP, stockage de cache) sont
    fermees a la fin de la commande.

    Args:
        requires_api: Si True (defaut), quitte si la cle TMDB est absente.

    Usage:
        @with_container()
        async def my_command(container, ...):
            catalog = container.catalog_service()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_api and not container.config().tmdb_enabled:
                console.print(
                    "[red]Cle API TMDB manquante.[/red] "
                    "Definissez MOVIECACHE_TMDB_API_KEY."
                )
                raise typer.Exit(code=1)
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.tmdb_client().close()
                await container.cache_store().close()
        return wrapper
    return decorator
