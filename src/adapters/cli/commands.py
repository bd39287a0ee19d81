"""
Commandes CLI du catalogue: liste des populaires et documents de detail.
"""

import asyncio
from typing import Annotated, Optional

import typer

from src.adapters.cli.helpers import (
    abort_on_collaborator_error,
    console,
    suppress_loguru,
    with_container,
)


def popular(
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", min=1, help="Nombre maximum d'identifiants"),
    ] = None,
) -> None:
    """Affiche les identifiants des films populaires (ordre du payload inverse)."""
    asyncio.run(_popular_async(limit))


@with_container()
async def _popular_async(container, limit: Optional[int]) -> None:
    """Implementation async de la commande popular."""
    catalog = container.catalog_service()
    with abort_on_collaborator_error():
        ids = await catalog.get_popular_movie_ids()

    if not ids:
        console.print("[yellow]Aucun identifiant trouve dans la reponse.[/yellow]")
        return
    for media_id in ids[:limit]:
        console.print(media_id, highlight=False, markup=False)


def details(
    media_id: Annotated[str, typer.Argument(help="Identifiant TMDB du film")],
) -> None:
    """Affiche le document de detail brut d'un film (via le cache)."""
    asyncio.run(_details_async(media_id))


@with_container()
async def _details_async(container, media_id: str) -> None:
    """Implementation async de la commande details."""
    catalog = container.catalog_service()
    with abort_on_collaborator_error():
        document = await catalog.get_details_by_id(media_id)
    console.print(document, highlight=False, markup=False, soft_wrap=True)


def demo() -> None:
    """Affiche la liste des populaires puis le detail du premier film."""
    asyncio.run(_demo_async())


@with_container()
async def _demo_async(container) -> None:
    """Implementation async de la commande demo."""
    catalog = container.catalog_service()
    with abort_on_collaborator_error(), suppress_loguru():
        ids = await catalog.get_popular_movie_ids()
        console.print(ids, highlight=False, markup=False)
        if not ids:
            console.print("[yellow]Aucun identifiant trouve dans la reponse.[/yellow]")
            return
        document = await catalog.get_details_by_id(ids[0])
    console.print(document, highlight=False, markup=False, soft_wrap=True)
