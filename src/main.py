"""
Point d'entree CLI de MovieCache.

Configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger

from .adapters.cli.commands import demo, details, popular
from .config import Settings
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="moviecache",
    help="Catalogue TMDB avec cache-aside",
)

app.command()(popular)
app.command()(details)
app.command()(demo)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    typer.echo(f"API TMDB : {'activee' if config.tmdb_enabled else 'desactivee'}")
    typer.echo(f"URL TMDB : {config.tmdb_base_url}")
    typer.echo(f"Cache : {config.cache_backend}")
    if config.cache_backend == "redis":
        typer.echo(f"Redis : {config.redis_url}")
    elif config.cache_backend == "disk":
        typer.echo(f"Repertoire du cache : {config.cache_dir}")
    typer.echo(f"Coalescence des requetes : {'oui' if config.coalesce_fetches else 'non'}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file or 'desactive'}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MovieCache v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    settings = Settings()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        json_file=settings.log_json,
    )
    logger.info("Demarrage de MovieCache", version=__version__)
    app()


if __name__ == "__main__":
    main()
