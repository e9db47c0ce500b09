"""
Application FastAPI de PosterForge.

API JSON pour configurer l'application, scanner les bibliothèques, lancer la
génération des posters et obtenir un aperçu. Le Container DI est créé au
démarrage et partagé via app.state.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..container import Container
from .deps import ProcessingState
from .routes.config import router as config_router
from .routes.posters import router as posters_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage et ferme les clients à l'arrêt."""
    container = Container()
    app.state.container = container
    app.state.processing = ProcessingState()
    yield
    await container.tmdb_client().close()
    await container.omdb_client().close()
    container.api_cache().close()


app = FastAPI(title="PosterForge", lifespan=lifespan)

# Routes
app.include_router(config_router)
app.include_router(posters_router)
