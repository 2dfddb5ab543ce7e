"""FastAPI application hosting the data entry page."""
from __future__ import annotations

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from dataentry.core.config import Settings, get_settings
from dataentry.core.log import setup_logger
from dataentry.repositories.people_repository import PeopleRepository
from dataentry.routers import form as form_router
from dataentry.services.entry_controller import EntryController

BASE = os.path.dirname(__file__)
TEMPLATES = os.path.join(BASE, "templates")


def create_app(
    settings: Settings | None = None,
    repository: PeopleRepository | None = None,
) -> FastAPI:
    """Factory compatible with uvicorn (``--factory``)."""
    settings = settings or get_settings()
    logger = setup_logger(settings.log_level)
    repository = repository or PeopleRepository.from_url(settings.database_url)
    controller = EntryController(repository)
    page = form_router.PageState()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        page.apply(controller.startup())
        logger.info("Serving %s with store %s", settings.app_title, repository.engine.url)
        yield
        repository.close()

    app = FastAPI(title=settings.app_title, lifespan=lifespan)
    app.state.settings = settings
    app.state.controller = controller
    app.state.page = page
    app.state.templates = Jinja2Templates(directory=TEMPLATES)
    app.include_router(form_router.router)
    return app
