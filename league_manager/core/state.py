"""Registro della lega: creazione all'avvio e dependency per i router."""

import logging

from fastapi import FastAPI, Request

from league_manager.services.registry import LeagueRegistry

logger = logging.getLogger(__name__)


def init_registry(app: FastAPI) -> LeagueRegistry:
    """
    Crea il registro della lega e lo aggancia ad app.state.
    Una sola istanza per processo; i dati vivono finché vive il processo.
    """
    registry = LeagueRegistry()
    app.state.registry = registry
    logger.info("Registro lega inizializzato")
    return registry


def get_registry(request: Request) -> LeagueRegistry:
    """Dependency that returns the registry attached at startup."""
    return request.app.state.registry
