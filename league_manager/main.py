"""League Manager: in-memory team and player roster registry API."""

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.templating import Jinja2Templates

from league_manager.core.config import get_league_name, get_log_level
from league_manager.core.state import get_registry, init_registry
from league_manager.routers import health_router, league_router, players_router, teams_router
from league_manager.routers.players import to_player_rows
from league_manager.schemas.teams import TeamRow
from league_manager.services.registry import LeagueRegistry

app = FastAPI(
    title=get_league_name(),
    description="Registro squadre e giocatori di una lega, con rose da massimo 15 giocatori.",
    version="0.1.0",
)

app.include_router(health_router)
app.include_router(teams_router)
app.include_router(players_router)
app.include_router(league_router)

templates_dir = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))


@app.get("/", include_in_schema=False)
def index(request: Request, registry: LeagueRegistry = Depends(get_registry)):
    """Panoramica lega: squadre con conteggio rosa e giocatori con squadra o svincolati."""
    return templates.TemplateResponse(
        request,
        "league.html",
        {
            "league_name": get_league_name(),
            "teams": [TeamRow.from_team(t) for t in registry.get_all_teams()],
            "players": to_player_rows(registry.get_all_players(), registry),
        },
    )


@app.on_event("startup")
def on_startup():
    """Configura il logging e crea il registro della lega."""
    logging.basicConfig(level=get_log_level(), format="%(levelname)s [%(name)s] %(message)s")
    init_registry(app)
