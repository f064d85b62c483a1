"""
backend/server.py
-----------------
HTTP surface: one in-memory WizardController per session id.
Nothing is persisted; dropping the process drops every session.
"""

from __future__ import annotations
import asyncio
import logging
import uuid
from typing import Callable, Dict, List

from fastapi import FastAPI, HTTPException, Query

from backend.api_schemas import (
    ActivityCreate,
    DatesUpdate,
    DestinationSelection,
    DestinationUpdate,
    SessionView,
)
from modules.errors import InvalidInputError, ValidationError
from modules.search.destination_search import DestinationSearch
from modules.tool_usage.geocoding_tool import GeocodingTool
from modules.wizard.controller import WizardController
import config

logger = logging.getLogger(__name__)


def _default_wizard() -> WizardController:
    return WizardController(search=DestinationSearch())


def create_app(
    wizard_factory: Callable[[], WizardController] = _default_wizard,
    geocoder: GeocodingTool | None = None,
) -> FastAPI:
    app = FastAPI(title="Packing Planner API")
    sessions: Dict[str, WizardController] = {}
    tool = geocoder or GeocodingTool()

    def _get(session_id: str) -> WizardController:
        wizard = sessions.get(session_id)
        if wizard is None:
            raise HTTPException(status_code=404, detail=f"Unknown session {session_id}")
        return wizard

    def _view(session_id: str) -> SessionView:
        return SessionView.from_snapshot(session_id, _get(session_id).snapshot())

    @app.get("/")
    async def root():
        return {"message": "Packing planner is running", "sessions": len(sessions)}

    @app.post("/sessions", response_model=SessionView, status_code=201)
    async def create_session():
        session_id = uuid.uuid4().hex
        sessions[session_id] = wizard_factory()
        logger.info("Session %s created", session_id)
        return _view(session_id)

    @app.get("/sessions/{session_id}", response_model=SessionView)
    async def get_session(session_id: str):
        return _view(session_id)

    @app.delete("/sessions/{session_id}", status_code=204)
    async def delete_session(session_id: str):
        wizard = _get(session_id)
        if wizard.search is not None:
            await wizard.search.aclose()
        del sessions[session_id]

    @app.put("/sessions/{session_id}/destination", response_model=SessionView)
    async def update_destination(session_id: str, body: DestinationUpdate):
        _get(session_id).update_destination(body.destination)
        return _view(session_id)

    @app.post("/sessions/{session_id}/destination/select", response_model=SessionView)
    async def select_destination(session_id: str, body: DestinationSelection):
        _get(session_id).select_destination(body.suggestion)
        return _view(session_id)

    @app.put("/sessions/{session_id}/dates", response_model=SessionView)
    async def update_dates(session_id: str, body: DatesUpdate):
        _get(session_id).update_dates(body.start_date, body.end_date)
        return _view(session_id)

    @app.post("/sessions/{session_id}/activities", response_model=SessionView)
    async def add_activity(session_id: str, body: ActivityCreate):
        if not _get(session_id).add_activity(body.activity):
            raise HTTPException(status_code=422, detail="Activity must not be blank")
        return _view(session_id)

    @app.delete("/sessions/{session_id}/activities/{index}", response_model=SessionView)
    async def remove_activity(session_id: str, index: int):
        try:
            _get(session_id).remove_activity(index)
        except IndexError as e:
            raise HTTPException(status_code=404, detail=str(e))
        return _view(session_id)

    @app.post("/sessions/{session_id}/advance", response_model=SessionView)
    async def advance(session_id: str):
        wizard = _get(session_id)
        try:
            await wizard.advance()
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except InvalidInputError as e:
            logger.error("Generation failed for session %s: %s", session_id, e)
            raise HTTPException(status_code=500, detail=str(e))
        return _view(session_id)

    @app.post("/sessions/{session_id}/back", response_model=SessionView)
    async def back(session_id: str):
        _get(session_id).back()
        return _view(session_id)

    @app.get("/suggestions", response_model=List[str])
    async def suggestions(q: str = Query("", description="Partial destination name")):
        if len(q) < config.SEARCH_MIN_QUERY_LENGTH:
            return []
        return await asyncio.to_thread(tool.search, q)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=config.LOG_LEVEL)
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
