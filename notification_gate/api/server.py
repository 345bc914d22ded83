"""
FastAPI server: preferences CRUD and the event decision endpoint.
Run: notification-gate   (or: uvicorn notification_gate.api.server:app --reload --port 3000)
"""

import json
import logging
from typing import Any, Optional

import uvicorn
from fastapi import Body, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from notification_gate.api.schemas import IncomingEventSchema, PreferencesSchema
from notification_gate.config import Settings, configure_logging, settings as default_settings
from notification_gate.engine.audit import AuditLog, audit_log
from notification_gate.engine.gate import NotificationGate
from notification_gate.engine.models import DecisionType
from notification_gate.engine.store import InMemoryPreferencesStore, store

logger = logging.getLogger(__name__)


def _error_details(exc: ValidationError) -> list:
    return json.loads(exc.json(include_url=False))


def _invalid_label(path: str) -> str:
    if path == "/events":
        return "Invalid event"
    if path.startswith("/preferences/"):
        return "Invalid preferences"
    return "Invalid request"


def create_app(lookup_store: Optional[InMemoryPreferencesStore] = None,
               audit: Optional[AuditLog] = None,
               settings: Optional[Settings] = None) -> FastAPI:
    prefs_store = lookup_store if lookup_store is not None else store
    settings = settings if settings is not None else default_settings
    audit = audit if audit is not None else audit_log
    gate = NotificationGate(prefs_store, audit)

    app = FastAPI(title="Notification Gate", version="1.0.0")

    # ─── Error Handlers ──────────────────────────────────────

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def request_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "error": _invalid_label(request.url.path),
                "details": json.loads(json.dumps(exc.errors(), default=str)),
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    # ─── Preferences ─────────────────────────────────────────

    @app.get("/preferences/{user_id}")
    def get_preferences(user_id: str):
        prefs = prefs_store.get(user_id)
        if prefs is None:
            return JSONResponse(status_code=404, content={"error": "Not found"})
        return prefs.to_dict()

    @app.post("/preferences/{user_id}", status_code=201)
    def save_preferences(user_id: str, payload: Any = Body(...)):
        try:
            parsed = PreferencesSchema.model_validate(payload)
        except ValidationError as exc:
            return JSONResponse(
                status_code=400,
                content={"error": "Invalid preferences", "details": _error_details(exc)},
            )
        prefs_store.set(user_id, parsed.to_domain())
        logger.info("Saved preferences for user=%s", user_id)
        return {"status": "saved", "userId": user_id}

    @app.delete("/preferences/{user_id}", status_code=204)
    def delete_preferences(user_id: str):
        if not prefs_store.delete(user_id):
            return JSONResponse(status_code=404, content={"error": "Not found"})
        logger.info("Deleted preferences for user=%s", user_id)
        return Response(status_code=204)

    # ─── Events ──────────────────────────────────────────────

    @app.post("/events")
    def process_event(payload: Any = Body(...)):
        try:
            parsed = IncomingEventSchema.model_validate(payload)
        except ValidationError as exc:
            return JSONResponse(
                status_code=400,
                content={"error": "Invalid event", "details": _error_details(exc)},
            )
        decision = gate.evaluate(parsed.to_domain())
        # 202 = will notify, 200 = handled, nothing to send
        status_code = 202 if decision.should_notify else 200
        return JSONResponse(status_code=status_code, content=decision.to_dict())

    @app.get("/events/history/{user_id}")
    def history(user_id: str, decision: Optional[DecisionType] = None,
                limit: Optional[int] = Query(None, ge=1, le=1000)):
        results = audit.get_user_history(user_id, decision, limit or settings.history_limit)
        return {
            "userId": user_id,
            "total": len(results),
            "results": [e.to_dict() for e in results],
        }

    # ─── Ops ─────────────────────────────────────────────────

    @app.get("/stats")
    def stats():
        return audit.stats()

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def main():
    configure_logging()
    logger.info("Notification gate running on http://%s:%s", default_settings.host, default_settings.port)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port,
                log_level=default_settings.log_level.lower())


if __name__ == "__main__":
    main()
