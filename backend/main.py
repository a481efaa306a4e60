"""
main.py
───────
Reminder server: FastAPI backend entry point.

Exposes:
  GET   /api/reminders     full reminder list
  POST  /api/add           body: reminder object, returns it with its id
  POST  /api/delete        body: {"id": "<id>"}
  GET   /                  liveness check

Run with:  python main.py   (or  uvicorn main:app)
"""

import os
import logging
import platform
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from config import Settings, settings as default_settings
from errors import ReminderError, ValidationError
from reminder_service import ReminderService
from storage import ReminderStore, parse_json

logger = logging.getLogger(__name__)


async def _json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw:
        raise ValidationError("empty body")
    body, error = parse_json(raw)
    if error is not None:
        raise ValidationError("invalid json", detail=error)
    return body


def create_app(config: Optional[Settings] = None) -> FastAPI:
    config = config or default_settings
    service = ReminderService(ReminderStore(config.data_file))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("[REMINDERS] PID=%s | Platform=%s | data=%s",
                    os.getpid(), platform.system(), config.data_file)
        yield
        logger.info("[REMINDERS] Shutdown complete.")

    app = FastAPI(title="Reminder Server", version="1.0.0", lifespan=lifespan)
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(ReminderError)
    async def reminder_error_handler(request: Request, exc: ReminderError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    # ── Reminder endpoints ────────────────────────────────────────────────────

    @app.get("/api/reminders")
    async def list_reminders():
        return await run_in_threadpool(service.list)

    @app.post("/api/add")
    async def add_reminder(request: Request):
        body = await _json_body(request)
        return await run_in_threadpool(service.add, body)

    @app.post("/api/delete")
    async def delete_reminder(request: Request):
        body = await _json_body(request)
        await run_in_threadpool(service.delete, body)
        return {"ok": True}

    # Preflights without an Origin header never reach CORSMiddleware's handler
    @app.options("/{path:path}")
    def preflight(path: str):
        return PlainTextResponse("OK")

    # ── Health ────────────────────────────────────────────────────────────────

    @app.get("/")
    def root():
        return {"status": "ok", "message": "reminder server running"}

    return app


app = create_app()


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(
        level=default_settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
