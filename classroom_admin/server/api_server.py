"""FastAPI server exposing the admin operations and the student live viewer."""

from __future__ import annotations

from datetime import datetime, timezone
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field
import uvicorn

from classroom_admin.constants.about import APP_NAME, APP_VERSION
from classroom_admin.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from classroom_admin.core.admin_manager import AdminManager
from classroom_admin.core.errors import (
    EmptySelectionError,
    InvalidLinkError,
    InvalidTimerError,
    NoActiveStreamError,
    PartialDeleteFailure,
    PersistenceError,
)
from classroom_admin.core.models import (
    ArchivedClass,
    BatchDeleteResult,
    LiveStreamState,
    StudentResult,
)

_VIEWER_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>Live Class</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #0b1120; color: #f5f7ff; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; gap: 1rem; }
      .card { background: #111a30; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.4); }
      .hidden { display: none; }
      .player { position: relative; padding-top: 56.25%; }
      .player iframe { position: absolute; inset: 0; width: 100%; height: 100%; border: 0; border-radius: 0.5rem; }
      ul { padding-left: 1.2rem; }
      a { color: #7dd3fc; }
    </style>
  </head>
  <body>
    <section class=\"card\">
      <h1>Live Class</h1>
      <p id=\"live-status\">Checking for a live class…</p>
      <div id=\"player\" class=\"player hidden\"><iframe id=\"player-frame\" allowfullscreen></iframe></div>
    </section>
    <section class=\"card\">
      <h2>Past Classes</h2>
      <ul id=\"past-classes\"></ul>
    </section>
    <script>
      const statusLabel = document.getElementById('live-status');
      const player = document.getElementById('player');
      const playerFrame = document.getElementById('player-frame');
      const pastList = document.getElementById('past-classes');

      async function refreshLive() {
        try {
          const response = await fetch('/live');
          const payload = await response.json();
          if (payload.is_live && payload.url) {
            if (playerFrame.src !== payload.url) {
              playerFrame.src = payload.url;
            }
            player.classList.remove('hidden');
            statusLabel.textContent = 'The class is live now.';
          } else {
            player.classList.add('hidden');
            playerFrame.removeAttribute('src');
            statusLabel.textContent = 'No class is live right now.';
          }
        } catch (error) {
          statusLabel.textContent = 'Unable to reach the classroom server.';
        }
      }

      async function refreshPastClasses() {
        try {
          const response = await fetch('/past-classes');
          const payload = await response.json();
          pastList.innerHTML = '';
          payload.forEach((entry) => {
            const item = document.createElement('li');
            const link = document.createElement('a');
            link.href = entry.url;
            link.target = '_blank';
            link.textContent = entry.title;
            item.appendChild(link);
            pastList.appendChild(item);
          });
        } catch (error) {
          pastList.innerHTML = '';
        }
      }

      refreshLive();
      refreshPastClasses();
      setInterval(refreshLive, 5000);
      setInterval(refreshPastClasses, 30000);
    </script>
  </body>
</html>
"""


class StartLivePayload(BaseModel):
    """Payload schema for starting a live class."""

    link: str


class DeleteResultsPayload(BaseModel):
    """Payload schema for bulk result deletion."""

    ids: list[str] = Field(default_factory=list)


class TimerPayload(BaseModel):
    """Payload schema for the test timer."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0


def _iso(value: datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _live_to_json(state: LiveStreamState) -> dict[str, object]:
    return {"url": state.url, "is_live": state.is_live, "timestamp": _iso(state.timestamp)}


def _archived_to_json(archived: ArchivedClass) -> dict[str, object]:
    return {"id": archived.id, "url": archived.url, "title": archived.title, "date": _iso(archived.date)}


def _result_to_json(result: StudentResult) -> dict[str, object]:
    return {
        "id": result.id,
        "name": result.name,
        "phone_number": result.phone_number,
        "batch_time": result.batch_time,
        "score": result.score,
        "timestamp": _iso(result.timestamp),
    }


def _batch_to_json(batch: BatchDeleteResult) -> dict[str, object]:
    return {
        "deleted": batch.succeeded_ids(),
        "failed": {doc_id: batch.outcomes[doc_id].error for doc_id in batch.failed_ids()},
    }


def _persistence_failure(exc: PersistenceError) -> HTTPException:
    return HTTPException(status_code=503, detail=str(exc))


def _get_admin_manager_dependency(admin_manager: AdminManager):
    def dependency() -> AdminManager:
        return admin_manager

    return dependency


def create_api_app(admin_manager: AdminManager) -> FastAPI:
    """Create a FastAPI application wired to the provided admin manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    manager_dep = _get_admin_manager_dependency(admin_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_viewer_page() -> str:
        return _VIEWER_PAGE_HTML

    @app.get("/live")
    def get_live(manager: AdminManager = Depends(manager_dep)) -> dict[str, object]:
        try:
            return _live_to_json(manager.get_live_state())
        except PersistenceError as exc:
            raise _persistence_failure(exc) from exc

    @app.post("/live/start", status_code=201)
    def start_live(
        payload: StartLivePayload,
        manager: AdminManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            state = manager.start_live(payload.link)
        except InvalidLinkError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except PersistenceError as exc:
            raise _persistence_failure(exc) from exc
        return _live_to_json(state)

    @app.post("/live/end", status_code=201)
    def end_live(manager: AdminManager = Depends(manager_dep)) -> dict[str, object]:
        try:
            archived = manager.end_live()
        except NoActiveStreamError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except PersistenceError as exc:
            raise _persistence_failure(exc) from exc
        return _archived_to_json(archived)

    @app.get("/past-classes")
    def get_past_classes(manager: AdminManager = Depends(manager_dep)) -> list[dict[str, object]]:
        try:
            return [_archived_to_json(entry) for entry in manager.get_past_classes()]
        except PersistenceError as exc:
            raise _persistence_failure(exc) from exc

    @app.get("/results")
    def get_results(manager: AdminManager = Depends(manager_dep)) -> list[dict[str, object]]:
        try:
            return [_result_to_json(result) for result in manager.list_results()]
        except PersistenceError as exc:
            raise _persistence_failure(exc) from exc

    @app.post("/results/delete")
    def delete_results(
        payload: DeleteResultsPayload,
        manager: AdminManager = Depends(manager_dep),
    ):
        try:
            batch = manager.delete_results(set(payload.ids))
        except EmptySelectionError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except PartialDeleteFailure as exc:
            return JSONResponse(status_code=207, content=_batch_to_json(exc.batch))
        return _batch_to_json(batch)

    @app.get("/results/report", response_class=HTMLResponse)
    def get_results_report(manager: AdminManager = Depends(manager_dep)) -> str:
        try:
            return manager.build_report()
        except PersistenceError as exc:
            raise _persistence_failure(exc) from exc

    @app.put("/settings/timer")
    def put_timer(
        payload: TimerPayload,
        manager: AdminManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            total = manager.set_test_timer(payload.hours, payload.minutes, payload.seconds)
        except InvalidTimerError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except PersistenceError as exc:
            raise _persistence_failure(exc) from exc
        return {"timer": total}

    return app


def start_api_server(
    admin_manager: AdminManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(admin_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="AdminApiServer", daemon=True)
    thread.start()
    return thread
