from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from ...api import api_state, call_api, get_api_functions
from ...core import CalendarStoreError

logger = logging.getLogger(__name__)

app = FastAPI(title="Calendar MCP Local API", version="0.1.0")


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


@app.get("/health")
def health() -> JSONResponse:
    store = api_state.context.store
    available = store.is_available()
    return JSONResponse(
        {"status": "ok" if available else "unavailable", "database": str(store.path)},
        status_code=200 if available else 503,
    )


@app.get("/api/functions")
async def list_api_functions() -> JSONResponse:
    functions = [func.as_tool() for func in get_api_functions()]
    return JSONResponse({"functions": functions})


@app.post("/api/functions/{function_name}")
def invoke_api_function(function_name: str, request: ApiCallRequest) -> JSONResponse:
    try:
        result = call_api(function_name, **request.arguments)
    except KeyError as exc:
        logger.warning("API function not found: %s", function_name)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValidationError as exc:
        logger.warning("Invalid arguments for %s: %s", function_name, exc)
        raise HTTPException(status_code=400, detail=exc.errors(include_url=False, include_context=False)) from exc
    except (TypeError, ValueError) as exc:
        logger.warning("Invalid arguments for %s: %s", function_name, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except CalendarStoreError as exc:
        logger.error("Calendar database unavailable: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("API function %s failed", function_name)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    logger.debug("API function %s executed successfully", function_name)
    return JSONResponse({"name": function_name, "result": result})


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    import asyncio
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    asyncio.run(serve(app, config))
