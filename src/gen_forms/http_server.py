"""
HTTP RPC server for Gen-Forms.

This server provides:
1. ``POST /rpc/<procedure>`` with a JSON object of arguments
2. ``GET /health`` for container health checks

Responses are ``{"result": ...}`` on success and
``{"error": {"code": ..., "message": ...}}`` with a 4xx/5xx status on
failure.

Usage:
    gen-forms http --port 2022
"""

import json
import logging
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from gen_forms.config import get_config
from gen_forms.errors import GenFormsError, InvalidInputError
from gen_forms.procedures import PROCEDURES, call_procedure, error_payload
from gen_forms.service import FormService

logger = logging.getLogger("gen-forms-http")

STATUS_BY_CODE = {
    "invalid_input": 400,
    "not_found": 404,
    "storage_error": 500,
}


async def _read_arguments(request: Request) -> dict:
    body = await request.body()
    if not body.strip():
        return {}
    try:
        arguments = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"Request body is not valid UTF-8 JSON: {e}") from e
    if not isinstance(arguments, dict):
        raise InvalidInputError("Request body must be a JSON object of arguments")
    return arguments


def create_http_app(service: FormService | None = None) -> Starlette:
    """
    Create the Starlette app serving the RPC procedures.

    Args:
        service: Service to expose. If None, one is built from configuration
            and initialized on startup.
    """
    service = service or FormService.from_config()

    @asynccontextmanager
    async def lifespan(app):
        await service.initialize()
        logger.info(f"Serving {len(PROCEDURES)} procedures")
        yield
        await service.close()

    async def handle_rpc(request: Request) -> JSONResponse:
        name = request.path_params["procedure"]
        try:
            arguments = await _read_arguments(request)
            result = await call_procedure(service, name, arguments)
        except GenFormsError as e:
            status = STATUS_BY_CODE.get(e.code, 500)
            logger.warning(f"{name} failed with {status}: {e.message}")
            return JSONResponse({"error": error_payload(e)}, status_code=status)
        except Exception as e:
            logger.exception(f"Unexpected error in {name}: {e}")
            return JSONResponse({"error": error_payload(e)}, status_code=500)
        return JSONResponse({"result": result})

    async def health_check(request: Request) -> JSONResponse:
        config = get_config()
        return JSONResponse({
            "status": "healthy",
            "service": "gen-forms-http",
            "store": config.store_backend,
        })

    return Starlette(
        routes=[
            Route("/health", health_check, methods=["GET"]),
            Route("/rpc/{procedure}", handle_rpc, methods=["POST"]),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        ],
        lifespan=lifespan,
    )


def run_http_server(host: str = "0.0.0.0", port: int | None = None) -> None:
    """Start the HTTP RPC server with uvicorn."""
    import uvicorn

    port = port or get_config().http_port
    logger.info(f"Gen-Forms RPC server running on http://{host}:{port}")
    uvicorn.run(create_http_app(), host=host, port=port, log_level="info")
