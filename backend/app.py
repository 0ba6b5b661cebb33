# backend/app.py

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config.settings import settings
from .gemini_client import generate_code_from_image
from .logging_config import configure_logging
from .model import GenerateRequest, failure_envelope, success_envelope

GENERIC_ERROR_MESSAGE = "Failed to generate code"

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Figment Code Generation Service")


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(failure_envelope(400, "Invalid request body"), status_code=400)


@app.post("/api/generate")
async def generate(req: GenerateRequest):
    # Validate input trước
    if not req.image or not req.image.strip():
        return JSONResponse(failure_envelope(400, "Image is required"), status_code=400)

    try:
        result = await generate_code_from_image(req.image, req.prompt)
    except Exception:
        # Log đầy đủ phía server, client chỉ nhận message chung
        logger.exception("Generate API error")
        return JSONResponse(failure_envelope(500, GENERIC_ERROR_MESSAGE), status_code=500)

    logger.info("Generated %d chars of code", len(result))
    return success_envelope(result)


@app.get("/health")
async def health():
    return {"status": "ok", "model": settings.GEMINI_MODEL}
