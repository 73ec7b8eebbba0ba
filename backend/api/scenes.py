"""
Scene Generation API Routes
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from backend.api.deps import get_scene_service
from backend.core.exceptions import SceneServiceError
from backend.core.logging import get_logger
from backend.models.scene import ErrorResponse, ExpandRequest, GenerateRequest
from backend.services.scenes import SceneService

router = APIRouter()
logger = get_logger("api.scenes")

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/generate", responses=ERROR_RESPONSES)
def generate_scenes(
    body: Any = Body(None),
    service: SceneService = Depends(get_scene_service),
):
    """Split a transcript into a list of scenes."""
    try:
        request = GenerateRequest.from_body(body)
        return service.generate(request.transcript, request.character_description)

    except SceneServiceError as e:
        if e.status_code >= 500:
            logger.error(f"Error in /api/generate: {e}", exc_info=True)
        else:
            logger.info(f"Rejected /api/generate: {e}")
        return error_response(e.status_code, e.message)
    except Exception as e:
        logger.error(f"Error in /api/generate: {e}", exc_info=True)
        return error_response(500, "Failed to generate content from AI.")


@router.post("/expand", responses=ERROR_RESPONSES)
def expand_scenes(
    body: Any = Body(None),
    service: SceneService = Depends(get_scene_service),
):
    """Generate scenes continuing an existing list; returns only the new ones."""
    try:
        request = ExpandRequest.from_body(body)
        return service.expand(request.existing_scenes, request.scenes_to_add)

    except SceneServiceError as e:
        if e.status_code >= 500:
            logger.error(f"Error in /api/expand: {e}", exc_info=True)
        else:
            logger.info(f"Rejected /api/expand: {e}")
        return error_response(e.status_code, e.message)
    except Exception as e:
        logger.error(f"Error in /api/expand: {e}", exc_info=True)
        return error_response(500, "Failed to expand script.")
