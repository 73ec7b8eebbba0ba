"""
Scene Backend Client

HTTP connector for the PromptVEO scene proxy.
"""

from typing import Any, Dict, List, Optional

import httpx

from promptveo.core.exceptions import TransportError
from promptveo.core.logging_config import get_logger

logger = get_logger("services.scene_client")

SceneList = List[Dict[str, Any]]


class SceneApiClient:
    """Calls /api/generate and /api/expand on the scene backend."""

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _post(self, endpoint: str, body: Dict[str, Any]) -> SceneList:
        try:
            response = self._client.post(endpoint, json=body)
        except httpx.HTTPError as e:
            logger.error(f"Error calling backend API at {endpoint}: {e}")
            raise TransportError(str(e) or e.__class__.__name__)

        if response.is_error:
            reason = _error_message(response)
            logger.error(f"Backend API at {endpoint} answered {response.status_code}: {reason}")
            raise TransportError(reason, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON from server: {e}", status_code=response.status_code)

        if not isinstance(data, list):
            raise TransportError("Server did not return a scene list", status_code=response.status_code)
        return data

    def generate_scenes(self, transcript: str, character_description: str = "") -> SceneList:
        return self._post(
            "/api/generate",
            {"transcript": transcript, "characterDescription": character_description},
        )

    def expand_script(self, existing_scenes: SceneList, scenes_to_add: int) -> SceneList:
        return self._post(
            "/api/expand",
            {"existingScenes": existing_scenes, "scenesToAdd": scenes_to_add},
        )


def _error_message(response: httpx.Response) -> str:
    fallback = f"Request failed with status {response.status_code}"
    try:
        payload = response.json()
    except ValueError:
        return fallback
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return fallback
