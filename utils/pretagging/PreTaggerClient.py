import asyncio
import json
import logging
from typing import Optional

import aiohttp

from models.project_model import Project
from services.errors import ExternalServiceError
from utils.tagging.constants import PRETAGGER_API_PATH

logger = logging.getLogger(__name__)


class PreTaggerClient:
    def __init__(self, host: str, scheme: str = "https", path: str = PRETAGGER_API_PATH, timeout: Optional[float] = None):
        """
        Client of the automatic pre-tagging service.

        :param host: host (and optional port) of the service.
        :param scheme: "https" or "http".
        :param path: endpoint receiving the labelling requests.
        :param timeout: total request timeout in seconds, None for aiohttp's default.
        """
        self.url = f"{scheme}://{host}{path}"
        self.timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None

    @staticmethod
    def build_payload(project: Project) -> dict:
        return {
            "userId": str(project.owner_id),
            "projectId": project.uuid,
            "fileType": project.data_format.value,
            "projectType": project.project_type.value,
            "dataFile": project.data_location,
            "tagsFile": project.tags_location,
        }

    async def request_pre_tags(self, project: Project) -> dict:
        """
        Sends one labelling request and waits for the full response body.

        :return: the decoded response, guaranteed to hold a string under "silver_standard".
        """
        payload = self.build_payload(project)
        logger.info("Sending pre-tagging request to %s for project %s.", self.url, project.uuid)
        logger.debug("Pre-tagging payload: %s", payload)

        session_kwargs = {"timeout": self.timeout} if self.timeout else {}
        try:
            async with aiohttp.ClientSession(**session_kwargs) as session:
                async with session.post(self.url, json=payload) as response:
                    body = await response.text()
                    logger.info("Pre-tagging service answered with status %s.", response.status)
                    if not 200 <= response.status < 300:
                        raise ExternalServiceError(
                            f"Pre-tagging service returned status {response.status}: {body[:200]}"
                        )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ExternalServiceError(f"Pre-tagging request failed: {e}") from e

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise ExternalServiceError(f"Pre-tagging service returned invalid JSON: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("silver_standard"), str):
            raise ExternalServiceError("Pre-tagging response is missing 'silver_standard'.")
        return data
