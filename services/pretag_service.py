import logging
from typing import Optional

from models.enums import Status
from models.project_model import Project
from services.errors import ExternalServiceError
from utils.pretagging.PreTaggerClient import PreTaggerClient

logger = logging.getLogger(__name__)


async def generate_pre_tags(project: Project, client: PreTaggerClient) -> Optional[Project]:
    """
    Asks the pre-tagging service to label the project. The service writes the
    pre-tags file itself and answers with its location.

    Returns the updated project, or None when the service call failed.
    """
    try:
        response = await client.request_pre_tags(project)
    except ExternalServiceError as e:
        logger.error("Pre-tagging of project %s failed: %s", project.uuid, e)
        return None

    project.pretags_location = response["silver_standard"]
    project.status = Status.PRE_TAGGED
    return project
