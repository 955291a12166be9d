import json
import logging
from typing import List

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import Response
from sqlalchemy.orm import Session

from models.database import get_db
from models.enums import DataFormat, ProjectType
from models.project_file import ProjectFile
from models.project_model import Project
from repositories.project_repository import add_project, delete_project, get_project_or_404, get_projects
from routes.dependencies import get_blob_store
from services.errors import DirectoryDeleteError
from services.project_file_service import (
    delete_project_files,
    export_project,
    initialize_project,
    set_project_files,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/projects",
    tags=["Project"]
)


def project_summary(project: Project) -> dict:
    return {
        "id": project.id,
        "uuid": project.uuid,
        "name": project.name,
        "description": project.description,
        "owner_id": project.owner_id,
        "project_type": project.project_type.value,
        "data_format": project.data_format.value,
        "available_tags": json.loads(project.available_tags or "[]"),
        "status": project.status.value,
        "num_tagged_rows": project.num_tagged_rows,
        "total": project.num_total_rows,
        "created_at": project.created_at,
    }


@router.post("/add")
async def add_new_project(
    name: str = Form(...),
    owner_id: str = Form(...),
    project_type: str = Form(...),
    data_format: str = Form(...),
    description: str = Form(""),
    tags: str = Form("[]"),
    files: List[UploadFile] = File(...),
    db: Session = Depends(get_db),
    store=Depends(get_blob_store),
):
    parsed_type = ProjectType.from_text(project_type)
    if parsed_type is None:
        raise HTTPException(status_code=400, detail=f"Unknown project type '{project_type}'.")
    parsed_format = DataFormat.from_text(data_format)
    if parsed_format is None:
        raise HTTPException(status_code=400, detail=f"Unknown data format '{data_format}'.")

    try:
        available_tags = json.loads(tags)
    except json.JSONDecodeError:
        raise HTTPException(status_code=400, detail="Tags must be a JSON list.")
    if not isinstance(available_tags, list):
        raise HTTPException(status_code=400, detail="Tags must be a JSON list.")

    project_files = []
    for file in files:
        try:
            content = (await file.read()).decode("utf-8")
        except UnicodeDecodeError:
            raise HTTPException(status_code=400, detail=f"File '{file.filename}' is not UTF-8 text.")
        project_files.append(ProjectFile(name=file.filename, content=content))

    project = initialize_project(name, owner_id, description, parsed_type, parsed_format, available_tags)
    initialized = await set_project_files(project, project_files, store)
    if initialized is None:
        try:
            await delete_project_files(project, store)
        except DirectoryDeleteError:
            logger.error("Partially uploaded files of project %s were left behind.", project.uuid)
        raise HTTPException(status_code=502, detail="Project files could not be uploaded.")

    add_project(db, initialized)
    return {"message": "Project is added!", "project_id": initialized.id}


@router.get("/")
def list_projects(db: Session = Depends(get_db)):
    return [project_summary(project) for project in get_projects(db)]


@router.get("/{project_id}")
def get_project_by_id(project_id: int, db: Session = Depends(get_db)):
    return project_summary(get_project_or_404(project_id, db))


@router.get("/{project_id}/download")
async def download_tagged_file(project_id: int, db: Session = Depends(get_db), store=Depends(get_blob_store)):
    project = get_project_or_404(project_id, db)
    content = await export_project(project, store)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={project.uuid}_tags.csv"},
    )


@router.delete("/{project_id}")
async def remove_project(project_id: int, db: Session = Depends(get_db), store=Depends(get_blob_store)):
    project = get_project_or_404(project_id, db)
    await delete_project_files(project, store)
    delete_project(db, project)
    return {"message": "Project has been successfully deleted"}
