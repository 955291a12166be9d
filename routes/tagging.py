from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from models.database import get_db
from repositories.project_repository import get_project_or_404, save_project
from routes.dependencies import get_blob_store, get_pretagger_client
from services.pretag_service import generate_pre_tags
from services.project_file_service import get_data_batch, update_tag

router = APIRouter(
    prefix="/api/projects",
    tags=["Tagging"]
)


@router.get("/{project_id}/batch")
async def get_batch(project_id: int, start: int = 0, size: int = 10,
                    db: Session = Depends(get_db), store=Depends(get_blob_store)):
    project = get_project_or_404(project_id, db)
    return await get_data_batch(project, start, size, store)


@router.post("/{project_id}/tag")
async def add_tag(project_id: int, row_id: int, tag: str,
                  db: Session = Depends(get_db), store=Depends(get_blob_store)):
    project = get_project_or_404(project_id, db)

    updated = await update_tag(project, row_id, tag, store)
    if updated is None:
        raise HTTPException(status_code=502, detail="Tag could not be saved.")

    save_project(db, updated)
    return {
        "message": "Tag updated successfully",
        "row_id": row_id,
        "tag": tag,
        "num_tagged_rows": updated.num_tagged_rows,
        "status": updated.status.value,
    }


@router.post("/{project_id}/pre-tag")
async def pre_tag_project(project_id: int, db: Session = Depends(get_db),
                          client=Depends(get_pretagger_client)):
    project = get_project_or_404(project_id, db)

    updated = await generate_pre_tags(project, client)
    if updated is None:
        raise HTTPException(status_code=502, detail="Pre-tagging service call failed.")

    save_project(db, updated)
    return {"message": "Project was pre-tagged", "silver_standard": updated.pretags_location,
            "status": updated.status.value}
