import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.project_model import Project

logger = logging.getLogger(__name__)


def get_project_or_404(project_id: int, db: Session) -> Project:
    project = db.query(Project).filter(Project.id == project_id).first()
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    if not project.data_location or not project.tags_location:
        raise HTTPException(status_code=404, detail="Project files are not initialized")
    return project


def get_projects(db: Session) -> List[Project]:
    return db.query(Project).order_by(Project.id).all()


def add_project(db: Session, new_project: Project):
    _commit(db, new_project)


def save_project(db: Session, project: Project):
    if not db.object_session(project):
        project = db.merge(project)
    _commit(db, project)


def delete_project(db: Session, project: Project):
    try:
        db.delete(project)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error deleting project %s", project.uuid)
        raise


def _commit(db: Session, project: Project):
    try:
        db.add(project)
        db.commit()
        db.refresh(project)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error saving project %s", project.uuid)
        raise
