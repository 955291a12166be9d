from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, Integer, String, Text

from .database import Base
from .enums import DataFormat, ProjectType, Status


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    uuid = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, index=True)
    description = Column(Text)
    owner_id = Column(String, index=True, nullable=False)
    project_type = Column(Enum(ProjectType), nullable=False)
    data_format = Column(Enum(DataFormat), nullable=False)
    available_tags = Column(String)
    status = Column(Enum(Status), default=Status.NOT_TAGGED)

    # relative to "{owner_id}/{uuid}/"
    data_location = Column(String, nullable=True)
    tags_location = Column(String, nullable=True)
    pretags_location = Column(String, nullable=True)

    num_total_rows = Column(Integer, default=0)
    num_tagged_rows = Column(Integer, default=0)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
