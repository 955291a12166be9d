import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import LOG_LEVEL
from models.database import Base, engine
from routes import project, tagging
from services.errors import (
    DirectoryDeleteError,
    DownloadError,
    ExternalServiceError,
    InvalidTagError,
    InvalidUploadError,
    OutOfRangeError,
    ProjectFilesError,
    UnsupportedFormatError,
    UploadError,
)

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

Base.metadata.create_all(bind=engine)

ERROR_STATUS_CODES = {
    OutOfRangeError: 400,
    InvalidUploadError: 400,
    InvalidTagError: 400,
    UnsupportedFormatError: 400,
    DownloadError: 404,
    DirectoryDeleteError: 500,
    UploadError: 502,
    ExternalServiceError: 502,
}

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(project.router)
app.include_router(tagging.router)


@app.exception_handler(ProjectFilesError)
async def project_files_error_handler(request: Request, exc: ProjectFilesError):
    return JSONResponse(status_code=ERROR_STATUS_CODES.get(type(exc), 500), content={"detail": str(exc)})


@app.get("/")
def root():
    return {"message": "API works!"}
