"""HTTP server for the PDF page extraction tool using FastAPI."""

import asyncio
import logging
import time
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .backends.base import PdfBackend
from .config import get_config
from .service import PageExtractionService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SUPPORTED_OPERATIONS = ["describe_files", "extract_pages"]


# Pydantic models
class FilesRequest(BaseModel):
    """Request body for POST /api/files."""
    paths: List[str] = Field(..., description="Paths of the PDF files to inspect")


class ExtractRequest(BaseModel):
    """Request body for POST /api/extract."""
    paths: List[str] = Field(..., min_length=1, description="Paths of the source PDF files")
    page_range: str = Field(..., description="Pages to extract, e.g. '2-4' or '1,3,5'")


class HealthResponse(BaseModel):
    """Response body for GET /health."""
    status: str = "ok"
    operations: List[str]
    version: str = PageExtractionService.VERSION


def is_pdf_path(path: str) -> bool:
    return path.lower().endswith(".pdf")


def check_pdf_paths(paths: List[str]) -> None:
    """Reject the request unless every path names a PDF file."""
    rejected = [p for p in paths if not is_pdf_path(p)]
    if rejected:
        raise HTTPException(
            status_code=400,
            detail={
                "success": False,
                "error": {
                    "code": "INVALID_FILE_TYPE",
                    "message": "Only PDF files are allowed",
                    "details": {"paths": rejected},
                }
            }
        )


def create_app(backend: Optional[PdfBackend] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="PDF Page Extraction Service",
        description="Extract selected pages of PDF files into an output folder beside each source",
        version=PageExtractionService.VERSION,
    )

    service = PageExtractionService(backend=backend)

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="ok",
            operations=SUPPORTED_OPERATIONS,
            version=PageExtractionService.VERSION,
        )

    @app.get("/ready")
    async def readiness_check():
        return {"status": "ready"}

    @app.post("/api/files")
    async def describe_files(request: FilesRequest):
        """Report name, absolute path and page count of each selected PDF."""
        check_pdf_paths(request.paths)

        files = await asyncio.to_thread(service.describe_files, request.paths)
        return {
            "success": True,
            "files": [f.to_dict() for f in files],
        }

    @app.post("/api/extract")
    async def extract_pages(request: ExtractRequest):
        """Extract the requested pages from every file."""
        check_pdf_paths(request.paths)
        start_time = time.time()
        logger.info(
            f"Extract request: files={len(request.paths)}, pages={request.page_range!r}"
        )

        try:
            outcomes = await asyncio.to_thread(
                service.extract_pages, request.paths, request.page_range
            )
        except Exception as e:
            logger.exception(f"Extraction failed: {e}")
            raise HTTPException(
                status_code=500,
                detail={"success": False, "error": {"code": "PROCESSING_FAILED", "message": str(e)}}
            )

        processing_time_ms = int((time.time() - start_time) * 1000)
        return {
            "success": all(o.success for o in outcomes),
            "results": [o.to_dict() for o in outcomes],
            "processing_time_ms": processing_time_ms,
        }

    return app


# Create app instance for uvicorn
app = create_app()


def run_server(host: Optional[str] = None, port: Optional[int] = None):
    """Run the HTTP server."""
    import uvicorn
    config = get_config()
    host = host or config.server.host
    port = port or config.server.port
    logger.info(f"Starting HTTP server on {host}:{port}")
    uvicorn.run(
        "pagepicker.http_server:app",
        host=host,
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    run_server()
