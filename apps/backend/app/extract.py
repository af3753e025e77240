"""
Job posting extraction endpoints.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.rate_limit import limiter, RATE_LIMIT_EXTRACT
from crawler.browser_crawler import BrowserCrawler, BrowserLaunchConfig
from crawler.plugins.registry import get_plugin_registry
from pipeline.extractor import JobExtractor, InvalidURLError
from pipeline.models import JobPostingRecord

logger = logging.getLogger(__name__)
router = APIRouter()


class ExtractJobRequest(BaseModel):
    url: Optional[str] = None


def get_job_extractor() -> JobExtractor:
    """Dependency providing an extractor configured from the environment."""
    return JobExtractor(
        crawler=BrowserCrawler(BrowserLaunchConfig.from_env()),
        registry=get_plugin_registry()
    )


@router.post("/api/extract-job", response_model=JobPostingRecord)
@limiter.limit(RATE_LIMIT_EXTRACT)
async def extract_job(
    request: Request,
    body: ExtractJobRequest,
    extractor: JobExtractor = Depends(get_job_extractor),
):
    """
    Extract a job posting from a job board URL.

    Always answers 200 with a record for a non-blank URL; when the page
    cannot be rendered the record is built from the URL alone.
    """
    try:
        record = await extractor.extract(body.url)
    except InvalidURLError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        logger.error(f"[api/extract-job] Job extraction error: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to extract job information",
                "details": str(e)
            }
        )

    return JSONResponse(status_code=200, content=record.to_dict())


@router.get("/api/extract-job/sites")
async def list_sites():
    """Sites with dedicated extraction plugins, in dispatch order."""
    return {"plugins": get_plugin_registry().list_plugins()}
