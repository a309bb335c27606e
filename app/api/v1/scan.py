from fastapi import APIRouter, HTTPException, Request, status

from app.core.rate_limit import rate_limit
from app.schemas.ats import AtsResult, ScanRequest
from app.services.ats_service import run_scan

router = APIRouter()


@router.post("/scan", response_model=AtsResult, summary="Score a resume against a job description")
@rate_limit()
def scan_resume(request: Request, payload: ScanRequest):
    _ = request
    if not payload.job_description_text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="job_description_text is required")
    if not payload.resume_text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="resume_text is required")
    return run_scan(payload)
