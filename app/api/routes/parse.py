import logging

from fastapi import APIRouter, Depends, UploadFile, File, HTTPException

from app.config import Settings, get_settings
from app.core.entry_grouping import group_resume
from app.core.schemas import GroupedResume, ParsedResume, ParseTextRequest
from app.core.text_parser import parse_and_clean_resume

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])

TEXT_CONTENT_TYPES = {"text/plain", "text/markdown"}
TEXT_EXTENSIONS = (".txt", ".md")

EXAMPLE_RESPONSE = {
    "raw": "Jane Doe\nEDUCATION\nBoston University\nEXPERIENCE\nAnalyst, Deloitte, 2019",
    "parsed": [
        {"title": "Profile", "fields": [{"label": "Full Name", "value": "Jane Doe"}]},
        {"title": "Education", "fields": [{"label": "institution", "value": "Boston University"}]},
        {"title": "Experience", "fields": [
            {"label": "job_title", "value": "Analyst"},
            {"label": "company", "value": "Deloitte"},
            {"label": "end_date", "value": "2019"},
        ]},
    ],
}


def _check_size(size: int, settings: Settings) -> None:
    if size > settings.max_upload_bytes:
        logger.warning(f"Rejected resume text of {size} bytes (limit {settings.max_upload_bytes})")
        raise HTTPException(
            status_code=413,
            detail=f"Resume text exceeds {settings.max_upload_bytes} bytes."
        )


@router.post(
    "/parse",
    response_model=ParsedResume,
    summary="Parse Resume Text File",
    description="Clean already-extracted resume text (TXT or Markdown upload) and split it into labelled sections.",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {"application/json": {"example": EXAMPLE_RESPONSE}}
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File too large"},
        415: {"description": "Unsupported file format (PDF/DOCX must be extracted to text first)"}
    }
)
async def parse_resume(
    file: UploadFile = File(..., description="Resume text file (TXT or MD)"),
    settings: Settings = Depends(get_settings),
):
    """
    Parse an uploaded resume text file.

    **Returns:**
    - **raw**: the text after cleaning, spacing, line-break and split-word repair
    - **parsed**: sections in document order (Experience last), each a list of label/value fields
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    _check_size(len(raw), settings)

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()

    if content_type not in TEXT_CONTENT_TYPES and not filename.endswith(TEXT_EXTENSIONS):
        logger.warning(f"Rejected upload '{filename}' with content type '{content_type}'")
        raise HTTPException(
            status_code=415,
            detail=f"Unsupported content type: {file.content_type}. Upload extracted text (.txt or .md)."
        )

    text = raw.decode(settings.text_encoding, errors="replace")
    result = parse_and_clean_resume(text)
    logger.info(f"Parsed upload '{filename}' into {len(result.parsed)} sections")
    return result


@router.post(
    "/parse/text",
    response_model=ParsedResume,
    summary="Parse Resume Text",
    description="Clean raw resume text sent as JSON and split it into labelled sections.",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {"application/json": {"example": EXAMPLE_RESPONSE}}
        },
        413: {"description": "Text too large"}
    }
)
def parse_resume_text(
    request: ParseTextRequest,
    settings: Settings = Depends(get_settings),
):
    _check_size(len(request.text.encode(settings.text_encoding, errors="replace")), settings)
    result = parse_and_clean_resume(request.text)
    logger.info(f"Parsed text body into {len(result.parsed)} sections")
    return result


@router.post(
    "/parse/grouped",
    response_model=GroupedResume,
    summary="Parse Resume Text Into Records",
    description="Parse raw resume text and regroup the flat fields into profile, jobs, degrees and skills.",
    responses={
        413: {"description": "Text too large"}
    }
)
def parse_resume_grouped(
    request: ParseTextRequest,
    settings: Settings = Depends(get_settings),
):
    _check_size(len(request.text.encode(settings.text_encoding, errors="replace")), settings)
    grouped = group_resume(parse_and_clean_resume(request.text))
    logger.info(
        f"Grouped text body into {len(grouped.experience)} jobs and {len(grouped.education)} degrees"
    )
    return grouped
