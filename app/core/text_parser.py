import logging
from typing import Optional

from app.core.date_extraction import Clock
from app.core.line_parser import parse_resume_sections
from app.core.schemas import ParsedResume
from app.core.text_normalization import (
    clean_extracted_text,
    fix_ligatures_and_splits,
    fix_split_words,
    normalize_spacing,
    smart_line_breaks,
)

logger = logging.getLogger(__name__)


def clean_resume_text(text: str) -> str:
    """Run every text-repair stage, in order, over raw extracted text."""
    text = clean_extracted_text(text)
    text = normalize_spacing(text)
    text = smart_line_breaks(text)
    text = fix_split_words(text)
    return fix_ligatures_and_splits(text)


def parse_and_clean_resume(text: str, now: Optional[Clock] = None) -> ParsedResume:
    """
    Clean raw extracted resume text and split it into parsed sections.

    `raw` is always the fully cleaned text; `parsed` is empty when nothing is left
    after cleaning.
    """
    cleaned = clean_resume_text(text)
    sections = parse_resume_sections(cleaned, now) if cleaned else []
    logger.debug(f"Parsed {len(sections)} sections from {len(cleaned)} cleaned characters")
    return ParsedResume(raw=cleaned, parsed=sections)
