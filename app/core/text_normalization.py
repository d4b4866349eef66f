"""
Text normalization utilities for cleaning up PDF/DOCX extraction artifacts.

The pipeline runs in a fixed order, each stage consuming the full output of the
previous one:

- clean_extracted_text(): character-level repair (encoding artifacts, ligatures)
- normalize_spacing(): blank-line and space collapsing, trailing whitespace
- smart_line_breaks(): re-insert structural line breaks lost in extraction
- fix_split_words(): repair known words split by a stray space
- fix_ligatures_and_splits(): repair ligature-driven splits and suffix breaks

All functions are total over strings and never raise.
"""

import re
from typing import Iterable, Tuple


ReplacementRule = Tuple[str, str]


# ============================================================================
# Stage 1: character-level cleaning
# ============================================================================

NON_ASCII_RE = re.compile(r"[^\x00-\x7f]+")
SPACE_RUN_RE = re.compile(r" +")

CHARACTER_FIXES: Tuple[ReplacementRule, ...] = (
    ("@", "a"),   # 'a' extracted as '@'
    ("ﬁ", "fi"),
    ("ﬂ", "fl"),
)


def clean_extracted_text(text: str) -> str:
    """
    Repair common character-level extraction artifacts.

    Examples:
    - "M@nager" → "Manager"
    - "ﬁnance" → "finance"
    - "Café  Lead" → "Caf Lead"
    """
    text = apply_replacement_rules(text, CHARACTER_FIXES)
    text = NON_ASCII_RE.sub("", text)
    return SPACE_RUN_RE.sub(" ", text)


# ============================================================================
# Stage 2: spacing
# ============================================================================

BLANK_LINE_RUN_RE = re.compile(r"\n{3,}")
MULTI_SPACE_RE = re.compile(r" {2,}")


def normalize_spacing(text: str) -> str:
    """Collapse spaces, strip line ends, keep at most one blank line."""
    text = MULTI_SPACE_RE.sub(" ", text)
    text = "\n".join(line.rstrip() for line in text.split("\n"))
    # after rstrip so whitespace-only lines count as blank
    return BLANK_LINE_RUN_RE.sub("\n\n", text)


# ============================================================================
# Stage 3: line breaks
# ============================================================================

SENTENCE_BOUNDARY_RE = re.compile(r"([a-z])\. ([A-Z])")
BULLET_GLYPH_RE = re.compile(r"([•\-*]) ")
NEWLINE_RUN_RE = re.compile(r"\n{2,}")


def smart_line_breaks(text: str) -> str:
    """
    Heuristically restore line structure.

    Single sequential rewrite:
    1. "led sales. Built" → "led sales.\\nBuilt"
    2. "skills • Python" → "skills \\n• Python"
    3. "Boston, MA | john@x.com" → "Boston, MA \\njohn@x.com"
    4. Collapse every run of newlines to one.
    """
    text = SENTENCE_BOUNDARY_RE.sub(r"\1.\n\2", text)
    text = BULLET_GLYPH_RE.sub(r"\n\1 ", text)
    text = text.replace("| ", "\n")
    return NEWLINE_RUN_RE.sub("\n", text)


# ============================================================================
# Stage 4: split-word repair
# ============================================================================

# Applied in order; a later rule sees the output of every earlier one.
SPLIT_WORD_FIXES: Tuple[ReplacementRule, ...] = (
    ("fi nance", "finance"),
    ("fi nancial", "financial"),
    ("pro fi t", "profit"),
    ("analy sis", "analysis"),
    ("opera tions", "operations"),
    ("commu nication", "communication"),
    ("orga nization", "organization"),
    ("edu cation", "education"),
    ("cer tification", "certification"),
    ("expe rience", "experience"),
    ("cus tomer", "customer"),
    ("mana gement", "management"),
    ("col laboration", "collaboration"),
    ("ana lytical", "analytical"),
    ("logis tics", "logistics"),
    ("mar ket", "market"),
    ("re search", "research"),
    ("strat egy", "strategy"),
    ("ser vice", "service"),
    ("pro ject", "project"),
    ("lead ership", "leadership"),
    ("orga nizational", "organizational"),
    ("ac count", "account"),
    ("de velopment", "development"),
    ("solu tion", "solution"),
    ("pre sentation", "presentation"),
    ("tech nical", "technical"),
    ("pro gram", "program"),
    ("infor mation", "information"),
    ("pro cess", "process"),
    ("appli cation", "application"),
    ("resu me", "resume"),
)

LIGATURE_SPLIT_FIXES: Tuple[ReplacementRule, ...] = (
    # Double letters and ligatures
    ("f f", "ff"),
    ("f i", "fi"),
    ("f l", "fl"),
    ("t i", "ti"),
    ("t t", "tt"),
    # Whole words seen broken apart
    ("B u f f a l o", "Buffalo"),
    ("E d u c a + o n", "Education"),
    ("+ ", "t"),  # 'ti' ligature extracted as '+'
    ("communica a on", "communication"),
    ("analy cal", "analytical"),
    ("Col labora on", "Collaboration"),
    ("sta ff", "staff"),
    # "<word> a <suffix>" → "<word><suffix>"
    (" a on", "ation"),
    (" a al", "atal"),
    (" a ve", "ative"),
    (" a ent", "ation"),
    (" a or", "ator"),
    (" a ed", "ated"),
    (" a ing", "ating"),
    (" a ive", "ative"),
    (" a ion", "ation"),
    (" a ons", "ations"),
    (" a ons", "ations"),
    (" a onal", "ational"),
    (" a ional", "ational"),
    (" a ional", "ational"),
    # Already-joined suffixes stay joined
    ("tion", "tion"),
    ("ff", "ff"),
)


def apply_replacement_rules(text: str, rules: Iterable[ReplacementRule]) -> str:
    """Fold literal (old, new) replacements over text, in order."""
    for old, new in rules:
        text = text.replace(old, new)
    return text


def fix_split_words(text: str) -> str:
    """
    Repair specific words split by a stray space.

    Examples:
    - "fi nancial analy sis" → "financial analysis"
    - "commu nication" → "communication"
    """
    return apply_replacement_rules(text, SPLIT_WORD_FIXES)


def fix_ligatures_and_splits(text: str) -> str:
    """
    Aggressive second pass for ligature splits and broken suffixes.

    Examples:
    - "sta f f" → "staff"
    - "communic a on" → "communication"
    - "Col labora on" → "Collaboration"
    """
    return apply_replacement_rules(text, LIGATURE_SPLIT_FIXES)
