"""
Response extractor — turns a free-text model reply into an AnalysisRecord.

Three sequential stages, each must succeed before the next runs:
1. Slice from the first "{" to the last "}" to drop surrounding prose and
   markdown fences.
2. Remove trailing commas before "}" or "]".
3. Parse and validate into AnalysisRecord, tolerating missing keys but
   rejecting mistyped values.

Unescaped quotes inside string values are not repaired; they fail stage 3.
"""

import logging
import re

from pydantic import ValidationError

from verse_explorer.core.errors import MalformedResponse
from verse_explorer.models.analysis import AnalysisRecord

logger = logging.getLogger(__name__)

# A comma followed only by whitespace or more such commas up to a closer.
_TRAILING_COMMA = re.compile(r",(?=[\s,]*[}\]])")


def extract_json_block(raw_content: str) -> str:
    """Return the substring from the first '{' through the last '}' inclusive."""
    start = raw_content.find("{")
    end = raw_content.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise MalformedResponse("No JSON object found in the model response.")
    return raw_content[start : end + 1]


def repair_trailing_commas(json_text: str) -> str:
    """Drop commas that directly precede a closing brace or bracket."""
    return _TRAILING_COMMA.sub("", json_text)


def decode_analysis(json_text: str) -> AnalysisRecord:
    """Validate a JSON object into an AnalysisRecord."""
    try:
        return AnalysisRecord.model_validate_json(json_text)
    except ValidationError as exc:
        raise MalformedResponse(str(exc)) from exc


def extract_analysis(raw_content: str) -> AnalysisRecord:
    """
    Recover an AnalysisRecord from raw model output.

    Raises:
        MalformedResponse: No JSON object is present or it does not decode.
    """
    block = extract_json_block(raw_content)
    repaired = repair_trailing_commas(block)
    if repaired != block:
        logger.debug("Removed trailing commas from model JSON.")
    return decode_analysis(repaired)
