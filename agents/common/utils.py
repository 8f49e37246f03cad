"""Shared utility functions for agents."""

import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def parse_json_response(response: str) -> Optional[Dict[str, Any]]:
    """Safely parse a JSON object from a model response.

    Tolerates markdown code fences (```json ... ``` or bare ```) and
    leading/trailing prose around a single object.

    Args:
        response: Model response text that may contain JSON

    Returns:
        Parsed JSON object or None if no object could be parsed
    """
    if not response:
        return None

    text = response.strip()
    if "```" in text:
        start = text.find("```")
        start = text.find("\n", start)
        end = text.find("```", start + 1)
        if start != -1 and end != -1:
            text = text[start + 1:end].strip()

    candidates = [text]
    first, last = text.find("{"), text.rfind("}")
    if first != -1 and last > first:
        candidates.append(text[first:last + 1])

    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed

    logger.warning("Response is not a valid JSON object")
    return None


def format_agent_context(context: Dict[str, Any]) -> str:
    """Format a dict as ``Label: value`` lines, skipping empty values.

    Args:
        context: Context data to format

    Returns:
        Formatted context string
    """
    lines = []
    for key, value in context.items():
        if value in (None, "", [], {}):
            continue
        label = key.replace("_", " ").title()
        if isinstance(value, (list, dict)):
            lines.append(f"{label}: {json.dumps(value, default=str)}")
        else:
            lines.append(f"{label}: {value}")
    return "\n".join(lines)


def clamp_score(value: Any, low: int = 0, high: int = 100) -> int:
    """Coerce a model-provided score into [low, high]; junk becomes low."""
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError):
        return low
    return max(low, min(high, score))
