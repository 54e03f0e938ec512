import json
import logging
from dataclasses import dataclass
from typing import Optional

from ..core.config import settings
from ..schemas.quote import QuoteSelection, QuoteSummaryIn
from ..service_types.catalog import LOCATION_NAMES, service_name, sub_type_name
from .genai_client import get_genai_client
from .quote_engines import FAMILY_ENGINES

logger = logging.getLogger(__name__)

FALLBACK_TITLE = "Your Project Quote"
FALLBACK_SUMMARY = "Here is a summary of your quote selections."


@dataclass(frozen=True)
class QuoteSummary:
    project_title: str
    summary: str
    source: str = "genai"


FALLBACK = QuoteSummary(FALLBACK_TITLE, FALLBACK_SUMMARY, source="fallback")


def summary_input_for(selection: QuoteSelection) -> QuoteSummaryIn:
    """Condense a selection into the fields the summary model needs."""
    service = selection.service
    modifiers = selection.modifiers
    label = service_name(service.service_type) if service else ""
    addons: list[str] = []
    hours: Optional[int] = None
    package_type = "Custom"

    if service is not None:
        sub_label = sub_type_name(service.service_type, service.sub_type)
        if sub_label:
            label = f"{label}: {sub_label}"
        if service.sub_type:
            estimate = FAMILY_ENGINES[service.service_type](service, modifiers)
            addons.extend(item.label for item in estimate.addons)
            if estimate.event_duration == "perHour":
                package_type = "perHour"
                hours = estimate.event_hours
    if modifiers.delivery_timeline == "rush":
        addons.append("Rush Delivery")

    return QuoteSummaryIn(
        service_type=label,
        package_type=package_type,
        hours=hours,
        location=LOCATION_NAMES.get(modifiers.location, modifiers.location),
        location_type=modifiers.location_type,
        addons=addons,
        name=(selection.contact.name or "").strip() or None,
    )


def build_prompt(data: QuoteSummaryIn) -> str:
    opening = (
        f"Start with a friendly opening addressing the customer, {data.name}, by name."
        if data.name
        else "Start with a friendly opening."
    )
    package = f"{data.hours} hours (Per Hour)" if data.hours else "Per Project"
    addons = ", ".join(data.addons) if data.addons else "None"
    return (
        f"You are a friendly and professional sales assistant for a creative media production "
        f"company called {settings.STUDIO_NAME}.\n"
        "Generate a short, encouraging, professional summary for a customer's price quote "
        "and a concise, creative project title.\n"
        f"{opening}\n"
        "Briefly describe the core service, mention the location and location type, and list "
        "any add-ons conversationally. Keep the summary to 1-3 sentences.\n\n"
        "Quote Details:\n"
        f"- Service: {data.service_type}\n"
        f"- Package: {package}\n"
        f"- Location: {data.location}, {data.location_type}\n"
        f"- Add-ons: {addons}\n\n"
        'Respond with JSON only, like: {"projectTitle": "...", "summary": "..."}'
    )


def _parse_summary(text: str) -> Optional[QuoteSummary]:
    start = text.find("{")
    end = text.rfind("}")
    json_str = text[start : end + 1] if start != -1 and end > start else text
    data = json.loads(json_str)
    if not isinstance(data, dict):
        return None
    title = str(data.get("projectTitle") or data.get("project_title") or "").strip()
    summary = str(data.get("summary") or "").strip()
    if not title or not summary:
        return None
    return QuoteSummary(title, summary)


def summarize_quote(data: QuoteSummaryIn) -> QuoteSummary:
    """Return an AI-generated project title and summary for a quote.

    If Gemini is not configured or any error occurs during the request, the
    static fallback pair is returned. A single attempt is made; this never
    raises.
    """
    client = get_genai_client()
    if client is None:
        logger.info("GOOGLE_GENAI_API_KEY not set; using fallback quote summary")
        return FALLBACK

    try:
        res = client.models.generate_content(
            model=settings.GOOGLE_GENAI_MODEL,
            contents=build_prompt(data),
        )
        text = (getattr(res, "text", None) or "").strip()
        if not text:
            logger.warning("GenAI returned empty text; using fallback quote summary")
            return FALLBACK
        parsed = _parse_summary(text)
    except Exception as exc:  # noqa: BLE001 - broad to ensure fallback
        logger.warning("GenAI quote summary failed: %s", exc)
        return FALLBACK

    if parsed is None:
        logger.warning("GenAI summary missing projectTitle/summary; using fallback")
        return FALLBACK
    return parsed
