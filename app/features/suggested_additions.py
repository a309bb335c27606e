from __future__ import annotations

from app.schemas.ats import SuggestedAdditions

# Candidate keywords per category, most specific first.
_BOOKING_TERMS = ("booking management", "booking", "bookings")
_TRAVEL_TERMS = ("travel operations", "travel booking", "travel")
_CUSTOMER_TERMS = ("customer support", "customer", "service")
_SUPPLIER_TERMS = ("supplier coordination", "suppliers", "supplier")
_OTA_TERMS = ("ota", "operations ota", "ota operations")
_REPORTING_TERMS = ("reporting", "dashboards", "mis")
_TOOL_TERMS = ("google sheets", "sheets", "excel", "crm")

_TOOL_LABELS = (
    (("excel",), "Excel"),
    (("google sheets", "sheets"), "Google Sheets"),
    (("crm",), "CRM"),
    (("dashboards",), "Dashboards"),
    (("reporting",), "Reporting"),
    (("mis",), "MIS"),
)


def _pick_first(present: set[str], candidates: tuple[str, ...]) -> str | None:
    return next((candidate for candidate in candidates if candidate in present), None)


def build_suggested_additions(missing: list[str]) -> SuggestedAdditions:
    """Fill summary, bullet and skills templates for the categories found in ``missing``."""
    present = set(missing)

    booking = _pick_first(present, _BOOKING_TERMS)
    travel = _pick_first(present, _TRAVEL_TERMS)
    customer = _pick_first(present, _CUSTOMER_TERMS)
    supplier = _pick_first(present, _SUPPLIER_TERMS)
    ota = _pick_first(present, _OTA_TERMS)
    reporting = _pick_first(present, _REPORTING_TERMS)
    tools = _pick_first(present, _TOOL_TERMS)

    summary: list[str] = []
    if travel or booking:
        exposure = " and ".join(term for term in (travel, booking) if term)
        summary.append(
            f"Operations professional with exposure to {exposure} and a focus on accuracy and turnaround time."
        )
    if customer or supplier or ota:
        summary.append(
            "Comfortable coordinating across stakeholders"
            f"{' (customers)' if customer else ''}"
            f"{' and suppliers' if supplier else ''}"
            f"{' and working with OTAs' if ota else ''}."
        )

    experience_bullets = [
        f"- Managed {booking or 'bookings'} / {travel or 'travel requests'} end-to-end: confirmations, vouchers, "
        "and timely updates to stakeholders. (Impact: [add metric])"
    ]
    if supplier or customer:
        experience_bullets.append(
            f"- Coordinated with {'suppliers' if supplier else 'partners'} and "
            f"{'customers' if customer else 'internal teams'} to resolve issues and ensure smooth service delivery. "
            "(Impact: [add metric])"
        )
    if reporting or tools:
        experience_bullets.append(
            f"- Maintained daily MIS / reporting using {tools or 'Excel/Google Sheets'} and tracked operational "
            "metrics on dashboards for continuous improvements. (Impact: [add metric])"
        )

    skills: list[str] = []
    tool_labels = [label for terms, label in _TOOL_LABELS if any(term in present for term in terms)]
    if tool_labels:
        skills.append(f"- Tools: {', '.join(tool_labels)}")
    if ota:
        skills.append("- Platforms: OTA portals (as applicable)")
    operations = [term for term in (booking, customer, supplier) if term]
    if operations:
        skills.append(f"- Operations: {', '.join(operations)}")

    return SuggestedAdditions(summary=summary, experience_bullets=experience_bullets, skills=skills)
