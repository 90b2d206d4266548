"""Synthetic demo data used when no live source can answer.

Every generator takes an explicit ``random.Random`` and reference time, so a
fixed seed yields the same data on every call.
"""

from __future__ import annotations

import random
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from .parsers import ContentType, content_type_for

if TYPE_CHECKING:
    from collections.abc import Callable

INVOICE_VENDORS = (
    "TechCorp",
    "DataSys",
    "CloudServ",
    "DevTools",
    "Enterprise",
    "MegaCorp",
    "StartupInc",
)
INVOICE_STATUSES = ("paid", "pending", "overdue")
TICKET_SUBJECTS = (
    "Billing Issue - Incorrect Charges",
    "Login Problems",
    "Feature Request - Dashboard",
    "Bug Report - Data Export",
    "Account Access Issues",
)
TICKET_PRIORITIES = ("low", "medium", "high", "critical")
TICKET_STATUSES = ("open", "in_progress", "resolved", "closed")
VENDOR_COMPANIES = (
    "TechCorp Ltd",
    "DataSys Inc",
    "CloudServ Solutions",
    "DevTools Pro",
    "Enterprise Systems",
)

MEETING_TRANSCRIPT = "\n".join(
    (
        "Meeting Transcript - Project Planning Session",
        "",
        "John: We need to finalize the budget by Friday. "
        "@Sarah can you prepare the financial report?",
        "Sarah: Sure, I'll have it ready by Thursday. "
        "@Mike, can you review the technical requirements?",
        "Mike: I'll review them by Wednesday and send feedback. "
        "@John, we should schedule a follow-up meeting.",
        "John: Good idea. Let's meet again next Monday to discuss the final details.",
        "Alice: @Tom, please update the project timeline based on today's discussion.",
        "Tom: Will do. I'll have the updated timeline ready by tomorrow.",
    )
)

_SITEMAP_PAGES = (
    ("/", "2024-01-01", "1.0"),
    ("/about", "2024-01-02", "0.8"),
    ("/products", "2024-01-03", "0.9"),
    ("/contact", "2024-01-04", "0.7"),
    ("/blog", "2024-01-05", "0.6"),
)

EMPTY_MARKUP = '<?xml version="1.0"?><root></root>'
SAMPLE_TEXT = "Sample text data"
UNKNOWN_TYPE_TEXT = "Unknown file type"


def _past_timestamp(rng: random.Random, now: datetime, *, max_days: int) -> datetime:
    return now - timedelta(seconds=rng.random() * max_days * 24 * 60 * 60)


def invoices(
    count: int = 10,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> list[dict[str, object]]:
    rng = rng or random.Random()  # noqa: S311
    now = now or datetime.now(tz=UTC)
    return [
        {
            "invoice_id": f"INV-{index + 1:03d}",
            "vendor": INVOICE_VENDORS[index % len(INVOICE_VENDORS)],
            "amount": rng.randrange(1000, 51000),
            "date": _past_timestamp(rng, now, max_days=90).date().isoformat(),
            "status": INVOICE_STATUSES[index % len(INVOICE_STATUSES)],
            "iban": "GB33BUKB20201555555555",
            "created_at_utc": now.isoformat(),
        }
        for index in range(count)
    ]


def vendors(
    count: int = 5,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> list[dict[str, object]]:
    rng = rng or random.Random()  # noqa: S311
    now = now or datetime.now(tz=UTC)
    records: list[dict[str, object]] = []
    for index in range(count):
        company = VENDOR_COMPANIES[index % len(VENDOR_COMPANIES)]
        records.append(
            {
                "vendor_id": f"VEN-{index + 1:03d}",
                "name": company,
                "email": f"contact@{''.join(company.lower().split())}.com",
                "tax_id": f"TAX{index + 1:06d}",
                "bank_account": f"GB33BUKB20201{index + 1:09d}",
                "created_at": _past_timestamp(rng, now, max_days=365).isoformat(),
                "status": "active",
            }
        )
    return records


def support_tickets(
    count: int = 5,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> list[dict[str, object]]:
    rng = rng or random.Random()  # noqa: S311
    now = now or datetime.now(tz=UTC)
    tickets: list[dict[str, object]] = []
    for index in range(count):
        subject = TICKET_SUBJECTS[index % len(TICKET_SUBJECTS)]
        tickets.append(
            {
                "id": f"TICKET-{index + 1:03d}",
                "subject": subject,
                "description": f"Customer reports issue with {subject.lower()}",
                "priority": TICKET_PRIORITIES[index % len(TICKET_PRIORITIES)],
                "status": TICKET_STATUSES[index % len(TICKET_STATUSES)],
                "created_at": _past_timestamp(rng, now, max_days=30).isoformat(),
                "customer_id": f"CUST-{index + 1:03d}",
            }
        )
    return tickets


def action_items() -> list[dict[str, str]]:
    return [
        {
            "owner": "Sarah",
            "title": "Prepare financial report",
            "due": "2025-10-20",
            "priority": "high",
        },
        {
            "owner": "Mike",
            "title": "Review technical requirements",
            "due": "2025-10-18",
            "priority": "medium",
        },
        {
            "owner": "Tom",
            "title": "Update project timeline",
            "due": "2025-10-17",
            "priority": "medium",
        },
    ]


def meeting_transcript() -> str:
    return MEETING_TRANSCRIPT


def sitemap(base_url: str = "https://example.com") -> str:
    entries = "\n".join(
        "  <url>\n"
        f"    <loc>{base_url}{path}</loc>\n"
        f"    <lastmod>{lastmod}</lastmod>\n"
        f"    <priority>{priority}</priority>\n"
        "  </url>"
        for path, lastmod, priority in _SITEMAP_PAGES
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{entries}\n"
        "</urlset>"
    )


def default_fallback(
    filename: str,
    *,
    seed: int | None = None,
    now: datetime | None = None,
) -> Callable[[], object]:
    """Return a generator for the demo fixture matching ``filename``.

    The fixture is chosen from the content type and keywords in the name
    (``invoice``, ``vendor``, ``ticket``, ``action``, ``transcript``,
    ``sitemap``). Each call of the returned generator starts from ``seed``.
    """

    name = filename.lower()
    content_type = content_type_for(filename)

    def rng() -> random.Random:
        return random.Random(seed)  # noqa: S311

    if content_type is ContentType.TABLE:
        if "invoice" in name:
            return lambda: invoices(rng=rng(), now=now)
        if "vendor" in name:
            return lambda: vendors(rng=rng(), now=now)
        return list
    if content_type is ContentType.DOCUMENT:
        if "ticket" in name:
            return lambda: support_tickets(rng=rng(), now=now)
        if "action" in name:
            return action_items
        return dict
    if content_type is ContentType.MARKUP:
        return sitemap if "sitemap" in name else (lambda: EMPTY_MARKUP)
    if name.endswith(".txt"):
        return meeting_transcript if "transcript" in name else (lambda: SAMPLE_TEXT)
    return lambda: UNKNOWN_TYPE_TEXT
