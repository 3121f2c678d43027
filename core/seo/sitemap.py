"""Generate sitemap.xml for the tutorial site."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from xml.sax.saxutils import escape

from core.catalog.types import FlatEntry


@dataclass(frozen=True)
class SitemapPage:
    """One <url> entry."""

    path: str
    priority: str
    changefreq: str
    lastmod: date | None = None


STATIC_PAGES = (
    SitemapPage(path="/", priority="1.0", changefreq="daily"),
    SitemapPage(path="/about", priority="0.8", changefreq="monthly"),
    SitemapPage(path="/contact", priority="0.7", changefreq="monthly"),
    SitemapPage(path="/privacy", priority="0.5", changefreq="yearly"),
    SitemapPage(path="/terms", priority="0.5", changefreq="yearly"),
)

TUTORIAL_PRIORITY = "0.9"
TUTORIAL_CHANGEFREQ = "weekly"


def build_tutorial_url(topic_id: str) -> str:
    """Path of a tutorial page for a topic."""
    return f"/tutorial/{topic_id}"


def tutorial_pages(entries: Iterable[FlatEntry], lastmod: date) -> list[SitemapPage]:
    """One sitemap page per topic, in catalog order."""
    return [
        SitemapPage(
            path=build_tutorial_url(entry.id),
            priority=TUTORIAL_PRIORITY,
            changefreq=TUTORIAL_CHANGEFREQ,
            lastmod=lastmod,
        )
        for entry in entries
    ]


def generate_sitemap(
    entries: Iterable[FlatEntry],
    base_url: str,
    today: date | None = None,
) -> str:
    """
    Render the sitemap XML.

    Static pages come first, followed by every tutorial page. Pages
    without their own lastmod use today's date.

    Args:
        entries: Flattened catalog entries
        base_url: Site URL, e.g. "https://learnstackhub.com"
        today: Generation date (defaults to date.today())

    Returns:
        sitemap.xml document as a string
    """
    today = today or date.today()
    base_url = base_url.rstrip("/")
    pages = [*STATIC_PAGES, *tutorial_pages(entries, today)]

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
    ]
    for page in pages:
        lastmod = (page.lastmod or today).isoformat()
        lines.extend(
            [
                "  <url>",
                f"    <loc>{escape(base_url + page.path)}</loc>",
                f"    <lastmod>{lastmod}</lastmod>",
                f"    <changefreq>{page.changefreq}</changefreq>",
                f"    <priority>{page.priority}</priority>",
                "  </url>",
            ]
        )
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"
