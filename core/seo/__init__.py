"""SEO helpers."""

from .sitemap import SitemapPage, STATIC_PAGES, build_tutorial_url, generate_sitemap

__all__ = ["SitemapPage", "STATIC_PAGES", "build_tutorial_url", "generate_sitemap"]
