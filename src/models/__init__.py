"""Data models for Scrapbox pages and esa posts."""

from src.models.esa_post import EsaPost
from src.models.scrapbox_page import ScrapboxExport, ScrapboxPage

__all__ = ['EsaPost', 'ScrapboxExport', 'ScrapboxPage']
