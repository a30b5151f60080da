"""esa post data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

SCRAPBOX_CATEGORY = "scrapbox"
BOT_USER = "esa_bot"


@dataclass(frozen=True)
class EsaPost:
    """Post submitted to esa to create one document.

    Attributes:
        name: Post title (the Scrapbox page title)
        body_md: Converted Markdown body
        tags: Tags attached to the post
        category: Category path identifying where the post came from
        wip: Work-in-progress flag; migrated pages are always shipped
        message: Revision message
        user: screen_name the post is created as
    """
    name: str
    body_md: str
    tags: List[str] = field(default_factory=list)
    category: str = SCRAPBOX_CATEGORY
    wip: bool = False
    message: str = ""
    user: str = BOT_USER

    def to_payload(self) -> Dict[str, Any]:
        """Return the request envelope expected by the create-post endpoint."""
        return {
            "post": {
                "name": self.name,
                "body_md": self.body_md,
                "tags": list(self.tags),
                "category": self.category,
                "wip": self.wip,
                "message": self.message,
                "user": self.user,
            }
        }
