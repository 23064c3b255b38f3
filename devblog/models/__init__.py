"""Domain models for the Dev Blog site core."""

from devblog.models.site import (
    CommentConfig,
    CommentType,
    DonateConfig,
    FriendshipLink,
    InfoLink,
    LinkTarget,
    NavCategory,
    SiteConfig,
    SiteInfo,
)

__all__ = [
    # Site
    "SiteInfo",
    "SiteConfig",
    # Navigation and links
    "NavCategory",
    "LinkTarget",
    "InfoLink",
    "FriendshipLink",
    # Widgets
    "DonateConfig",
    "CommentConfig",
    "CommentType",
]
