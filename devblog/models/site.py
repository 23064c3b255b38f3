"""Site configuration models: metadata, navigation, links, donate and comments."""

from dataclasses import dataclass, field
from enum import Enum


class LinkTarget(str, Enum):
    """Where a navigation link opens."""

    SELF = "_self"  # Current window
    BLANK = "_blank"  # New window


class CommentType(str, Enum):
    """Supported comment backends."""

    WALINE = "waline"
    GISCUS = "giscus"


@dataclass
class SiteInfo:
    """Global site metadata shown in the header, profile and feeds."""

    title: str
    favicon: str
    author: str
    avatar: str
    description: str = ""
    motto: str = ""
    url: str = ""
    recent_blog_size: int = 5  # Recent articles in the sidebar
    archive_page_size: int = 25
    post_page_size: int = 10
    feed_page_size: int = 20
    beian: str = ""  # ICP filing number, shown in the footer when set


@dataclass
class SiteConfig:
    """Runtime switches for the site."""

    lang: str = "en"  # Default website language
    busuanzi: bool = False  # Visitor counter
    code_folding_start_lines: int = 16
    ga: str | None = None  # Google Analytics id, None to disable


@dataclass
class NavCategory:
    """A navigation entry, optionally with nested children."""

    name: str
    icon_class: str
    href: str
    target: LinkTarget | None = None
    children: list["NavCategory"] = field(default_factory=list)


@dataclass
class InfoLink:
    """A personal link shown in the profile card."""

    icon: str
    name: str
    outlink: str


@dataclass
class DonateConfig:
    enable: bool = False
    tip: str = ""
    wechat_qr_code: str = ""
    alipay_qr_code: str = ""
    paypal_url: str = ""


@dataclass
class FriendshipLink:
    name: str
    url: str
    avatar: str = ""
    description: str = ""


@dataclass
class CommentConfig:
    """Comment widget settings.

    ``server_url`` and ``lang`` apply to waline; ``giscus_config`` holds
    the data attributes passed verbatim to the giscus script tag.
    """

    enable: bool = False
    type: CommentType = CommentType.GISCUS
    server_url: str = ""
    lang: str = "en"
    page_size: int = 10
    word_limit: int | None = None  # None or 0 means no limit
    count: int = 5  # Recent comments
    pageview: bool = True
    reaction: bool | list[str] = True
    required_meta: list[str] = field(default_factory=lambda: ["nick", "mail"])
    white_list: list[str] = field(default_factory=list)
    giscus_config: dict[str, str] = field(default_factory=dict)
