"""Site data for the Dev Blog.

Keeps the site metadata, navigation and widget settings in one place so
templates, the CLI and the composition root share the same values.
"""

from __future__ import annotations

from devblog.models import (
    CommentConfig,
    CommentType,
    DonateConfig,
    FriendshipLink,
    InfoLink,
    NavCategory,
    SiteConfig,
    SiteInfo,
)

SITE = SiteInfo(
    title="Dev Blog",
    favicon="/favicon.svg",
    description="Welcome to my independent blog website!",
    author="Andrés Arias",
    avatar="/avatar.png",
    motto="Web Development with Heart and Mind.",
    url="https://astro-yi-nu.vercel.app",
    recent_blog_size=5,
    archive_page_size=25,
    post_page_size=10,
    feed_page_size=20,
    beian="",
)

CONFIG = SiteConfig(
    busuanzi=False,
    lang="en",  # en | zh-cn | cs
    code_folding_start_lines=16,
    ga=None,
)

CATEGORIES: list[NavCategory] = [
    NavCategory(name="Blog", icon_class="ri-draft-line", href="/blog/1"),
    NavCategory(name="Archive", icon_class="ri-archive-line", href="/archive/1"),
    NavCategory(name="Search", icon_class="ri-search-line", href="/search"),
    NavCategory(name="About", icon_class="ri-information-line", href="/about"),
]

INFO_LINKS: list[InfoLink] = []

DONATE = DonateConfig(
    enable=False,
    tip="Thanks for the coffee !!!☕",
    wechat_qr_code="/WeChatQR.png",
    alipay_qr_code="/AliPayQR.png",
    paypal_url="https://paypal.me/xxxxxxxxxx",
)

FRIENDSHIP_LINKS: list[FriendshipLink] = []

COMMENT = CommentConfig(
    enable=False,
    type=CommentType.GISCUS,
    server_url="https://xxxxx.xxxxx.app",
    lang="en",
    page_size=20,
    word_limit=None,
    count=5,
    pageview=True,
    reaction=True,
    required_meta=["nick", "mail"],
    white_list=["/message/", "/friends/"],
    giscus_config={
        "data-repo": "cirry/astro-yi",
        "data-repo-id": "R_kgDOJNr3Jw",
        "data-category": "Announcements",
        "data-category-id": "DIC_kwDOJNr3J84CftB-",
        "data-mapping": "pathname",
        "data-strict": "0",
        "data-reactions-enabled": "1",
        "data-emit-metadata": "0",
        "data-input-position": "bottom",
        "data-theme": "light",
        "data-lang": "zh-CN",
        "crossorigin": "anonymous",
    },
)
