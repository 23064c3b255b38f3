"""English UI strings."""

STRINGS = {
    # Navigation
    "nav.blog": "Blog",
    "nav.feed": "Feed",
    "nav.archive": "Archive",
    "nav.message": "Message",
    "nav.search": "Search",
    "nav.about": "About",
    "nav.friends": "Friends",
    "nav.more": "More",

    # Sidebar
    "sidebar.welcome": "Welcome",
    "sidebar.recentArticle": "Recent Articles",
    "sidebar.recentComments": "Recent Comments",
    "sidebar.tagCloud": "Tag Cloud",
    "sidebar.categoryCloud": "Category Cloud",
    "sidebar.articles": "Articles",
    "sidebar.tags": "Tags",
    "sidebar.categories": "Categories",

    # Cover
    "cover.blogCover": "Blog",
    "cover.feedCover": "Feed",
    "cover.archiveCover": "Archive",
    "cover.searchCover": "Search",

    # Blog posts
    "blog.prev": "Previous",
    "blog.next": "Next",
    "blog.readMore": "Read more",
    "blog.publishedOn": "Published on",
    "blog.updatedOn": "Updated on",
    "blog.wordCount": "Words",
    "blog.readingTime": "Reading time",
    "blog.toc": "Table of Contents",

    # Archive and search
    "archive.total": "Total",
    "archive.posts": "posts",
    "search.placeholder": "Search articles",
    "search.noResults": "No matching articles found",

    # Donate
    "donate.title": "Donate",
    "donate.wechat": "WeChat Pay",
    "donate.alipay": "Alipay",
    "donate.paypal": "PayPal",

    # Footer
    "footer.copyright": "Copyright",
    "footer.poweredBy": "Powered by",
    "footer.theme": "Theme",
    "footer.visitors": "Visitors",
    "footer.views": "Views",

    # Misc
    "notFound.title": "Page not found",
    "notFound.backHome": "Back to home",
    "codeBlock.copy": "Copy",
    "codeBlock.copied": "Copied!",
}
