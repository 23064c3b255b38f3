"""Czech UI strings."""

STRINGS = {
    # Navigation
    "nav.blog": "Blog",
    "nav.feed": "Novinky",
    "nav.archive": "Archiv",
    "nav.message": "Vzkazy",
    "nav.search": "Hledat",
    "nav.about": "O mně",
    "nav.friends": "Přátelé",
    "nav.more": "Více",

    # Sidebar
    "sidebar.welcome": "Vítejte",
    "sidebar.recentArticle": "Nejnovější články",
    "sidebar.recentComments": "Nejnovější komentáře",
    "sidebar.tagCloud": "Štítky",
    "sidebar.categoryCloud": "Kategorie",
    "sidebar.articles": "Články",
    "sidebar.tags": "Štítky",
    "sidebar.categories": "Kategorie",

    # Cover
    "cover.blogCover": "Blog",
    "cover.feedCover": "Novinky",
    "cover.archiveCover": "Archiv",
    "cover.searchCover": "Hledat",

    # Blog posts
    "blog.prev": "Předchozí",
    "blog.next": "Další",
    "blog.readMore": "Číst dál",
    "blog.publishedOn": "Publikováno",
    "blog.updatedOn": "Aktualizováno",
    "blog.wordCount": "Slov",
    "blog.readingTime": "Doba čtení",
    "blog.toc": "Obsah",

    # Archive and search
    "archive.total": "Celkem",
    "archive.posts": "článků",
    "search.placeholder": "Hledat články",
    "search.noResults": "Nebyly nalezeny žádné články",

    # Donate
    "donate.title": "Podpořit",
    "donate.wechat": "WeChat Pay",
    "donate.alipay": "Alipay",
    "donate.paypal": "PayPal",

    # Footer
    "footer.copyright": "Autorská práva",
    "footer.poweredBy": "Běží na",
    "footer.theme": "Motiv",
    "footer.visitors": "Návštěvníci",
    "footer.views": "Zobrazení",

    # Misc
    "notFound.title": "Stránka nenalezena",
    "notFound.backHome": "Zpět na úvod",
    "codeBlock.copy": "Kopírovat",
    "codeBlock.copied": "Zkopírováno!",
}
