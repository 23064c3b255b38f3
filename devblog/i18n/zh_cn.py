"""Simplified Chinese (zh-cn) UI strings."""

STRINGS = {
    # Navigation
    "nav.blog": "博客",
    "nav.feed": "动态",
    "nav.archive": "归档",
    "nav.message": "留言",
    "nav.search": "搜索",
    "nav.about": "关于",
    "nav.friends": "友链",
    "nav.more": "更多",

    # Sidebar
    "sidebar.welcome": "欢迎",
    "sidebar.recentArticle": "最近文章",
    "sidebar.recentComments": "最近评论",
    "sidebar.tagCloud": "标签云",
    "sidebar.categoryCloud": "分类云",
    "sidebar.articles": "文章",
    "sidebar.tags": "标签",
    "sidebar.categories": "分类",

    # Cover
    "cover.blogCover": "博客",
    "cover.feedCover": "动态",
    "cover.archiveCover": "归档",
    "cover.searchCover": "搜索",

    # Blog posts
    "blog.prev": "上一篇",
    "blog.next": "下一篇",
    "blog.readMore": "阅读全文",
    "blog.publishedOn": "发表于",
    "blog.updatedOn": "更新于",
    "blog.wordCount": "字数",
    "blog.readingTime": "阅读时长",
    "blog.toc": "目录",

    # Archive and search
    "archive.total": "共",
    "archive.posts": "篇文章",
    "search.placeholder": "搜索文章",
    "search.noResults": "没有找到相关文章",

    # Donate
    "donate.title": "赞赏",
    "donate.wechat": "微信支付",
    "donate.alipay": "支付宝",
    "donate.paypal": "PayPal",

    # Footer
    "footer.copyright": "版权所有",
    "footer.poweredBy": "技术支持",
    "footer.theme": "主题",
    "footer.visitors": "访客数",
    "footer.views": "访问量",

    # Misc
    "notFound.title": "页面不存在",
    "notFound.backHome": "返回首页",
    "codeBlock.copy": "复制",
    "codeBlock.copied": "已复制!",
}
