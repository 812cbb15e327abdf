class SitemapError(Exception):
    pass


class InvalidArgument(SitemapError, ValueError):
    pass
