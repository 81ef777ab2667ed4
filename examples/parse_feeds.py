"""Basic feed parsing example.

Demonstrates how to use FeedParser on documents of every dialect and
how to fetch a feed over HTTP, optionally through a proxy.
"""

import sys

from unifeed import FeedError, FeedParser

SITEMAP = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"
        xmlns:news="http://www.google.com/schemas/sitemap-news/0.9">
  <url>
    <loc>https://example.com/business/article55.html</loc>
    <news:news>
      <news:publication>
        <news:name>The Example Times</news:name>
        <news:language>en</news:language>
      </news:publication>
      <news:publication_date>2024-01-02T00:00:00Z</news:publication_date>
      <news:title>Companies A, B in Merger Talks</news:title>
    </news:news>
  </url>
</urlset>
"""

RSS = """<rss version="2.0">
  <channel>
    <title>Example News</title>
    <item>
      <title>First post</title>
      <link>https://example.com/first</link>
      <pubDate>Tue, 02 Jan 2024 10:00:00 +0200</pubDate>
    </item>
  </channel>
</rss>
"""


def show(feed) -> None:
    print(f"{feed.feed_type.value} {feed.version}: {feed.title} ({feed.language})")
    for item in feed.items:
        print(f"  - {item.title or '(untitled)'}")
        print(f"    {item.link}")
        if item.pub_date_parsed:
            print(f"    published {item.pub_date_parsed.isoformat()}")
    print()


def main() -> None:
    parser = FeedParser()

    print("Unifeed Parsing Example")
    print("=" * 50)

    show(parser.parse_string(SITEMAP))
    show(parser.parse_string(RSS))

    # Pass a URL to fetch a live feed, and optionally a proxy as host:port
    if len(sys.argv) > 1:
        url = sys.argv[1]
        try:
            if len(sys.argv) > 2:
                feed = parser.parse_url_with_proxy(url, sys.argv[2])
            else:
                feed = parser.parse_url(url)
            show(feed)
        except FeedError as e:
            print(f"Failed to parse {url}: {e}")


if __name__ == "__main__":
    main()
