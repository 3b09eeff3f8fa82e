"""HTML parsing helpers used by the crawler and the URL manifest."""
