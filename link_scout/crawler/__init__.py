"""link_scout.crawler: link discovery and concurrent status verification."""
