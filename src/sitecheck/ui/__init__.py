"""CLI surface for sitecheck."""
