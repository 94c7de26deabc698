"""Core scraping components: fetching, selection, extraction and pagination."""
