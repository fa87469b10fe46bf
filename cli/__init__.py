"""Command-line interface for the shorts scraper."""
