"""Shorts scraper — pulls short-form video entries out of YouTube's ytInitialData."""
