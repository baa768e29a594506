"""Localization strings: source texts and their translations."""
