"""Locate the Flutter SDK pod helper and delegate to it."""
