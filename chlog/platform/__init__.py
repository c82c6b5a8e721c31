"""Filesystem access used when persisting changelogs."""
