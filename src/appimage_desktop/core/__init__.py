"""Core desktop-integration logic: install and removal lifecycles."""
