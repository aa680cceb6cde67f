"""Menus of items shown through a single-selection picker, and walks through trees of them."""
