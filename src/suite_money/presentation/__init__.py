"""Locale-aware rendering of Money as text.

Formatting is stateless: every call works on local state only, and locales are
always passed explicitly.
"""
