"""Inkwell: collaborative document management API."""
