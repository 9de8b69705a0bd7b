"""Messaging domain - stored chat messages."""
