"""Armory Service - GW2 character profiles, privacy and sampling."""
