"""Concierge Analytics: occupancy and revenue reporting service."""
