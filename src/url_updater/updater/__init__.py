"""Updater contracts, deadline handling, and the update manager."""
