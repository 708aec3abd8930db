"""Domain model for location-based quests: coordinates, quests, locations and domain events."""

__version__ = "0.1.0"
__all__ = ["ddd", "kernel", "location", "quest"]