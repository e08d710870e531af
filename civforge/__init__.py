"""civforge: faction unit factories, stackable upgrades and swappable combat strategies."""

__version__ = "1.0.0"
