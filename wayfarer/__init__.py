"""Rules and state for a tabletop role-playing character sheet: inventory, wealth, vitals, levels, journals and interface state."""

__version__ = "0.1.0"