"""Core data types, events and configuration shared by the game modules."""
