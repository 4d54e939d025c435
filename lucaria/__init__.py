"""Asset records and binary formats, asset fetching into futures, and scene, layer, weight and hash helpers for a game client."""

__version__ = "0.1.0"