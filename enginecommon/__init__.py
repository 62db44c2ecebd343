"""Game engine pieces: entities, models, mesh and Oolite loaders, file, text and log helpers."""

__version__ = "0.1.0"

__all__ = ["entity", "fileutil", "log", "mesh", "models", "oolite", "textutil"]