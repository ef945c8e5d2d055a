"""Descriptor matching and clustering engine for face embeddings."""
