"""EDICT2 dictionary parsing backend."""
