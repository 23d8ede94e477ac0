from .cayley import CayleyTable

__all__ = ["CayleyTable"]
