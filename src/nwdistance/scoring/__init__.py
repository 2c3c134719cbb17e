from .metrics import normalized_distance, similarity, summarise

__all__ = [
    "normalized_distance",
    "similarity",
    "summarise",
]
