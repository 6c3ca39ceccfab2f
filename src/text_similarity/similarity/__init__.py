from .service import compute_similarity, run_comparison

__all__ = ["compute_similarity", "run_comparison"]
