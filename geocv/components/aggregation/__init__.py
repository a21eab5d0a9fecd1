from .aggregator import aggregate_fold_results

__all__ = ["aggregate_fold_results"]
