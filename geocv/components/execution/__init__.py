from .fold_tasks import cancelled_fold_result, resolve_n_workers, run_fold_tasks

__all__ = ["run_fold_tasks", "resolve_n_workers", "cancelled_fold_result"]
