from .tables import comparison_to_frame, report_to_frame

__all__ = ["report_to_frame", "comparison_to_frame"]
