"""Classic algorithms: graphs, searching, sorting, trees, backtracking and dynamic programming."""

__version__ = "0.1.0"
__all__ = ["backtracking", "dynamic", "graphs", "misc", "searching", "sorting", "trees", "weighted"]