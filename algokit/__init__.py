"""Classic array, string, linked-list, container, number and graph-search algorithms."""

__version__ = "0.1.0"

__all__ = ["arrays", "containers", "dominoes", "linked_list", "numbers", "search", "strings"]