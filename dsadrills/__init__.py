"""Data-structure and algorithm drills: arrays, sorting, strings, queues, linked lists and trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "sorting", "strings", "queues", "linkedlists", "trees"]