"""Classic algorithms over lists, strings, integers and singly linked lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "counting", "linked_list", "numbers", "search", "strings"]