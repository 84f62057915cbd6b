from .walk import walk, walk_document

__all__ = ["walk", "walk_document"]
