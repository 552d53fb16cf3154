from .output_repository import FileOutputRepository

__all__ = ["FileOutputRepository"]
