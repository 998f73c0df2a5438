from .command_repository import CommandRepository

__all__ = ["CommandRepository"]
