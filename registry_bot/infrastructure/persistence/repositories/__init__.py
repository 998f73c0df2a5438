from .command_repository_impl import CommandRepositoryImpl

__all__ = ["CommandRepositoryImpl"]
