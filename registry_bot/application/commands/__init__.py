"""
Команды бота: разбор, контекст выполнения и диспетчер.
"""

from .parser import ParsedCommand, parse_command
from .context import DIRECT, DirectDispatch, ReplayedDispatch, DispatchContext
from .dispatcher import CommandDispatcher, DispatchStatus, Reply

__all__ = [
    "ParsedCommand",
    "parse_command",
    "DIRECT",
    "DirectDispatch",
    "ReplayedDispatch",
    "DispatchContext",
    "CommandDispatcher",
    "DispatchStatus",
    "Reply",
]
