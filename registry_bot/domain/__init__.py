"""
Доменный слой Registry Bot.
"""
