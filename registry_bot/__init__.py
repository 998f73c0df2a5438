"""
Registry Bot - Telegram-бот для поиска данных о компаниях по ИНН.
"""
