"""
Инфраструктурный слой: БД, Telegram Bot API, API реестра.
"""
