"""
Прикладной слой: диспетчер команд и цикл обработки обновлений.
"""
