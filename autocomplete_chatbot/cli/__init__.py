# autocomplete_chatbot/cli/__init__.py
# console front end

from .cli import CLI, main

__all__ = ["CLI", "main"]
