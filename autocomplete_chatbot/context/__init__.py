# autocomplete_chatbot/context/__init__.py
# input cleanup shared by the chat session and front ends

from .normalizer import normalize_text

__all__ = ["normalize_text"]
