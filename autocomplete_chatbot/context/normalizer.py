# autocomplete_chatbot/context/normalizer.py


def normalize_text(s: str) -> str:
    """
    Trim the input and collapse runs of whitespace to single spaces.
    Case is left alone: the prefix store lowercases on its own, and the
    transcript echoes what the user typed.
    """
    if not s:
        return ""
    return " ".join(s.split())
