# main.py - launches the autocomplete chatbot (console by default, --tui for the textual UI)

import sys

from autocomplete_chatbot.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
