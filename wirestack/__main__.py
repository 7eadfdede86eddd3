import os

from dotenv import load_dotenv

from wirestack.cli.commands import app

# Load .env file from ~/.wirestack/ if it exists
# Precedence: existing env vars > .env file (override=False)
load_dotenv(os.path.expanduser("~/.wirestack/.env"), override=False)

if __name__ == "__main__":
    app()
