"""Medical quiz sessions backed by an LLM, with a Telegram bot front end."""
