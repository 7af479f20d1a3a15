"""Fixed command table and the static texts the terminal prints."""

WELCOME = 'Welcome to alisaa\'s terminal. Type "help" for commands.'
CLEARED = 'Terminal cleared. Type "help" for commands.'

HELP = """Available commands:
  1. server   - Discord server invite
  2. about    - About me
  3. webinfo  - Website information
  4. discord  - My Discord username
  5. chatbot  - Start AI chatbot
  6. clear    - Clear terminal"""

CHATBOT_ENABLED = """🤖 Chatbot mode enabled!
  Type your message to chat with AI.
  Type "exit" or "quit" to leave chatbot mode."""

CHATBOT_EXITED = '👋 Exited chatbot mode. Type "help" for commands.'

THINKING = "🤖 Thinking..."
FAILED_RESPONSE = "Failed to get response."

# Commands whose only effect is printing a fixed response
STATIC_RESPONSES: dict[str, str] = {
    "help": HELP,
    "server": "🎮 Discord Server: discord.gg/aerox",
    "about": """👤 About Me:
  Name: Alya
  Age: 20
  Profession: Graphic Design / Web Development""",
    "webinfo": """🌐 Website Info:
  Inspiration: cursi.ng
  Created by: Alya""",
    "discord": "💬 Discord: arcticayl",
}

CHATBOT = "chatbot"
CLEAR = "clear"
EXIT_WORDS = frozenset({"exit", "quit"})

COMMANDS = (*STATIC_RESPONSES, CHATBOT, CLEAR)


def normalize(raw: str) -> str:
    return raw.strip().casefold()


def not_found(raw: str) -> str:
    return f'Command not found: "{raw.strip()}". Type "help" for available commands.'


def format_reply(content: str) -> str:
    return f"🤖 {content}"


def format_error(reason: str) -> str:
    return f"❌ Error: {reason}"
