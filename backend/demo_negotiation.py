"""
Demo script to haggle with the scripted counterpart in the terminal.

WHAT: Scripted or interactive walk-through of one negotiation
WHY: Visual check of counterpart replies in every supported language
HOW: Drive AIBargainBot directly and print each turn

Usage:
    python demo_negotiation.py                     # scripted tomato haggle in English
    python demo_negotiation.py --lang hi --interactive
"""

import argparse
import sys
from pathlib import Path

# Add backend to path if running directly
sys.path.insert(0, str(Path(__file__).parent))

from mandi.agents.bargain_bot import AIBargainBot
from mandi.agents.phrases import Language
from mandi.utils.logger import setup_logging, get_logger

setup_logging()
logger = get_logger(__name__)

SCRIPTED_TURNS = [
    ("How is the quality?", None),
    ("I want 95", 95),
    ("Okay, 86", 86),
    ("88 then", 88),
    ("Final: 92", 92),
]


def print_banner(text: str, char: str = "="):
    """Print a formatted banner."""
    width = 80
    print(f"\n{char * width}\n{text.center(width)}\n{char * width}\n")


def print_message(msg):
    """Pretty print one negotiation message."""
    who = "AI  " if msg.sender == "ai" else "YOU "
    price = f" [{msg.price:g}]" if msg.price is not None else ""
    print(f"{who}({msg.type}){price}: {msg.message}")


def parse_turn(line: str):
    """Split user input into text and an optional trailing price."""
    parts = line.strip().rsplit(" ", 1)
    try:
        return line, float(parts[-1])
    except ValueError:
        return line, None


def run(commodity: str, market_price: float, language: str, interactive: bool):
    bot = AIBargainBot(language=language)
    session = bot.start_negotiation(commodity, market_price)

    print_banner(f"{commodity.upper()} @ {market_price:g} ({bot.language.value})")
    print_message(session.messages[0])

    if interactive:
        turns = iter(lambda: input("> "), "")
    else:
        turns = iter(SCRIPTED_TURNS)

    for turn in turns:
        text, price = parse_turn(turn) if interactive else turn
        if not interactive:
            print(f"YOU : {text}")
        reply = bot.process_user_message(session.id, text, price)
        print_message(reply)
        if not session.is_active:
            break

    print_banner("SHARE MESSAGE", "-")
    print(bot.generate_whatsapp_message(session))
    logger.info(f"Demo finished: {session.status} after {len(session.messages)} messages")


def main():
    parser = argparse.ArgumentParser(description="Haggle with the mandi counterpart")
    parser.add_argument("--commodity", default="tomato")
    parser.add_argument("--price", type=float, default=100.0, help="Market price")
    parser.add_argument("--lang", default=Language.EN.value, choices=[lang.value for lang in Language])
    parser.add_argument("--interactive", action="store_true", help="Type turns as '<text> <price>'")
    args = parser.parse_args()

    try:
        run(args.commodity, args.price, args.lang, args.interactive)
    except (KeyboardInterrupt, EOFError):
        print("\nDemo interrupted")


if __name__ == "__main__":
    main()
