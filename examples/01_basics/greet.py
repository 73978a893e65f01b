#!/usr/bin/env python3
"""
Two-command CLI showing options, arguments and the built-in help command.

Usage:
    python greet.py
    python greet.py help hello
    python greet.py hello -s --greeting Hi World
    python greet.py repeat 3 echo
"""

import pathlib
import sys

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[2])
sys.path.append(project_root) if project_root not in sys.path else None

from cmdinfra import Cli, Command, load_config


class HelloCommand(Command):
    name = "hello"
    summary = "Greet someone"

    def configure(self) -> None:
        self.add_option("shout", "s", "bool", False, "Print in upper case")
        self.add_option("greeting", "g", "required", "Hello", "Greeting word")
        self.add_argument("who", False, "Who to greet")

    def execute(self) -> int:
        text = f"{self.option('greeting')}, {self.argument('who') or 'world'}!"
        self.out.write(text.upper() if self.option("shout") else text)
        return 0


class RepeatCommand(Command):
    name = "repeat"
    summary = "Print a word several times"

    def configure(self) -> None:
        self.add_option("sep", "p", "optional", " ", "Separator")
        self.add_argument("count", True, "How many times")
        self.add_argument("word", True, "Word to print")

    def execute(self) -> int:
        count = int(self.argument("count"))
        self.out.write(str(self.option("sep")).join([self.argument("word")] * count))
        return 0


def main():
    """Main function."""
    cli = Cli(config=load_config()).add("hello", HelloCommand)
    return cli.add("repeat", RepeatCommand).main()


if __name__ == "__main__":
    sys.exit(main())
