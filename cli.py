"""
cli.py -- Interactive REPL for weth.

Looks up the default location from your IP address once, then reads
commands from stdin until EOF, Ctrl-C, 'quit' or 'exit'.

Usage:  python cli.py
"""

import config
from commands import dispatch, is_exit_command
from resolver import resolve_location
from state import AppState


def main():
    lookup = resolve_location()
    state = AppState.create(lookup.location, military=config.MILITARY_TIME)

    print("Welcome to the weth REPL! Type 'help' to print a list of commands")
    if lookup.available and not lookup.location.is_unknown:
        loc = lookup.location
        print(f"Using location: {loc.city} {loc.region}, {loc.country}")
    else:
        print("Using location: unknown (set one with: setloc <CITY> <REGION> <COUNTRY>)")

    while True:
        try:
            line = input(config.PROMPT)
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if is_exit_command(line):
            print("Bye!")
            break

        output = dispatch(line, state)
        if output is None:
            continue
        print(f"  {output}")


if __name__ == "__main__":
    main()
