"""Command line front end for the file-backed key-value store."""

from __future__ import annotations

import enum
import sys

from workbench.actionkv import ActionKV

USAGE = """
Usage:
\takv_mem FILE get KEY
\takv_mem FILE delete KEY
\takv_mem FILE insert KEY VALUE
\takv_mem FILE update KEY VALUE
"""


class Action(enum.Enum):
    """An operation the command can perform."""

    GET = "get"
    DELETE = "delete"
    INSERT = "insert"
    UPDATE = "update"


def parse_action(text: str) -> Action:
    """Parse an action name, ignoring case."""
    try:
        return Action(text.lower())
    except ValueError:
        raise ValueError("Invalid Action") from None


def _usage_error() -> int:
    print(USAGE, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run one store operation given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        return _usage_error()
    fname, action_name, key_text = args[:3]
    value_text = args[3] if len(args) > 3 else None

    try:
        action = parse_action(action_name)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    if action in (Action.INSERT, Action.UPDATE) and value_text is None:
        return _usage_error()

    key = key_text.encode("utf-8")
    try:
        store = ActionKV(fname)
    except OSError as exc:
        print(f"Unable to open the file: {exc}", file=sys.stderr)
        return 1

    with store:
        store.load()
        if action is Action.GET:
            value = store.get(key)
            if value is None:
                print(f"{list(key)} not found", file=sys.stderr)
            else:
                print(list(value))
        elif action is Action.DELETE:
            store.delete(key)
        elif action is Action.UPDATE:
            store.update(key, value_text.encode("utf-8"))
        else:
            store.insert(key, value_text.encode("utf-8"))
    return 0


if __name__ == "__main__":
    sys.exit(main())