"""Text helpers shared by the templates."""


def escape_string(value: str) -> str:
    """Escape ``value`` for a double-quoted JSON or Elixir string literal.

    Backslashes are doubled first, then double quotes are escaped. No other
    character is touched.
    """
    return value.replace("\\", "\\\\").replace('"', '\\"')
