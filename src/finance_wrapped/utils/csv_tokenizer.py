"""Quote-aware splitting of a single CSV line."""


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line into trimmed fields.

    A double quote toggles the "inside quotes" state and is dropped from the
    output; commas only separate fields outside quotes. Escaped quotes ("")
    are not supported. An unterminated quote simply swallows the rest of the
    line into the final field.

    Args:
        line: A single physical line, without its line terminator

    Returns:
        List of fields; the trailing field is always present, so an empty
        line yields ``[""]``
    """
    fields = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields
