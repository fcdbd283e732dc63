"""
json_extract.py — pull the JSON payload out of free-form model output.

Best-effort text scanning, not a parser: braces inside string literals are
counted like any other brace, so a question containing an unbalanced "{"
or "}" can truncate or over-extend the extracted span.
"""

_FENCE_OPEN = "```json"
_FENCE_CLOSE = "```"


def extract_json(text: str) -> str:
    """
    Return the substring most likely to be the JSON document, or "".

    Priority:
        1. interior of a ```json fenced block, stripped
        2. first "{" through its matching "}" (depth counter)
    Examples:
        'noise{"a":{"b":1}}more'  → '{"a":{"b":1}}'
        'no braces here'          → ''
    """
    start = text.find(_FENCE_OPEN)
    if start != -1:
        start += len(_FENCE_OPEN)
        end = text.find(_FENCE_CLOSE, start)
        if end != -1:
            return text[start:end].strip()

    start = text.find("{")
    if start != -1:
        depth = 0
        for i in range(start, len(text)):
            ch = text[i]
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return text[start:i + 1]

    return ""
