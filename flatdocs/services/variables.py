import re
from typing import Mapping


def process_vars(text: str, variables: Mapping[str, str]) -> str:
    """Replace every ``%name%`` in *text* whose name is a key of *variables*.

    Replacement happens in one pass, so a substituted value is never scanned
    for further placeholders.  Unknown ``%name%`` sequences are left as-is.
    """
    if not variables or "%" not in text:
        return text

    # Longest names first so that overlapping names resolve deterministically
    names = sorted(variables, key=len, reverse=True)
    pattern = re.compile("%(" + "|".join(re.escape(name) for name in names) + ")%")
    return pattern.sub(lambda match: str(variables[match.group(1)]), text)
