import re

_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_code_fences(raw: str) -> str:
    """Drop markdown ``` / ```json fences the model sometimes adds anyway."""
    return _FENCE.sub("", raw).strip()
