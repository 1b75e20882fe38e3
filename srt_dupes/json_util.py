import orjson  # type: ignore

from .models import DuplicateResult


def dumps(o) -> str:
    if isinstance(o, DuplicateResult):
        o = o.to_dict()
    return orjson.dumps(o, option=orjson.OPT_NON_STR_KEYS).decode()
