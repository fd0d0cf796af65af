import os

_FALSY = ("", "0", "false", "no", "off")


def get_config():

    return {
        # validate the whole tree after every insert/delete and raise on the
        # first broken invariant. O(n) per mutation, only meant for debugging
        "debug": os.environ.get("REDBLACK_DEBUG", "").strip().lower() not in _FALSY,
    }
