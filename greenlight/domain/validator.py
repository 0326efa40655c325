from typing import Dict, Sequence


class Validator:
    """Collects field-level error messages across a whole validation pass.

    Only the first failing rule is kept for each key, so callers should order
    their checks from the most basic to the most specific.
    """

    def __init__(self):
        self.errors: Dict[str, str] = {}

    def valid(self) -> bool:
        return not self.errors

    def add_error(self, key: str, message: str) -> None:
        if key not in self.errors:
            self.errors[key] = message

    def check(self, ok: bool, key: str, message: str) -> None:
        if not ok:
            self.add_error(key, message)


def unique_strings(values: Sequence[str]) -> bool:
    return len(set(values)) == len(values)


def no_empty_strings(values: Sequence[str]) -> bool:
    return all(value != "" for value in values)
