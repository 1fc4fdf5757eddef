"""Environment references in harness config files.

String values may embed ``${NAME}`` or ``${NAME:-fallback}``. Substitution is
textual, so ``api_base: "http://${LLM_HOST:-localhost}:4000"`` works.
"""

import os
import re
from collections.abc import Iterator, Mapping

_REFERENCE = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<fallback>[^}]*))?\}"
)

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


class EnvInterpolator:
    """Resolves environment references in the string leaves of a parsed YAML tree.

    Only bare ``${NAME}`` references can be missing; a reference with a fallback
    always resolves.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def unresolved(self, data: RawValue) -> dict[str, list[str]]:
        """Map every unset variable to the dotted config paths that reference it.

        Variables appear in first-reference order.
        """
        found: dict[str, list[str]] = {}
        for path, text in _string_leaves(data, path=""):
            for ref in _REFERENCE.finditer(text):
                name = ref.group("name")
                if ref.group("fallback") is None and name not in self._environ:
                    found.setdefault(name, []).append(path)
        return found

    def resolve(self, data: RawValue) -> RawValue:
        """Return a copy of *data* with every reference substituted.

        Raises:
            KeyError: for a bare reference to an unset variable. Check
                ``unresolved`` first.
        """
        if isinstance(data, str):
            return _REFERENCE.sub(self._substitute, data)
        if isinstance(data, list):
            return [self.resolve(item) for item in data]
        if isinstance(data, dict):
            return {key: self.resolve(value) for key, value in data.items()}
        return data

    def _substitute(self, ref: re.Match[str]) -> str:
        name = ref.group("name")
        if name in self._environ:
            return self._environ[name]
        fallback = ref.group("fallback")
        if fallback is None:
            raise KeyError(name)
        return fallback


def _string_leaves(data: RawValue, path: str) -> Iterator[tuple[str, str]]:
    if isinstance(data, str):
        yield path, data
    elif isinstance(data, list):
        for index, item in enumerate(data):
            yield from _string_leaves(item, path=f"{path}[{index}]")
    elif isinstance(data, dict):
        for key, value in data.items():
            yield from _string_leaves(value, path=f"{path}.{key}" if path else str(key))
