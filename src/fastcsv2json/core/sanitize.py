"""Character-level sanitization applied to each line before tokenizing."""

from typing import Dict, Iterable


class Sanitizer:
    """Replace characters with a space, then erase characters.

    Both translation tables are built once per run. Note that sanitizing the
    delimiter itself changes how the line splits; guarding against that is
    left to the caller.
    """

    def __init__(self, replace: Iterable[str] = (), erase: Iterable[str] = ()):
        self.replace_table: Dict[int, str] = {ord(c): " " for c in replace}
        self.erase_table: Dict[int, None] = {ord(c): None for c in erase}

    @property
    def active(self) -> bool:
        return bool(self.replace_table or self.erase_table)

    def apply(self, line: str) -> str:
        if self.replace_table:
            line = line.translate(self.replace_table)
        if self.erase_table:
            line = line.translate(self.erase_table)
        return line
