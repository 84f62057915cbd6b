from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import logger


@dataclass
class EquationRegistry:
    """Identifier table for one document run.

    Attributes:
        ids: Declared identifiers in document order. Duplicates are kept, so every declaration
            consumes its own sequence number.
        numbers: Lookup from identifier to sequence number. A repeated identifier points at its
            latest declaration.
    """

    ids: List[str] = field(default_factory=list)
    numbers: Dict[str, int] = field(default_factory=dict)

    def register(self, identifier: str) -> int:
        """Append a declaration and return its 1-based sequence number."""
        self.ids.append(identifier)
        number = len(self.ids)
        if identifier in self.numbers:
            logger.warning(
                f'Equation label "{identifier}" is declared more than once; '
                f"references now resolve to ({number}) instead of ({self.numbers[identifier]})"
            )
        self.numbers[identifier] = number
        return number

    def lookup(self, identifier: str) -> Optional[int]:
        return self.numbers.get(identifier)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self.numbers

    def __len__(self) -> int:
        return len(self.ids)
