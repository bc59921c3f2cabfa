"""Constructor assembler: merges arguments and statements from every feature."""

from __future__ import annotations

from .errors import ArgumentNameCollision
from .models import OWN, ConstructorArgument, FunctionArgument


class ConstructorAssembler:
    """Collects constructor arguments (tagged with their owner) and body code."""

    def __init__(self) -> None:
        self._args: dict[str, ConstructorArgument] = {}
        self._code: list[str] = []

    def add_argument(self, arg: FunctionArgument, owner: str = OWN) -> bool:
        """Add *arg* on behalf of *owner*.

        Returns:
            ``True`` if added, ``False`` if the identical argument was already
            contributed by the same owner.

        Raises:
            ArgumentNameCollision: If the name is taken by another owner, or
                by the same owner with a different type.
        """
        existing = self._args.get(arg.name)
        if existing is not None:
            if existing.owner != owner or existing.type != arg.type:
                raise ArgumentNameCollision(arg.name, existing.owner, owner)
            return False
        self._args[arg.name] = ConstructorArgument(name=arg.name, type=arg.type, owner=owner)
        return True

    def add_code(self, statement: str) -> None:
        """Append *statement*; order is feature-application order."""
        self._code.append(statement)

    @property
    def code(self) -> list[str]:
        return list(self._code)

    def arguments(self, parent_order: list[str]) -> list[ConstructorArgument]:
        """All arguments: parent-owned ones in *parent_order*, then own ones.

        Arguments owned by an identifier that is not (or no longer) a parent
        are treated as own arguments.
        """
        rank = {identifier: i for i, identifier in enumerate(parent_order)}
        own_rank = len(parent_order)
        indexed = list(enumerate(self._args.values()))
        indexed.sort(key=lambda item: (rank.get(item[1].owner, own_rank), item[0]))
        return [arg for _, arg in indexed]

    def is_empty(self) -> bool:
        return not self._args and not self._code

    def __contains__(self, name: object) -> bool:
        return name in self._args
