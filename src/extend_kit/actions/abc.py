"""Action kinds and the executor interface they dispatch to."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import StrEnum
from typing import Any


class ActionKind(StrEnum):
    CHECK = "check"
    DEPENDS = "depends"
    AUTOLOAD = "autoload"
    INSTALL = "install"
    PROHIBITS = "prohibits"
    REMOVE = "remove"
    REQUIRE = "require"
    SEARCH = "search"
    SHOW = "show"
    UPDATE = "update"


# `show` target listing the installed packages
INSTALLED_TARGET = "installed"


class Executor(ABC):
    """Performs one concrete package operation.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def execute(self, *args: Any) -> Any:
        """Run the operation.

        Argument shapes depend on the action; failures are raised to the caller.
        """
        ...


ActionRegistry = Mapping[ActionKind, Executor]
