from __future__ import annotations

from typing import Dict, Optional

from pyfwjs.language.fwjs_types import UNDEFINED, FwjsValue
from pyfwjs.utilities.error import FwjsDuplicateDeclaration


class Environment:
    """One scope of the lexical scope chain.

    The global environment has no `enclosing` scope. A scope's `enclosing` link is fixed
    at construction, so the chain can never become cyclic. Closures keep a plain
    reference to the scope they were declared in, and every closure sharing a scope sees
    the others' writes to it."""

    def __init__(self, enclosing: Optional[Environment] = None) -> None:
        self._values: Dict[str, FwjsValue] = dict()
        self._enclosing = enclosing

    @property
    def enclosing(self) -> Optional[Environment]:
        return self._enclosing

    @property
    def is_global(self) -> bool:
        return self._enclosing is None

    def global_scope(self) -> Environment:
        env = self
        while env._enclosing is not None:
            env = env._enclosing
        return env

    def __contains__(self, name: str) -> bool:
        """Whether `name` is bound in this exact scope."""
        return name in self._values

    def resolve(self, name: str) -> FwjsValue:
        """Look `name` up from this scope outward. Unbound names give `UNDEFINED`."""
        env: Optional[Environment] = self
        while env is not None:
            try:
                return env._values[name]
            except KeyError:
                env = env._enclosing
        return UNDEFINED

    def update(self, name: str, value: FwjsValue) -> None:
        """Overwrite the nearest binding of `name`.

        If no scope in the chain binds `name`, the binding is created in the global
        scope, not in this one."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env._values:
                env._values[name] = value
                return
            env = env._enclosing
        self.global_scope()._values[name] = value

    def declare(self, name: str, value: FwjsValue) -> None:
        if name in self._values:
            raise FwjsDuplicateDeclaration(f"Variable '{name}' is already declared in this scope.")
        self._values[name] = value

    def __repr__(self) -> str:
        scope = "global" if self.is_global else "local"
        return f"<{scope} environment [{', '.join(self._values)}]>"
