from typing import Dict, Optional
from viet.errors import VietRuntimeError
from viet.values import Value


class Environment:
    """Represents a scope mapping variable names to values, optionally chained to a parent."""
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Value] = {}

    def get(self, name: str) -> Value:
        if name in self.values:
            return self.values[name]
        if self.parent:
            return self.parent.get(name)
        raise VietRuntimeError(f'undefined variable {name}')

    def set(self, name: str, value: Value):
        # Update the nearest scope that defines the name
        if name in self.values:
            self.values[name] = value
        elif self.parent:
            self.parent.set(name, value)
        else:
            raise VietRuntimeError(f'undefined variable {name}')

    def define(self, name: str, value: Value):
        self.values[name] = value

    def contains(self, name: str) -> bool:
        if name in self.values:
            return True
        return self.parent is not None and self.parent.contains(name)

    def snapshot(self) -> Dict[str, Value]:
        return dict(self.values)
