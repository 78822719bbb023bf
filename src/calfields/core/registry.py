from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from ..resolvers.interfaces import DateResolver


@dataclass
class ResolverRegistry:
    _resolvers: Dict[str, DateResolver]

    def get(self, name: str) -> DateResolver:
        if name not in self._resolvers:
            raise KeyError(f"Unknown resolver '{name}'. Available: {sorted(self._resolvers)}")
        return self._resolvers[name]

    def list(self) -> List[str]:
        return sorted(self._resolvers.keys())

    def register(self, name: str, resolver: DateResolver, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._resolvers):
            raise KeyError(f"Resolver '{name}' already exists. Use overwrite=True to replace.")
        if not isinstance(resolver, DateResolver):
            raise TypeError(f"Resolver '{name}' does not implement resolve(year, month, day)")
        self._resolvers[name] = resolver
