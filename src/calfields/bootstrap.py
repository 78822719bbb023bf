from __future__ import annotations
from calfields.core.registry import ResolverRegistry
from calfields.resolvers.standard import STANDARD_RESOLVERS

def build_registry() -> ResolverRegistry:
    return ResolverRegistry(dict(STANDARD_RESOLVERS))
