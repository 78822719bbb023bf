from __future__ import annotations

from datetime import date
from typing import List, Optional, Union

from .core.errors import require_not_none
from .core.registry import ResolverRegistry
from .month_day import MonthDay
from .resolvers.interfaces import DateResolver

_registry: Optional[ResolverRegistry] = None

def set_registry(reg: ResolverRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ResolverRegistry:
    if _registry is None:
        raise RuntimeError("Resolver registry not initialized")
    return _registry

def _lookup(resolver: Union[str, DateResolver]) -> DateResolver:
    require_not_none(resolver, "resolver")
    if isinstance(resolver, str):
        return _reg().get(resolver)
    return resolver

def list_resolvers() -> List[str]:
    return _reg().list()

def get_resolver(name: str) -> DateResolver:
    return _reg().get(name)

def register_resolver(name: str, resolver: DateResolver, *, overwrite: bool = False) -> None:
    _reg().register(name, resolver, overwrite=overwrite)

def resolve_date(year: int, month: int, day: int, *, resolver: Union[str, DateResolver] = "strict") -> date:
    """Resolve a possibly invalid triple with a resolver given by name or instance."""
    return _lookup(resolver).resolve(year, month, day)

def month_day_at_year(text: str, year: int, *, resolver: Union[str, DateResolver] = "strict") -> date:
    """Parse ``--MM-DD`` text and combine it with ``year``."""
    return MonthDay.parse(text).at_year(year, _lookup(resolver))
