"""
Predicate registry consulted by ``MessageSet.filter``.
"""

from .registry import PredicateRegistry, default_registry, predicates

__all__ = ["PredicateRegistry", "default_registry", "predicates"]
