# Standard library imports
from typing import Any, Callable, Dict


class BaseContainer:
    """
    Minimal dependency injection container.
    
    Keys are either classes (domain interfaces, use cases) or strings for
    infrastructure handles such as "mongo_client". Singletons are returned
    as registered; factories build a fresh instance on every get().
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Any, Any] = {}
        self._factories: Dict[Any, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Any, instance: Any) -> None:
        """Register a shared instance under key"""
        self._factories.pop(key, None)
        self._singletons[key] = instance
    
    def register_factory(self, key: Any, factory: Callable[[], Any]) -> None:
        """Register a zero-argument callable that builds an instance per request"""
        self._singletons.pop(key, None)
        self._factories[key] = factory
    
    def has(self, key: Any) -> bool:
        return key in self._singletons or key in self._factories
    
    def get(self, key: Any) -> Any:
        """
        Resolve a registration
        
        Raises:
            ValueError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = key.__name__ if isinstance(key, type) else repr(key)
        raise ValueError(f"No registration found for {name}")
