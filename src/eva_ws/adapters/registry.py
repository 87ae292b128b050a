"""Species keyed registry of storage adaptors."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

from eva_ws.utils.errors import SpeciesError

from .base import StorageAdaptor
from .memory import InMemoryStorageAdaptor

AdaptorFactory = Callable[[str], StorageAdaptor]


class AdaptorFactoryRegistry:
    """Named factories used to build adaptors from configuration."""

    def __init__(self) -> None:
        self._registry: dict[str, AdaptorFactory] = {}

    def register(self, name: str, factory: AdaptorFactory) -> None:
        if name in self._registry:
            raise ValueError(f"Adaptor factory '{name}' already registered")
        self._registry[name] = factory

    def create(self, name: str, species: str) -> StorageAdaptor:
        try:
            factory = self._registry[name]
        except KeyError as exc:
            raise KeyError(f"Adaptor factory '{name}' is not registered") from exc
        return factory(species)

    def registered(self) -> Iterable[str]:
        return sorted(self._registry.keys())


factories = AdaptorFactoryRegistry()
factories.register("memory", lambda species: InMemoryStorageAdaptor(name=f"memory:{species}"))


class AdaptorRegistry:
    """Resolves the adaptor serving a species or assembly context."""

    def __init__(self, adaptors: Mapping[str, StorageAdaptor] | None = None) -> None:
        self._adaptors: dict[str, StorageAdaptor] = dict(adaptors or {})

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, str],
        *,
        factory_registry: AdaptorFactoryRegistry = factories,
    ) -> AdaptorRegistry:
        return cls(
            {species: factory_registry.create(name, species) for species, name in config.items()}
        )

    def register(self, species: str, adaptor: StorageAdaptor) -> None:
        self._adaptors[species] = adaptor

    def get(self, species: str) -> StorageAdaptor:
        try:
            return self._adaptors[species]
        except KeyError as exc:
            raise SpeciesError(f"Species not valid: '{species}'") from exc

    def species(self) -> list[str]:
        return sorted(self._adaptors)

    def __iter__(self):
        return iter(self._adaptors.items())


__all__ = ["AdaptorFactory", "AdaptorFactoryRegistry", "AdaptorRegistry", "factories"]
