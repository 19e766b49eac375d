"""Global adapter registry and the per-group namespaces built on it.

Adapter packages decorate their classes with ``registry.register`` when they
are imported. Classes are instantiated on first lookup and cached, so every
name, variant and alias that points at the same class yields the same object.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from .config import alias_env_var, env_override

log = logging.getLogger(__name__)


class VariantFamily:
    """Named variants of one algorithm with a designated default.

    Attribute lookups that are not variant names fall through to the default
    variant, so ``family.sign(...)`` behaves like ``family.fast.sign(...)``.
    """

    def __init__(self, name: str, variants: Mapping[str, Any], default: str) -> None:
        if default not in variants:
            raise KeyError(f"default variant {default!r} not registered for {name}")
        self.__dict__["name"] = name
        self.__dict__["_variants"] = dict(variants)
        self.__dict__["_default"] = default

    @property
    def variants(self) -> Tuple[str, ...]:
        return tuple(self._variants)

    @property
    def default(self) -> Any:
        return self._variants[self._default]

    @property
    def default_variant(self) -> str:
        return self._default

    def __getitem__(self, variant: str) -> Any:
        try:
            return self._variants[variant]
        except KeyError:
            raise KeyError(f"Unknown variant {variant!r} for {self.name}") from None

    def __getattr__(self, attr: str) -> Any:
        variants = self.__dict__.get("_variants")
        if variants is None:
            raise AttributeError(attr)
        if attr in variants:
            return variants[attr]
        return getattr(variants[self.__dict__["_default"]], attr)

    def __setattr__(self, attr: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __iter__(self) -> Iterator[str]:
        return iter(self._variants)

    def __repr__(self) -> str:
        return f"<VariantFamily {self.name} variants={list(self._variants)} default={self._default}>"


class Namespace(Mapping[str, Any]):
    """Read-only view of one registry group (names plus aliases)."""

    def __init__(self, registry: "_Registry", group: str) -> None:
        self.__dict__["_registry"] = registry
        self.__dict__["_group"] = group

    @property
    def group(self) -> str:
        return self._group

    def __getitem__(self, name: str) -> Any:
        return self._registry.get(self._group, name)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError as exc:
            raise AttributeError(str(exc)) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Namespace is read-only")

    def __iter__(self) -> Iterator[str]:
        return iter(self._registry.names(self._group, include_aliases=True))

    def __len__(self) -> int:
        return len(self._registry.names(self._group, include_aliases=True))

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self))

    def __repr__(self) -> str:
        return f"<Namespace {self._group}: {', '.join(self)}>"


class _Alias:
    __slots__ = ("target", "env_var")

    def __init__(self, target: str, env_var: str) -> None:
        self.target = target
        self.env_var = env_var

    def resolve_target(self) -> str:
        return env_override(self.env_var) or self.target


class _Registry:
    def __init__(self) -> None:
        # group -> name -> variant (None for single adapters) -> class or instance
        self._items: Dict[str, Dict[str, Dict[Optional[str], Any]]] = {}
        self._defaults: Dict[Tuple[str, str], str] = {}
        self._aliases: Dict[str, Dict[str, _Alias]] = {}
        self._instances: Dict[int, Any] = {}
        self._families: Dict[Tuple[str, str], VariantFamily] = {}

    def register(
        self,
        group: str,
        name: str,
        *,
        variant: Optional[str] = None,
        default: bool = False,
        aliases: Tuple[str, ...] = (),
    ) -> Callable[[Any], Any]:
        def _inner(cls_or_obj: Any) -> Any:
            entry = self._items.setdefault(group, {}).setdefault(name, {})
            if entry and (variant is None) != (None in entry):
                raise ValueError(f"{group}.{name} mixes plain and variant registrations")
            entry[variant] = cls_or_obj
            if variant is not None and (default or (group, name) not in self._defaults):
                self._defaults[(group, name)] = variant
            for alias in aliases:
                self.alias(group, alias, name)
            self._families.pop((group, name), None)
            log.debug("registered %s.%s%s", group, name, f".{variant}" if variant else "")
            return cls_or_obj
        return _inner

    def alias(self, group: str, alias: str, target: str, env_var: Optional[str] = None) -> None:
        self._aliases.setdefault(group, {})[alias] = _Alias(target, env_var or alias_env_var(group, alias))

    def groups(self) -> List[str]:
        return list(self._items)

    def names(self, group: str, include_aliases: bool = False) -> List[str]:
        names = list(self._items.get(group, {}))
        if include_aliases:
            names.extend(a for a in self._aliases.get(group, {}) if a not in names)
        return names

    def aliases(self, group: str) -> Dict[str, str]:
        return {alias: entry.resolve_target() for alias, entry in self._aliases.get(group, {}).items()}

    def variants(self, group: str, name: str) -> List[str]:
        return [v for v in self._items.get(group, {}).get(name, {}) if v is not None]

    def get(self, group: str, name: str) -> Any:
        """Resolve ``name`` (plain, dotted ``family.variant`` or alias) in ``group``."""
        alias = self._aliases.get(group, {}).get(name)
        if alias is not None and name not in self._items.get(group, {}):
            target = alias.resolve_target()
            try:
                return self.get(group, target)
            except KeyError:
                raise KeyError(f"alias {group}.{name} points at unknown algorithm {target!r}") from None
        base, _, variant = name.partition(".")
        entry = self._items.get(group, {}).get(base)
        if entry is None:
            raise KeyError(f"Unknown {group} algorithm: {name}")
        if variant:
            if variant not in entry:
                raise KeyError(f"Unknown variant {variant!r} for {group}.{base}")
            return self._instance(entry[variant])
        if None in entry:
            return self._instance(entry[None])
        return self._family(group, base)

    def namespace(self, group: str) -> Namespace:
        return Namespace(self, group)

    def list(self) -> Dict[str, List[str]]:
        return {group: self.names(group, include_aliases=True) for group in self._items}

    def _instance(self, cls_or_obj: Any) -> Any:
        if not isinstance(cls_or_obj, type):
            return cls_or_obj
        key = id(cls_or_obj)
        inst = self._instances.get(key)
        if inst is None:
            inst = cls_or_obj()
            self._instances[key] = inst
        return inst

    def _family(self, group: str, name: str) -> VariantFamily:
        family = self._families.get((group, name))
        if family is None:
            entry = self._items[group][name]
            family = VariantFamily(
                name,
                {variant: self._instance(obj) for variant, obj in entry.items()},
                self._defaults[(group, name)],
            )
            self._families[(group, name)] = family
        return family


registry = _Registry()
