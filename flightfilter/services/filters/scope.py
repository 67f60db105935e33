"""
Discovery scopes for FilterRegistry.

A scope names where filter classes are looked for:
- PACKAGE: a dotted module path; the package and its direct submodules are imported
- DIRECTORY: a filesystem directory; every non-dunder *.py file in it is loaded

Enumeration never raises: a scope that cannot be imported, or a module that
fails to load, simply contributes no classes.
"""

import hashlib
import importlib
import importlib.util
import inspect
import logging
import os
import pkgutil
import sys
from enum import Enum
from pathlib import Path
from types import ModuleType
from typing import Any, Iterator, Optional

from flightfilter.exceptions import FilterConfigurationError

logger = logging.getLogger(__name__)

# Prefix of the sys.modules entries created for directory scopes
DIRECTORY_MODULE_PREFIX = "_flightfilter_scope"


class ScopeKind(str, Enum):
    """Kind of location a DiscoveryScope points at."""
    PACKAGE = "PACKAGE"
    DIRECTORY = "DIRECTORY"


def _looks_like_path(identifier: str) -> bool:
    separators = [os.sep, "/"]
    if os.altsep:
        separators.append(os.altsep)
    return any(sep in identifier for sep in separators) or identifier.startswith((".", "~"))


def resolve_qualified(path: str) -> Optional[Any]:
    """
    Resolve "package.module.Attribute" to the attribute it names.

    Args:
        path: Fully-qualified dotted path

    Returns:
        The attribute, or None when the module cannot be imported or does
        not define it
    """
    module_name, _, attribute = path.rpartition(".")
    if not module_name or not attribute:
        return None
    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        logger.debug(f"Cannot import '{module_name}' while resolving '{path}': {e}")
        return None
    return getattr(module, attribute, None)


class DiscoveryScope:
    """
    Validated discovery location.

    Build instances with DiscoveryScope.parse(); the constructor performs no
    validation.
    """

    def __init__(self, identifier: str, kind: ScopeKind):
        self.identifier = identifier
        self.kind = kind

    @classmethod
    def parse(cls, identifier: Any) -> "DiscoveryScope":
        """
        Validate a scope identifier.

        Path-like identifiers (containing a separator or starting with "." or
        "~") are DIRECTORY scopes and must be readable directories; use
        "./plugins" rather than "plugins" for a relative directory. Anything
        else must be a dotted module path, whose existence is only checked
        at discovery time.

        Args:
            identifier: Directory path or dotted package path

        Returns:
            DiscoveryScope

        Raises:
            FilterConfigurationError: If the identifier is None, blank, a
                missing/unreadable directory or not a valid module path

        Examples:
            >>> DiscoveryScope.parse("flightfilter.services.filters").kind
            <ScopeKind.PACKAGE: 'PACKAGE'>
            >>> DiscoveryScope.parse("   ")
            Traceback (most recent call last):
            ...
            flightfilter.exceptions.FilterConfigurationError: Scope '   ' cannot be used ...
        """
        if not isinstance(identifier, str) or not identifier.strip():
            raise FilterConfigurationError(identifier, "scope cannot be None or blank")

        stripped = identifier.strip()

        if _looks_like_path(stripped):
            path = Path(stripped).expanduser()
            if not path.is_dir():
                raise FilterConfigurationError(identifier, "directory does not exist")
            if not os.access(path, os.R_OK | os.X_OK):
                raise FilterConfigurationError(identifier, "directory is not readable")
            return cls(str(path.resolve()), ScopeKind.DIRECTORY)

        if all(part.isidentifier() for part in stripped.split(".")):
            return cls(stripped, ScopeKind.PACKAGE)

        raise FilterConfigurationError(identifier, "neither a directory nor a dotted module path")

    def qualify(self, name: str) -> Optional[str]:
        """Dotted path of `name` inside a PACKAGE scope; None for directories."""
        if self.kind is ScopeKind.PACKAGE:
            return f"{self.identifier}.{name}"
        return None

    def iter_modules(self) -> Iterator[ModuleType]:
        """Yield every module of the scope that loads successfully."""
        if self.kind is ScopeKind.DIRECTORY:
            yield from self._iter_directory_modules()
        else:
            yield from self._iter_package_modules()

    def iter_classes(self) -> Iterator[type]:
        """Yield each class defined (not just imported) by a scope module, once."""
        seen: set[type] = set()
        for module in self.iter_modules():
            for _, member in inspect.getmembers(module, inspect.isclass):
                if member.__module__ != module.__name__ or member in seen:
                    continue
                seen.add(member)
                yield member

    def find_class(self, name: str) -> Optional[Any]:
        """
        Locate `name` inside the scope.

        Tries the scope-qualified dotted path first (PACKAGE scopes), then a
        class of the scope whose __name__ equals `name`.
        """
        qualified = self.qualify(name)
        if qualified is not None:
            found = resolve_qualified(qualified)
            if found is not None:
                return found

        for candidate in self.iter_classes():
            if candidate.__name__ == name:
                return candidate
        return None

    def _iter_package_modules(self) -> Iterator[ModuleType]:
        try:
            package = importlib.import_module(self.identifier)
        except Exception as e:
            logger.warning(f"Scope '{self.identifier}' cannot be imported, nothing to discover: {e}")
            return

        yield package

        search_path = getattr(package, "__path__", None)
        if search_path is None:
            return

        for module_info in pkgutil.iter_modules(search_path, prefix=f"{self.identifier}."):
            try:
                yield importlib.import_module(module_info.name)
            except Exception as e:
                logger.debug(f"Skipping module '{module_info.name}': {e}")

    def _iter_directory_modules(self) -> Iterator[ModuleType]:
        digest = hashlib.sha1(self.identifier.encode("utf-8")).hexdigest()[:10]
        try:
            files = sorted(Path(self.identifier).glob("*.py"))
        except OSError as e:
            logger.warning(f"Scope '{self.identifier}' cannot be listed, nothing to discover: {e}")
            return

        for file_path in files:
            if file_path.stem.startswith("__"):
                continue
            module_name = f"{DIRECTORY_MODULE_PREFIX}_{digest}_{file_path.stem}"
            module = sys.modules.get(module_name) or _load_file(module_name, file_path)
            if module is not None:
                yield module

    def __str__(self) -> str:
        return self.identifier

    def __repr__(self) -> str:
        return f"DiscoveryScope({self.identifier!r}, {self.kind.value})"


def _load_file(module_name: str, file_path: Path) -> Optional[ModuleType]:
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    if spec is None or spec.loader is None:
        return None

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        logger.debug(f"Skipping file '{file_path}': {e}")
        return None
    return module
