"""
API endpoint implementations.

This package auto-imports all entity modules to trigger action registration.
A new entity only needs a new .py file with @action decorators.
"""

import importlib
import pkgutil

# Auto-import all modules in this package to trigger registration
for _, module_name, _ in pkgutil.iter_modules(__path__):
    importlib.import_module(f"{__name__}.{module_name}")
