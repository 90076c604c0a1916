import pkgutil
import importlib


def import_module(modname, is_package):
    module = importlib.import_module(modname)
    imported = [modname]

    parent_modname = "%s." % modname
    if is_package:
        for _, modname, is_package in pkgutil.iter_modules(module.__path__):
            if modname == 'tests':
                continue
            imported += import_module(parent_modname + modname, is_package)

    return imported


def test_import():
    """Try to import all modules and packages"""
    imported = import_module("planar", True)

    assert "planar.math.plane" in imported
    assert "planar.cli.command" in imported
