# (C) 2024 Irreducible Inc.

import functools
import pathlib
import types
from typing import Callable, Iterable

import pytest


def pytest_pycollect_makemodule(module_path: pathlib.Path, parent) -> pytest.Module:
    """Collects a test module, expanding the tests marked with @pytest.mark.parametrize_hypothesis.

    A test marked @pytest.mark.parametrize_hypothesis(fast=[...], slow=[...]) is replaced by one copy per keyword,
    named test_name_fast, test_name_slow and so on. Each copy is wrapped in the listed decorators (typically
    hypothesis' @settings and @given) and carries the marker named after its keyword, so that the slow variants can
    be deselected with `-m "not slow"`.
    """
    if module_path.name == "__init__.py":
        return pytest.Package.from_parent(parent, path=module_path)
    mod: pytest.Module = pytest.Module.from_parent(parent, path=module_path)
    expand_parametrize_hypothesis(mod)
    return mod


def _parametrize_hypothesis_mark(obj) -> pytest.Mark | None:
    if not callable(obj):
        return None
    return next((m for m in getattr(obj, "pytestmark", []) if m.name == "parametrize_hypothesis"), None)


def expand_parametrize_hypothesis(mod: pytest.Module) -> None:
    namespace = getattr(mod.obj, "__dict__", {})
    marked = {name: obj for name, obj in namespace.items() if _parametrize_hypothesis_mark(obj) is not None}

    for test_name, test_func in marked.items():
        delattr(mod.obj, test_name)
        mark = _parametrize_hypothesis_mark(test_func)
        assert mark is not None

        if mark.args:
            raise ValueError(
                f"{mod.name}.{test_name}: @pytest.mark.parametrize_hypothesis takes keyword arguments only"
            )

        for variant, decorators in mark.kwargs.items():
            if not isinstance(decorators, (list, tuple)) or not all(callable(d) for d in decorators):
                raise ValueError(
                    f"{mod.name}.{test_name}: '{variant}' must be a list of decorators, got {decorators!r}"
                )
            variant_name = f"{test_name}_{variant}"
            variant_func = clone_with_decorators(test_func, variant_name, decorators)
            setattr(mod.obj, variant_name, getattr(pytest.mark, variant)(variant_func))


def clone_with_decorators(test_func: Callable, new_name: str, decorators: Iterable[Callable]) -> Callable:
    """Copies a test function under a new name and applies the decorators to the copy, innermost first."""
    clone: Callable = types.FunctionType(
        code=test_func.__code__,
        globals=test_func.__globals__,
        name=new_name,
        argdefs=test_func.__defaults__,
        closure=test_func.__closure__,
    )
    clone = functools.update_wrapper(clone, test_func)
    clone.__name__ = new_name
    for decorator in decorators:
        clone = decorator(clone)
    return clone
