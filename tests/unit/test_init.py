from __future__ import annotations

import aretry


def test_version() -> None:
    assert isinstance(aretry.__version__, str)


def test_all_names_are_exported() -> None:
    for name in aretry.__all__:
        assert hasattr(aretry, name), name
