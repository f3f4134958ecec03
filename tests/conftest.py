from __future__ import annotations

from typing import Iterator

import pytest

from attribute_model.Traits import GuardsAttributes


@pytest.fixture(autouse=True)
def reguard_models() -> Iterator[None]:
    """The unguarded switch is process-wide, so every test starts and ends guarded."""
    GuardsAttributes.reguard()
    yield
    GuardsAttributes.reguard()
