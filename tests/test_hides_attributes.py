"""Tests for hidden/visible serialization preferences."""

from __future__ import annotations

import pytest

from attribute_model.Traits import HidesAttributes


class TestHidesAttributes:
    """Test suite for the HidesAttributes mixin."""

    @pytest.fixture
    def model(self) -> HidesAttributes:
        """Create a bare visibility instance."""
        return HidesAttributes()

    def test_hidden_manipulation(self, model: HidesAttributes) -> None:
        """Test setting the hidden list."""
        assert model.get_hidden() == []

        model.set_hidden(['name', 'email'])

        assert model.get_hidden() == ['name', 'email']

    def test_visible_manipulation(self, model: HidesAttributes) -> None:
        """Test setting the visible list."""
        assert model.get_visible() == []

        model.set_visible(['name', 'email'])

        assert model.get_visible() == ['name', 'email']

    def test_make_visible(self, model: HidesAttributes) -> None:
        """Test un-hiding keys and extending a non-empty visible list."""
        model.set_hidden(['name'])
        assert model.get_hidden() == ['name']

        model.make_visible('name')

        assert model.get_hidden() == []
        assert model.get_visible() == []

        model.set_visible(['name'])
        model.make_visible(['email'])

        assert model.get_visible() == ['name', 'email']

    def test_make_visible_accepts_several_keys(self, model: HidesAttributes) -> None:
        """Test positional keys and duplicates."""
        model.set_hidden(['name', 'email', 'password'])
        model.set_visible(['name'])

        model.make_visible('name', 'email')

        assert model.get_hidden() == ['password']
        assert model.get_visible() == ['name', 'name', 'email']

    def test_make_visible_if(self, model: HidesAttributes) -> None:
        """Test conditional visibility with callables and booleans."""
        model.set_visible(['address'])

        model.make_visible_if(lambda: False, 'name')
        assert model.get_visible() == ['address']

        model.make_visible_if(True, 'name')
        assert model.get_visible() == ['address', 'name']

    def test_make_visible_if_passes_the_model(self, model: HidesAttributes) -> None:
        """Test a one-argument predicate receives the model."""
        received = []

        def condition(target: HidesAttributes) -> bool:
            received.append(target)
            return True

        model.set_hidden(['name'])
        model.make_visible_if(condition, ['name'])

        assert received == [model]
        assert model.get_hidden() == []

    def test_make_hidden(self, model: HidesAttributes) -> None:
        """Test appending to the hidden list."""
        model.set_hidden(['name'])
        assert model.get_hidden() == ['name']

        model.make_hidden(['email'])

        assert model.get_hidden() == ['name', 'email']

    def test_make_hidden_if(self, model: HidesAttributes) -> None:
        """Test conditional hiding."""
        model.make_hidden_if(lambda: False, 'name')
        assert model.get_hidden() == []

        model.make_hidden_if(True, 'name')
        assert model.get_hidden() == ['name']

        model.make_hidden_if(lambda target: target is model, 'email')
        assert model.get_hidden() == ['name', 'email']

    def test_arrayable_items(self, model: HidesAttributes) -> None:
        """Test the visible filter runs first, then hidden keys are removed."""
        values = {'a': 1, 'b': 2, 'c': 3}

        assert model.get_arrayable_items(values) == values

        model.set_visible(['a', 'b'])
        model.set_hidden(['b'])

        assert model.get_arrayable_items(values) == {'a': 1}

    def test_arrayable_items_keep_order(self, model: HidesAttributes) -> None:
        """Test filtering keeps the order of the values, not of the lists."""
        model.set_visible(['c', 'a'])

        assert list(model.get_arrayable_items({'a': 1, 'b': 2, 'c': 3})) == ['a', 'c']
