from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError
from pytest_mock import MockerFixture

from inline_builder.builder import Builder, build
from tests.mocks.core import FooBar, FrozenFoo, FrozenPoint


class TestBuild:

    def test_returns_same_instance(self, foobar: FooBar):
        def configure(value: FooBar) -> None:
            value.id = 5

        alias = foobar
        result = build(foobar, configure)

        assert result is foobar
        assert result.id == alias.id == 5

    def test_calls_configure_once_with_instance(self, foobar: FooBar, mocker: MockerFixture):
        configure = mocker.Mock(return_value=None)
        build(foobar, configure)
        configure.assert_called_once_with(foobar)

    def test_ignores_configure_return_value(self, foobar: FooBar):
        assert build(foobar, lambda _: FooBar()) is foobar

    def test_builds_objects_without_builder_mixin(self):
        values = build([1, 2], lambda v: v.extend([3, 4]))
        assert values == [1, 2, 3, 4]

    def test_propagates_errors_without_rollback(self, foobar: FooBar):
        def configure(value: FooBar) -> None:
            value.id = 10
            raise ValueError("failed to configure")

        with pytest.raises(ValueError, match="failed to configure"):
            build(foobar, configure)

        assert foobar.id == 10


class TestBuilder:

    def test_configures_on_construction(self):
        def configure(value: FooBar) -> None:
            assert value.id == 0
            value.id = 1

        foobar = FooBar().with_(configure)

        assert isinstance(foobar, FooBar)
        assert foobar.id == 1

    def test_configures_in_place(self, foobar: FooBar):
        def configure(value: FooBar) -> None:
            value.id = 3

        assert foobar.with_(configure) is foobar
        assert foobar.id == 3

    def test_no_op_configure(self, foobar: FooBar):
        before = vars(foobar).copy()
        result = foobar.with_(lambda _: None)

        assert result is foobar
        assert vars(result) == before

    def test_is_builder(self, foobar: FooBar):
        assert isinstance(foobar, Builder)

    def test_cannot_assign_to_frozen_dataclass(self):
        def configure(value: FrozenFoo) -> None:
            value.id = 1  # type: ignore[misc]

        foo = FrozenFoo()
        with pytest.raises(FrozenInstanceError):
            foo.with_(configure)
        assert foo.id == 0

    def test_cannot_assign_to_frozen_model(self):
        def configure(value: FrozenPoint) -> None:
            value.x = 1  # type: ignore[misc]

        point = FrozenPoint()
        with pytest.raises(ValidationError):
            point.with_(configure)
        assert point.x == 0
