"""Tests for registries and merging of active groups."""

import pytest

from resource_registry.exceptions import InvalidIdentifier
from resource_registry.group import GroupName
from resource_registry.registry import Registry, merge_active
from resource_registry.resources import Style


class TestGroups:
    """Group lookup and creation."""

    def test_get_group_creates_by_default(self):
        registry = Registry()
        group = registry.get_group("site")
        assert group is registry.get_group(GroupName("site"))

    def test_get_group_without_create(self):
        assert Registry().get_group("site", create=False) is None

    def test_invalid_name_rejected(self):
        with pytest.raises(InvalidIdentifier):
            Registry().get_group("not valid")

    def test_groups_sorted_and_read_only(self):
        registry = Registry()
        registry.get_group("b")
        registry.get_group("a")
        groups = registry.groups
        assert [str(name) for name in groups] == ["a", "b"]
        with pytest.raises(TypeError):
            groups[GroupName("c")] = None  # type: ignore[index]


class TestActivations:
    """Tri-state activations per group name."""

    def test_set_activation_returns_previous(self):
        registry = Registry()
        assert registry.set_activation("site", True) is None
        assert registry.set_activation("site", False) is True
        assert registry.set_activation("site", None) is False
        assert registry.activations == {}

    def test_activate_and_deactivate_chain(self):
        registry = Registry().activate("a", None, "b").deactivate("b")
        assert registry.activations == {GroupName("a"): True, GroupName("b"): False}

    def test_is_empty(self):
        registry = Registry()
        registry.get_group("site")
        assert registry.is_empty()
        registry.activate("site")
        assert not registry.is_empty()
        registry.set_activation("site", None)
        registry.get_group("site").styles.add("/a.css")
        assert not registry.is_empty()

    def test_copy_is_deep(self):
        registry = Registry().activate("site")
        registry.get_group("site").styles.add("/a.css")
        clone = registry.copy()
        clone.deactivate("site")
        clone.get_group("site").styles.add("/b.css")
        assert registry.activations == {GroupName("site"): True}
        assert len(registry.get_group("site").styles) == 1


class TestMergeActive:
    """Merging the active groups of a stack of registries."""

    @pytest.fixture
    def application(self):
        registry = Registry()
        registry.get_group("site").styles.add("/css/site.css")
        registry.get_group("admin").styles.add("/css/admin.css")
        return registry

    def test_only_active_groups_are_merged(self, application):
        request = Registry().activate("site")
        merged = merge_active([application, request])
        assert merged.styles.resolve() == (Style("/css/site.css"),)

    def test_later_registries_override(self, application):
        application.activate("site", "admin")
        request = Registry().deactivate("admin")
        merged = merge_active([application, request])
        assert merged.styles.resolve() == (Style("/css/site.css"),)

    def test_same_group_in_several_registries_is_unioned(self, application):
        request = Registry().activate("site")
        request.get_group("site").styles.add("/css/page.css")
        request.get_group("site").styles.add_constraint("/css/site.css", "/css/page.css")
        merged = merge_active([application, request])
        assert merged.styles.resolve() == (Style("/css/site.css"), Style("/css/page.css"))

    def test_nothing_active_gives_empty_group(self, application):
        assert merge_active([application]).is_empty()
        assert merge_active([]).is_empty()

    def test_registries_are_not_modified(self, application):
        request = Registry().activate("site", "admin")
        merged = merge_active([application, request])
        merged.styles.add("/css/extra.css")
        assert len(application.get_group("site").styles) == 1
        assert len(application.get_group("admin").styles) == 1
