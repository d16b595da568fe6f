"""Tests for domain entities and finder configuration."""

import pytest
from pydantic import ValidationError

from model_finder import CacheScope, FinderConfig, ValueObject
from tests.models import Person


def test_value_object_normalizes_input():
    """Test ValueObject normalizes its raw input."""
    value = ValueObject.from_input("  Jane &amp;   Doe ")
    assert value.value == "Jane & Doe"
    assert str(value) == "Jane & Doe"


def test_value_object_passes_through_existing_instance():
    """Test an existing ValueObject is returned unchanged."""
    value = ValueObject.from_input("x")
    assert ValueObject.from_input(value) is value


def test_value_object_is_immutable():
    """Test ValueObject cannot be modified."""
    value = ValueObject.from_input("x")
    with pytest.raises(AttributeError):
        value.value = "y"  # type: ignore[misc]


def test_cache_scope_tag_accessors():
    """Test the global and entity tag accessors."""
    scope = CacheScope(key="jane", tags=("model-finder", "person"))
    assert scope.global_tag == "model-finder"
    assert scope.entity_tag == "person"


def test_finder_config_accepts_attributes_and_names():
    """Test columns given as mapped attributes or names."""
    config = FinderConfig(model=Person, columns=[Person.name, "email"])
    assert config.columns == ("name", "email")
    assert config.ttl == 86_400
    assert config.global_tag == "model-finder"


def test_finder_config_requires_columns():
    """Test an empty column list is rejected."""
    with pytest.raises(ValidationError):
        FinderConfig(model=Person, columns=[])


def test_finder_config_rejects_unknown_column():
    """Test unknown column names are rejected."""
    with pytest.raises(ValidationError, match="nickname"):
        FinderConfig(model=Person, columns=["name", "nickname"])


def test_finder_config_rejects_unmapped_class():
    """Test a non-SQLAlchemy class is rejected."""
    with pytest.raises(ValidationError, match="not a SQLAlchemy mapped class"):
        FinderConfig(model=dict, columns=["name"])


def test_finder_config_rejects_non_positive_ttl():
    """Test a zero TTL is rejected."""
    with pytest.raises(ValidationError):
        FinderConfig(model=Person, columns=["name"], ttl=0)
