"""Tests for coordspace.config."""

import pytest

from coordspace.config import Settings, settings


def test_defaults():
    """A fresh Settings holds the default values."""
    config = Settings()
    assert config.default_precision == 1
    assert config["default_precision"] == 1
    assert config.to_dict() == {"default_precision": 1}
    assert len(config) == 1
    assert list(config) == ["default_precision"]


def test_overrides():
    """Keyword arguments override the defaults."""
    config = Settings(default_precision=4)
    assert config.default_precision == 4


def test_attribute_and_item_access_agree():
    """Attribute and item assignment write the same value."""
    config = Settings()
    config.default_precision = 2
    assert config["default_precision"] == 2
    config["default_precision"] = 5
    assert config.default_precision == 5


@pytest.mark.parametrize("value", [-1, 2.0, "3", None, False])
def test_precision_is_validated(value):
    """An invalid default precision is rejected when it is set."""
    config = Settings()
    with pytest.raises(ValueError, match="precision must be a non-negative integer"):
        config.default_precision = value
    assert config.default_precision == 1

    with pytest.raises(ValueError):
        Settings(default_precision=value)


def test_extra_keys():
    """Unknown keys are stored and can be deleted again."""
    config = Settings(label="scene")
    assert config.label == "scene"
    del config.label
    assert "label" not in config
    with pytest.raises(AttributeError):
        _ = config.label


def test_builtin_keys_cannot_be_deleted():
    """Deleting a built-in setting raises KeyError."""
    config = Settings()
    with pytest.raises(KeyError):
        del config["default_precision"]


def test_reset():
    """reset restores every default and drops extra keys."""
    config = Settings(default_precision=6, label="scene")
    config.reset()
    assert config.to_dict() == {"default_precision": 1}


def test_module_settings_instance():
    """The package exposes a shared Settings instance."""
    assert isinstance(settings, Settings)
    settings.default_precision = 3
    assert settings.to_dict()["default_precision"] == 3
