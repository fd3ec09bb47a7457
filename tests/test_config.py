import pytest

from quadsplit import ConfigurationError, DecomposerConfig, QuadTreeDecomposer


@pytest.mark.parametrize(
    "width,height,fragment",
    [
        (6, 16, "width must be at least 8"),
        (16, 4, "height must be at least 8"),
        (15, 16, "width must be a multiple of 2"),
        (16, 17, "height must be a multiple of 2"),
    ],
)
def test_invalid_geometry_raises(width: int, height: int, fragment: str) -> None:
    with pytest.raises(ConfigurationError) as exc:
        QuadTreeDecomposer(width, height)

    assert fragment in str(exc.value)


def test_stride_smaller_than_width_raises() -> None:
    with pytest.raises(ConfigurationError):
        DecomposerConfig(width=16, height=16, stride=8)


def test_min_node_dim_must_be_positive() -> None:
    with pytest.raises(ConfigurationError):
        DecomposerConfig(width=16, height=16, min_node_dim=0)


def test_negative_offset_raises() -> None:
    with pytest.raises(ConfigurationError):
        DecomposerConfig(width=16, height=16, offset=-1)


def test_defaults() -> None:
    cfg = DecomposerConfig(width=32, height=16)

    assert cfg.stride == 32
    assert cfg.offset == 0
    assert cfg.min_node_dim == 8
    assert cfg.is_rgb is True
    assert cfg.origin == (0, 0)


def test_origin_from_offset_and_stride() -> None:
    cfg = DecomposerConfig(width=16, height=16, offset=3 * 40 + 5, stride=40)
    assert cfg.origin == (5, 3)


def test_from_dict_roundtrips_known_keys() -> None:
    cfg = DecomposerConfig.from_dict({"width": 16, "height": 8, "min_node_dim": 4, "is_rgb": False})

    assert cfg == DecomposerConfig(width=16, height=8, min_node_dim=4, is_rgb=False)


def test_from_dict_rejects_unknown_keys() -> None:
    with pytest.raises(ConfigurationError) as exc:
        DecomposerConfig.from_dict({"width": 16, "height": 16, "depth": 3})

    assert "depth" in str(exc.value)


def test_from_dict_requires_geometry() -> None:
    with pytest.raises(ConfigurationError) as exc:
        DecomposerConfig.from_dict({"width": 16})

    assert "height" in str(exc.value)


def test_decomposer_from_config_keeps_policy() -> None:
    cfg = DecomposerConfig(width=16, height=16, offset=2, stride=20, min_node_dim=2, is_rgb=False)
    dec = QuadTreeDecomposer.from_config(cfg)

    assert dec.config == cfg


def test_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        QuadTreeDecomposer(8, 7)


@pytest.mark.parametrize(
    "data",
    [
        {"width": 16.0, "height": 16},
        {"width": "16", "height": 16},
        {"width": 16, "height": 16, "stride": "20"},
        {"width": 16, "height": 16, "min_node_dim": 2.5},
        {"width": 16, "height": 16, "is_rgb": "yes"},
    ],
)
def test_non_integer_values_raise_configuration_error(data: dict) -> None:
    with pytest.raises(ConfigurationError):
        DecomposerConfig.from_dict(data)
