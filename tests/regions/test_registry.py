"""
Tests for the region registry.

Covers:
  - One entry per Region, with the expected strategies and parameters
  - Read-only tables
  - Load-time validation of the YAML data
  - Missing and malformed data files
"""

import shutil
from types import MappingProxyType

import pytest

from cupholder.regions import Region, RegionConfig, RegionRegistry, get_region_config, get_registry
from cupholder.regions.registry import _DATA_DIR
from cupholder.utilities.types import Unit, cm, inch


@pytest.fixture(scope="module")
def registry():
    return get_registry()


# ── Contents ───────────────────────────────────────────────────────────────────


class TestContents:
    def test_every_region_has_a_config(self, registry):
        for region in Region:
            assert isinstance(registry.get_config(region), RegionConfig)

    def test_config_region_matches_key(self, registry):
        for region, config in registry.configs.items():
            assert config.region is region

    def test_list_regions(self, registry):
        assert registry.list_regions() == list(Region)

    def test_cup_names_start_with_below_first_name(self, registry):
        for config in registry.configs.values():
            assert config.cup_names
            assert config.cup_names[0] == config.cup.below_first_cup_name

    def test_cn(self):
        config = get_region_config(Region.CN)
        assert config.band_step == cm(5)
        assert config.band_start == 70
        assert config.first_cup_threshold == cm(10)
        assert config.cup_step == cm(2.5)
        assert config.cup_generation_start == cm(7.5)
        assert config.cup.below_first_cup_value == cm(7.5)
        assert config.use_band_for_difference is False
        assert config.cup_names[:6] == ("AA", "A", "B", "C", "D", "E")
        assert config.brand == "Naitangpai"

    def test_jp(self):
        config = get_region_config(Region.JP)
        assert config.band_start == 65
        assert config.first_cup_threshold == cm(6.5)
        assert config.cup.below_first_cup_value == cm(5)
        assert config.cup_names[:3] == ("AAA", "AA", "A")
        assert config.use_band_for_difference is False

    @pytest.mark.parametrize("region", [Region.US, Region.US_CLASSIC, Region.UK])
    def test_inch_regions(self, region):
        config = get_region_config(region)
        assert config.band_step == inch(2)
        assert config.band_start == 28
        assert config.first_cup_threshold == inch(-1)
        assert config.cup_step == inch(1)
        assert config.cup.native_unit is Unit.INCH
        assert config.cup_generation_start is None
        assert config.use_band_for_difference is True

    def test_us_skips_e_and_f(self):
        names = get_region_config(Region.US).cup_names
        assert names[5:8] == ("DD", "DDD", "G")
        assert "E" not in names and "F" not in names

    def test_uk_doubles_letters(self):
        names = get_region_config(Region.UK).cup_names
        assert names[5:11] == ("DD", "E", "F", "FF", "G", "GG")
        assert "I" not in names

    def test_us_and_us_classic_share_cup_names_but_not_band_rule(self):
        us = get_region_config(Region.US)
        classic = get_region_config(Region.US_CLASSIC)
        assert us.cup_names == classic.cup_names
        assert us.band.measurement_to_band(inch(30)) == 30
        assert classic.band.measurement_to_band(inch(30)) == 34

    def test_generation_start_defaults_to_threshold(self):
        config = get_region_config(Region.US)
        assert config.generation_start() == config.first_cup_threshold

    def test_string_region_lookup(self, registry):
        assert registry.get_config("CN") is registry.get_config(Region.CN)  # type: ignore[arg-type]

    def test_unknown_region_raises_key_error(self, registry):
        with pytest.raises(KeyError):
            registry.get_config("FR")  # type: ignore[arg-type]


# ── Immutability ───────────────────────────────────────────────────────────────


class TestReadOnly:
    def test_configs_is_mapping_proxy(self, registry):
        assert isinstance(registry.configs, MappingProxyType)
        with pytest.raises(TypeError):
            registry.configs[Region.CN] = None  # type: ignore[index]

    def test_config_is_frozen(self, registry):
        with pytest.raises(AttributeError):
            registry.get_config(Region.CN).use_band_for_difference = True  # type: ignore[misc]

    def test_cup_names_are_tuples(self, registry):
        for names in registry.cup_name_lists.values():
            assert isinstance(names, tuple)


# ── Load-time validation ───────────────────────────────────────────────────────


def _copy_data(tmp_path):
    data_dir = tmp_path / "data"
    shutil.copytree(_DATA_DIR, data_dir)
    return data_dir


def _replace(path, old, new):
    text = path.read_text()
    assert old in text
    path.write_text(text.replace(old, new, 1))


class TestValidation:
    def test_copied_data_loads(self, tmp_path):
        registry = RegionRegistry(data_dir=_copy_data(tmp_path))
        assert set(registry.configs) == set(Region)

    def test_unknown_band_kind_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        _replace(data_dir / "regions.yaml", "kind: classic_inch", "kind: sister_size")
        with pytest.raises(ValueError, match="US_CLASSIC"):
            RegionRegistry(data_dir=data_dir)

    def test_unknown_unit_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        _replace(data_dir / "regions.yaml", "unit: cm", "unit: mm")
        with pytest.raises(ValueError):
            RegionRegistry(data_dir=data_dir)

    def test_unknown_cup_names_key_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        _replace(data_dir / "regions.yaml", "names: jp_letters", "names: kr_letters")
        with pytest.raises(ValueError, match="kr_letters"):
            RegionRegistry(data_dir=data_dir)

    def test_below_first_name_must_be_smallest_cup(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        _replace(data_dir / "regions.yaml", 'below_first_name: "AAA"', 'below_first_name: "AA"')
        with pytest.raises(ValueError, match="smallest"):
            RegionRegistry(data_dir=data_dir)

    def test_metric_band_without_step_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        _replace(data_dir / "regions.yaml", "step_cm: 5\n      band_start: 65", "band_start: 65")
        with pytest.raises(ValueError, match="step_cm"):
            RegionRegistry(data_dir=data_dir)

    def test_duplicate_region_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        path = data_dir / "regions.yaml"
        path.write_text(
            path.read_text()
            + (
                "\n  - id: UK\n"
                "    band:\n"
                "      kind: modern_inch\n"
                "    cup:\n"
                "      names: uk_letters\n"
                "      unit: inch\n"
                "      step: 1\n"
                "      first_threshold: -1\n"
                '      below_first_name: "AA"\n'
                "      below_first_value: -1\n"
                "    use_band_for_difference: false\n"
            )
        )
        with pytest.raises(ValueError, match="duplicate"):
            RegionRegistry(data_dir=data_dir)

    def test_missing_region_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        _replace(data_dir / "regions.yaml", "- id: UK", "- id: XX")
        with pytest.raises(ValueError) as excinfo:
            RegionRegistry(data_dir=data_dir)
        assert "XX" in str(excinfo.value)
        assert "'UK': no entry" in str(excinfo.value)

    def test_duplicate_cup_name_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        _replace(data_dir / "regions.yaml", '"DD", "DDD", "G"', '"DD", "DD", "G"')
        with pytest.raises(ValueError, match="us_letters"):
            RegionRegistry(data_dir=data_dir)

    def test_all_problems_reported_together(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        path = data_dir / "regions.yaml"
        _replace(path, "kind: classic_inch", "kind: sister_size")
        _replace(path, "names: jp_letters", "names: kr_letters")
        with pytest.raises(ValueError) as excinfo:
            RegionRegistry(data_dir=data_dir)
        message = str(excinfo.value)
        assert "US_CLASSIC" in message
        assert "kr_letters" in message


# ── YAML loading error paths ───────────────────────────────────────────────────


class TestYAMLLoadingErrors:
    def test_missing_regions_file_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        (data_dir / "regions.yaml").unlink()
        with pytest.raises(FileNotFoundError):
            RegionRegistry(data_dir=data_dir)

    def test_malformed_yaml_raises_value_error(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        (data_dir / "regions.yaml").write_text("entries: [unclosed\n")
        with pytest.raises(ValueError, match="Failed to parse"):
            RegionRegistry(data_dir=data_dir)
