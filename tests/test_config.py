"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from moondoc.utils.config import ExtractorConfig, MoondocConfig, ParserConfig


class TestMoondocConfig:
    """Test configuration defaults, validation and YAML loading."""

    def test_defaults(self):
        config = MoondocConfig()
        assert config.version == 1
        assert config.extractor.default_within is None
        assert config.extractor.include_private is False
        assert config.extractor.file_patterns == ["*.lua", "*.luau"]
        assert config.parser.warn_on_similar_tags is True
        assert config.output.json_indent == 2

    def test_threshold_bounds(self):
        with pytest.raises(ValidationError):
            ParserConfig(fuzzy_tag_threshold=120)

    def test_blank_default_within_rejected(self):
        with pytest.raises(ValidationError):
            ExtractorConfig(default_within="   ")

    def test_blank_default_within_assignment_rejected(self):
        """Test assigning a blank scope is validated like construction."""
        config = ExtractorConfig()
        with pytest.raises(ValidationError):
            config.default_within = "  "
        assert config.default_within is None

        config.default_within = "Util"
        assert config.default_within == "Util"

    def test_invalid_file_pattern(self):
        with pytest.raises(ValidationError):
            ExtractorConfig(file_patterns=["^.*\\.lua$"])

    def test_from_yaml(self, tmp_path):
        config_file = tmp_path / "moondoc.yaml"
        config_file.write_text(
            "version: 1\n"
            "extractor:\n"
            "  default_within: Util\n"
            "  include_private: true\n"
            "output:\n"
            "  json_indent: 4\n"
        )

        config = MoondocConfig.from_yaml(str(config_file))
        assert config.extractor.default_within == "Util"
        assert config.extractor.include_private is True
        assert config.output.json_indent == 4
        assert config.parser.fuzzy_tag_threshold == 80.0

    def test_empty_yaml(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert MoondocConfig.from_yaml(str(config_file)) == MoondocConfig()
