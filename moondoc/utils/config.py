"""Configuration management for moondoc."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParserConfig(BaseModel):
    """Configuration for the tag parser."""

    warn_on_similar_tags: bool = Field(
        default=True, description="Warn about custom tags that look like typos"
    )
    fuzzy_tag_threshold: float = Field(
        default=80.0,
        ge=0.0,
        le=100.0,
        description="Minimum similarity score for the typo warning",
    )


class ExtractorConfig(BaseModel):
    """Configuration for assembling doc entries."""

    model_config = ConfigDict(validate_assignment=True)

    default_within: str | None = Field(
        default=None, description="Scope used when an entry has no @within tag"
    )
    include_private: bool = Field(
        default=False, description="Keep entries tagged @private"
    )
    include_ignored: bool = Field(
        default=False, description="Keep entries tagged @ignore"
    )
    file_patterns: list[str] = Field(
        default_factory=lambda: ["*.lua", "*.luau"],
        description="Glob patterns of source files to scan",
    )

    @field_validator("default_within")
    @classmethod
    def validate_default_within(cls, value: str | None) -> str | None:
        """Reject blank scope names."""
        if value is not None and not value.strip():
            raise ValueError("default_within cannot be blank")
        return value

    @field_validator("file_patterns")
    @classmethod
    def validate_patterns(cls, patterns: list[str]) -> list[str]:
        """Patterns are plain globs, not regular expressions."""
        for pattern in patterns:
            if not pattern or re.search(r"[\\^$]", pattern):
                raise ValueError(f"Invalid file pattern: {pattern!r}")
        return patterns


class OutputConfig(BaseModel):
    """Configuration for serialized output."""

    json_indent: int | None = Field(default=2, ge=0, le=8)


class MoondocConfig(BaseModel):
    """Complete configuration for moondoc."""

    version: int = 1
    parser: ParserConfig = Field(default_factory=ParserConfig)
    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_yaml(cls, file_path: str) -> "MoondocConfig":
        """Load configuration from YAML file."""
        import yaml  # type: ignore[import-untyped]

        with open(file_path) as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))
