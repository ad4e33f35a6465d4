"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TESTPOINT__SECTION__KEY)
3. Repo YAML (<workspace>/.testpoint.yaml)
4. Global YAML (~/.config/testpoint/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TESTPOINT__<SECTION>__<KEY>=<VALUE>

Examples:
    TESTPOINT__LOGGING__LEVEL=DEBUG
    TESTPOINT__RUNNER__PACK=ruby.minitest
    TESTPOINT__RUNNER__BUNDLER=never
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
PackChoice = Literal["auto", "ruby.testunit", "ruby.minitest"]
BundlerMode = Literal["auto", "always", "never"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TESTPOINT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG traces index size, pack choice and target.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RunnerConfig(BaseModel):
    """Test runner command configuration.

    Env vars:
        TESTPOINT__RUNNER__PACK: auto, ruby.testunit or ruby.minitest
        TESTPOINT__RUNNER__RUBY: Ruby executable
        TESTPOINT__RUNNER__BUNDLER: auto, always or never
    """

    pack: PackChoice = Field(
        default="auto",
        description="Runner pack. 'auto' scores packs against the workspace and file.",
    )
    ruby: str = Field(
        default="ruby",
        description="Ruby interpreter used to run test files.",
    )
    bundler: BundlerMode = Field(
        default="auto",
        description="Prefix with 'bundle exec'. 'auto' does so when a Gemfile exists.",
    )
    load_path: list[str] = Field(
        default_factory=lambda: ["lib", "test"],
        description="Directories passed to ruby with -I, relative to the workspace root.",
    )
    extra_args: list[str] = Field(
        default_factory=list,
        description="Arguments appended after the test selector.",
    )

    @field_validator("ruby")
    @classmethod
    def validate_ruby(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Ruby executable must not be empty")
        return v


class TestPointConfig(BaseModel):
    """Root configuration for TestPoint.

    All settings can be configured via:
    1. Environment variables: TESTPOINT__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    __test__ = False

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
