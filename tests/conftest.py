"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local testpoint package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of testpoint modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("testpoint"):
        del sys.modules[module_name]


CALCULATOR_TEST = """\
require 'test/unit'

class CalculatorTest < Test::Unit::TestCase
  def setup
    @calc = Calculator.new
  end

  def test_addition
    assert_equal 4, @calc.add(2, 2)
  end

  def test_subtraction
    assert_equal 0, @calc.sub(2, 2)
  end
end

class HelperTest < Test::Unit::TestCase
  def test_helper_loaded
    assert true
  end
end
"""


@pytest.fixture
def calculator_source() -> str:
    """A test-unit file with two test classes."""
    return CALCULATOR_TEST


@pytest.fixture
def ruby_workspace(tmp_path: Path) -> Path:
    """A workspace with a Gemfile and test/calculator_test.rb."""
    (tmp_path / "Gemfile").write_text("source 'https://rubygems.org'\ngem 'test-unit'\n")
    test_dir = tmp_path / "test"
    test_dir.mkdir()
    (test_dir / "calculator_test.rb").write_text(CALCULATOR_TEST)
    return tmp_path
