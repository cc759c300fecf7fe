"""Shared pytest fixtures for rbs-inline tests."""

import pytest
from dotenv import load_dotenv
from hypothesis import settings

from rbs_inline.core.config import get_config

# Load environment variables from .env file
load_dotenv()

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached configuration around every test."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def person_source() -> str:
    """Ruby class exercising every declaration kind."""
    return """\
class Person
  include Comparable
  attr_reader :name, :age

  def initialize(name, age = 0, *rest, key:, opt: 1, **opts, &block)
  end

  def self.create(name)
  end

  alias full_name name

  private

  def secret
  end

  public def shown
  end
end
"""
