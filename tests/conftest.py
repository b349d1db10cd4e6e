import sys
import os
import pytest
# Ensure the project root is on sys.path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


@pytest.fixture
def xml_file(tmp_path):
    """Write introspection XML to a temporary file and return its path."""
    def _write(text, name="interface.xml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
