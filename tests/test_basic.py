"""
Basic tests for PwGen Install Helper
"""
from pwgen_install.cli import main


def test_import():
    """Test that we can import the main module"""
    assert main is not None


def test_version():
    """Test version is accessible"""
    from pwgen_install import __version__
    assert __version__ == "1.2.0"
